"""Render a configured registry for the command line."""
import importlib
import logging
from typing import Callable, Optional

import click
from colorama import Fore, Style

from objmap.configuration.auto_mapper_config import AutoMapperConfig
from objmap.configuration.mapping import Mapping

logger = logging.getLogger(__name__)


def load_configurator(target: str) -> Callable[[AutoMapperConfig], None]:
    """
    Import a configurator from "package.module:function".

    Raises:
        ValueError: If the target is not in module:function form
        ImportError: If the module cannot be imported
        AttributeError: If the function does not exist
    """
    module_name, sep, func_name = target.partition(":")
    if not sep or not module_name or not func_name:
        raise ValueError(f"Expected module:function, got {target!r}")

    module = importlib.import_module(module_name)
    return getattr(module, func_name)


class MappingInspector:
    """Prints mappings and resolves operations of a registry."""

    def __init__(self, config: AutoMapperConfig):
        self.config = config

    @classmethod
    def from_target(cls, target: str, config: AutoMapperConfig) -> "MappingInspector":
        """Run the configurator found at `target` against `config`."""
        configurator = load_configurator(target)
        configurator(config)
        logger.debug(f"Loaded {len(config.get_mappings())} mapping(s) from {target}")
        return cls(config)

    def print_header(self, title: str):
        """Print a section header."""
        click.echo(f"\n{Fore.CYAN}{'━' * 45}")
        click.echo(f"{Fore.CYAN}{title}")
        click.echo(f"{Fore.CYAN}{'━' * 45}{Style.RESET_ALL}\n")

    def print_mappings(self) -> int:
        """Print every mapping. Returns the number printed."""
        mappings = self.config.get_mappings()
        if not mappings:
            click.echo(f"{Fore.YELLOW}No mappings registered")
            return 0

        for mapping in mappings:
            self.print_mapping(mapping)
        return len(mappings)

    def print_mapping(self, mapping: Mapping):
        self.print_header(
            f"{mapping.get_source_class_name()} → {mapping.get_destination_class_name()}"
        )

        for key, value in mapping.get_options().to_dict().items():
            click.echo(f"  {key:40s} {value}")

        properties = mapping.get_registered_properties()
        if not properties:
            click.echo(f"\n{Fore.YELLOW}  No explicit property rules")
            return

        click.echo(f"\n{Fore.GREEN}  Property rules:")
        for name in properties:
            operation = mapping.get_mapping_operation_for(name)
            click.echo(f"  {name:30s} {operation.describe()}")

    def find_mapping(self, source_name: str, destination_name: str) -> Optional[Mapping]:
        """Look up a mapping by short or qualified type names."""
        for mapping in self.config.get_mappings():
            if self._matches(mapping.source_type, source_name) and self._matches(
                mapping.destination_type, destination_name
            ):
                return mapping
        return None

    def _matches(self, type_, name: str) -> bool:
        if self.config.schema.type_name(type_) == name:
            return True
        return getattr(type_, "__name__", None) == name
