#!/usr/bin/env python3
"""objmap - Entry point."""
import sys
import os
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import click
from colorama import Fore, Style, init

from config import app_config
from objmap import __version__
from objmap.cli.inspector import MappingInspector
from objmap.configuration.auto_mapper_config import AutoMapperConfig
from objmap.exceptions import ObjmapError

# Initialize colorama
init(autoreset=True)

LOAD_ERRORS = (ValueError, ImportError, AttributeError, ObjmapError)


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}objmap{Fore.CYAN}                               ║")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Object Mapping Configuration{Fore.CYAN}         ║")
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    click.echo()


def load_inspector(target: str) -> MappingInspector:
    """Configure a fresh registry from `target`, exiting on failure."""
    try:
        config = AutoMapperConfig.from_app_config(app_config)
        return MappingInspector.from_target(target, config)
    except LOAD_ERRORS as e:
        click.echo(f"{Fore.RED}Failed to load {target}: {e}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """objmap - Inspect object mapping configurations."""
    logging.basicConfig(level=app_config.log_level.upper())


@cli.command(name="inspect")
@click.argument("target")
def inspect_mappings(target):
    """List the mappings configured by TARGET (module:function)."""
    print_banner()

    inspector = load_inspector(target)
    count = inspector.print_mappings()

    click.echo(f"\n{Fore.GREEN}✅ {count} mapping(s)")


@cli.command()
@click.argument("target")
@click.argument("source")
@click.argument("destination")
@click.argument("property_name")
def resolve(target, source, destination, property_name):
    """Show the operation SOURCE -> DESTINATION uses for PROPERTY_NAME."""
    inspector = load_inspector(target)

    mapping = inspector.find_mapping(source, destination)
    if mapping is None:
        click.echo(f"{Fore.RED}No mapping registered for {source} -> {destination}")
        sys.exit(1)

    operation = mapping.get_mapping_operation_for(property_name)
    origin = "explicit" if mapping.has_operation_for(property_name) else "default"
    click.echo(f"{property_name}: {operation.describe()} ({origin})")


if __name__ == "__main__":
    cli()
