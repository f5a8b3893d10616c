"""Registry owning the mappings of an application."""
import logging
from typing import Any, Dict, List, Optional, Tuple

from objmap.configuration.mapping import Mapping
from objmap.configuration.options import Options
from objmap.naming.naming_convention import get_naming_convention
from objmap.schema.property_schema import PropertySchema

logger = logging.getLogger(__name__)


class AutoMapperConfig:
    """Creates and looks up mappings by (source, destination) pair."""

    def __init__(
        self,
        options: Optional[Options] = None,
        schema: Optional[PropertySchema] = None,
    ):
        """
        Initialize registry

        Args:
            options: Default options template cloned into every new mapping
            schema: Schema facility used to validate property registrations
        """
        self.options = options or Options.default()
        self.schema = schema or PropertySchema()
        self.mappings: Dict[Tuple[Any, Any], Mapping] = {}

    @classmethod
    def from_app_config(cls, app_config) -> "AutoMapperConfig":
        """Build a registry whose default options come from application config."""
        defaults = app_config.mapper_defaults
        options = Options.default()

        if defaults.source_naming and defaults.destination_naming:
            options.set_source_member_naming_convention(get_naming_convention(defaults.source_naming))
            options.set_destination_member_naming_convention(
                get_naming_convention(defaults.destination_naming)
            )
        elif defaults.source_naming or defaults.destination_naming:
            logger.warning("Naming conversion needs both source and destination conventions; ignoring")

        options.should_skip_constructor = defaults.skip_constructor
        options.ignore_null_properties = defaults.ignore_null_properties

        return cls(options=options)

    def get_options(self) -> Options:
        """Default options template for new mappings."""
        return self.options

    def register_mapping(self, source_type: Any, destination_type: Any) -> Mapping:
        """
        Create the mapping for a pair

        A pair that is already registered is replaced by a fresh mapping.

        Returns:
            Mapping: The new mapping, ready for configuration
        """
        key = (source_type, destination_type)
        if key in self.mappings:
            logger.warning(
                f"Replacing mapping {self.schema.type_name(source_type)} -> "
                f"{self.schema.type_name(destination_type)}"
            )

        mapping = Mapping(source_type, destination_type, self)
        self.mappings[key] = mapping
        logger.debug(f"Registered {mapping!r}")
        return mapping

    def has_mapping_for(self, source_type: Any, destination_type: Any) -> bool:
        return (source_type, destination_type) in self.mappings

    def get_mapping_for(self, source_type: Any, destination_type: Any) -> Optional[Mapping]:
        return self.mappings.get((source_type, destination_type))

    def get_mappings(self) -> List[Mapping]:
        return list(self.mappings.values())
