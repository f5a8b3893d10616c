"""Convention based fallback operation for unmapped properties."""
from typing import Any

from objmap.mapping_operation.base import (
    MappingOperation,
    has_readable_property,
    read_property,
)


class DefaultMappingOperation(MappingOperation):
    """
    Copies the source property matching the destination property name.

    When the options carry naming conventions, the destination name is
    translated into the source convention first (e.g. "firstName" is read
    from "first_name").
    """

    def map_property(self, property_name: str, source: Any, destination: Any) -> None:
        source_name = self.get_source_property_name(property_name)
        if not has_readable_property(source, source_name):
            return

        self._write(destination, property_name, read_property(source, source_name))

    def get_source_property_name(self, property_name: str) -> str:
        """Name of the source property feeding `property_name`."""
        options = self.get_options()
        if options is None or not options.should_convert_name():
            return property_name

        return options.source_member_naming_convention.translate(property_name)
