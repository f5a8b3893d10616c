"""Operation reading a differently named source property."""
from typing import Any

from objmap.mapping_operation.base import (
    MappingOperation,
    has_readable_property,
    read_property,
)


class FromProperty(MappingOperation):
    """Copy the value of `source_property`, bypassing naming conventions."""

    def __init__(self, source_property: str):
        super().__init__()
        self.source_property = source_property

    def map_property(self, property_name: str, source: Any, destination: Any) -> None:
        if not has_readable_property(source, self.source_property):
            return
        self._write(destination, property_name, read_property(source, self.source_property))

    def describe(self) -> str:
        return f"FromProperty({self.source_property!r})"
