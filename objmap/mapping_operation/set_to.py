"""Operation writing a constant value."""
from typing import Any

from objmap.mapping_operation.base import MappingOperation


class SetTo(MappingOperation):
    """Always set the destination property to a fixed value."""

    def __init__(self, value: Any):
        super().__init__()
        self.value = value

    def map_property(self, property_name: str, source: Any, destination: Any) -> None:
        self._write(destination, property_name, self.value)

    def describe(self) -> str:
        return f"SetTo({self.value!r})"
