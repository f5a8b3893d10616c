"""Operation that leaves the destination property untouched."""
from typing import Any

from objmap.mapping_operation.base import MappingOperation


class Ignore(MappingOperation):
    """Ignore a destination property."""

    def map_property(self, property_name: str, source: Any, destination: Any) -> None:
        pass
