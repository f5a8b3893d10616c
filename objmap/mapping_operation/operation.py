"""Factory for the built-in mapping operations."""
from typing import Any, Callable

from objmap.mapping_operation.base import MappingOperation
from objmap.mapping_operation.default_mapping_operation import DefaultMappingOperation
from objmap.mapping_operation.from_property import FromProperty
from objmap.mapping_operation.ignore import Ignore
from objmap.mapping_operation.map_from import MapFrom
from objmap.mapping_operation.set_to import SetTo


class Operation:
    """Factory for creating mapping operations."""

    @staticmethod
    def map_from(value_callback: Callable[[Any], Any]) -> MappingOperation:
        """Wrap a transform function into a custom operation."""
        return MapFrom(value_callback)

    @staticmethod
    def ignore() -> MappingOperation:
        return Ignore()

    @staticmethod
    def from_property(source_property: str) -> MappingOperation:
        return FromProperty(source_property)

    @staticmethod
    def set_to(value: Any) -> MappingOperation:
        return SetTo(value)

    @staticmethod
    def default() -> MappingOperation:
        return DefaultMappingOperation()
