"""Custom operation backed by a transform function."""
from typing import Any, Callable

from objmap.mapping_operation.base import MappingOperation


class MapFrom(MappingOperation):
    """
    Computes a destination property with a user supplied function.

    The function receives the whole source object:

        Operation.map_from(lambda user: f"{user.first_name} {user.last_name}")
    """

    def __init__(self, value_callback: Callable[[Any], Any]):
        super().__init__()
        self.value_callback = value_callback

    def map_property(self, property_name: str, source: Any, destination: Any) -> None:
        self._write(destination, property_name, self.value_callback(source))

    def describe(self) -> str:
        name = getattr(self.value_callback, "__qualname__", repr(self.value_callback))
        return f"MapFrom({name})"
