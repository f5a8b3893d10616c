"""Abstract base class for mapping operations."""
import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping as MappingABC, MutableMapping
from typing import Any, Optional

logger = logging.getLogger(__name__)

_MISSING = object()


def read_property(obj: Any, name: str, default: Any = None) -> Any:
    """Read a property from a dict-like or attribute-based object."""
    if isinstance(obj, MappingABC):
        return obj.get(name, default)
    return getattr(obj, name, default)


def has_readable_property(obj: Any, name: str) -> bool:
    """Check whether a property can be read from an object."""
    return read_property(obj, name, _MISSING) is not _MISSING


def write_property(obj: Any, name: str, value: Any) -> None:
    """Write a property on a dict-like or attribute-based object."""
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)


class MappingOperation(ABC):
    """
    Rule producing the value of one destination property.

    The options reference is injected by the mapping that configured the
    operation and is only read when the operation runs. The operation never
    owns it.
    """

    def __init__(self):
        self._options = None

    def set_options(self, options) -> None:
        """Make the owning mapping's Options available to the operation."""
        self._options = options

    def get_options(self):
        return self._options

    @abstractmethod
    def map_property(self, property_name: str, source: Any, destination: Any) -> None:
        """
        Produce one destination property from the source object.

        Args:
            property_name: Name of the destination property
            source: Source object (attributes or dict keys)
            destination: Destination object, modified in place
        """
        pass

    def _write(self, destination: Any, property_name: str, value: Any) -> None:
        options: Optional[Any] = self.get_options()
        if value is None and options is not None and options.ignore_null_properties:
            logger.debug(f"Skipping null value for {property_name}")
            return
        write_property(destination, property_name, value)

    def __eq__(self, other):
        # Operations compare by configuration; the injected options are not part of it.
        if type(self) is not type(other):
            return NotImplemented
        mine = {k: v for k, v in vars(self).items() if k != "_options"}
        theirs = {k: v for k, v in vars(other).items() if k != "_options"}
        return mine == theirs

    def __hash__(self):
        # Consistent with __eq__: equal operations share a type.
        return hash(type(self))

    def __deepcopy__(self, memo):
        # Callbacks and the injected options are shared, not copied.
        clone = copy.copy(self)
        memo[id(self)] = clone
        for key, value in vars(self).items():
            if key == "_options" or callable(value):
                continue
            setattr(clone, key, copy.deepcopy(value, memo))
        return clone

    def describe(self) -> str:
        """Short human-readable description, used by the inspector."""
        return type(self).__name__

    def __repr__(self):
        return f"<{self.describe()}>"
