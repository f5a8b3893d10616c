"""
Property Schema - answers "does property P exist on type T"

Lookup order for a type:
1. Explicit descriptors registered with register()
2. Dataclass fields
3. Class annotations (including inherited ones)
4. __slots__
5. Class attributes and properties (public names only)

Instance attributes assigned only inside __init__ are not visible to a
class-level lookup; register such types explicitly.
"""

import dataclasses
import logging
from typing import Any, Dict, Iterable, Set

logger = logging.getLogger(__name__)


class PropertySchema:
    """Schema facility used to validate property registrations"""

    def __init__(self):
        self._descriptors: Dict[Any, Set[str]] = {}

    def register(self, type_: Any, property_names: Iterable[str]) -> None:
        """
        Register an explicit property list for a type

        Args:
            type_: Class (or any hashable type identifier such as a string)
            property_names: Names of the properties the type exposes
        """
        self._descriptors[type_] = set(property_names)
        logger.debug(f"Registered schema for {self.type_name(type_)}: {sorted(self._descriptors[type_])}")

    def has_property(self, type_: Any, name: str) -> bool:
        """Check whether `type_` exposes a property called `name`"""
        return name in self.get_properties(type_)

    def get_properties(self, type_: Any) -> Set[str]:
        """Collect every property name known for a type"""
        if type_ in self._descriptors:
            return set(self._descriptors[type_])

        if not isinstance(type_, type):
            return set()

        names: Set[str] = set()

        if dataclasses.is_dataclass(type_):
            names.update(f.name for f in dataclasses.fields(type_))

        for klass in type_.__mro__:
            if klass is object:
                continue
            names.update(getattr(klass, "__annotations__", {}).keys())

            slots = klass.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            names.update(slots)

            for attr, value in klass.__dict__.items():
                if attr.startswith("_") or isinstance(value, (staticmethod, classmethod)):
                    continue
                if isinstance(value, property) or not callable(value):
                    names.add(attr)

        return names

    @staticmethod
    def type_name(type_: Any) -> str:
        """Readable, qualified name for a type identifier"""
        if isinstance(type_, type):
            return f"{type_.__module__}.{type_.__qualname__}"
        return str(type_)
