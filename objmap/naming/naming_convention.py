"""
Naming conventions - translate property names between naming styles

A convention renders any property name in its own style, so matching a
destination property against a source object is:

    source_convention.translate(destination_name)

Supports:
- snake_case
- camelCase
- PascalCase
"""

import re
from abc import ABC, abstractmethod
from typing import List

_WORD_BOUNDARY = re.compile(r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+|[A-Z]+")


def split_words(name: str) -> List[str]:
    """Split a property name in any supported style into lowercase words."""
    return [word.lower() for word in _WORD_BOUNDARY.findall(name)]


class NamingConvention(ABC):
    """Abstract base class for naming conventions."""

    @abstractmethod
    def translate(self, name: str) -> str:
        """
        Render a property name in this convention.

        Args:
            name: Property name in any style (e.g., "first_name", "firstName")

        Returns:
            str: The same name in this convention's style
        """
        pass

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class SnakeCaseNamingConvention(NamingConvention):
    """first_name"""

    def translate(self, name: str) -> str:
        return "_".join(split_words(name))


class CamelCaseNamingConvention(NamingConvention):
    """firstName"""

    def translate(self, name: str) -> str:
        words = split_words(name)
        if not words:
            return name
        return words[0] + "".join(word.capitalize() for word in words[1:])


class PascalCaseNamingConvention(NamingConvention):
    """FirstName"""

    def translate(self, name: str) -> str:
        return "".join(word.capitalize() for word in split_words(name))


NAMING_CONVENTIONS = {
    "snake": SnakeCaseNamingConvention,
    "camel": CamelCaseNamingConvention,
    "pascal": PascalCaseNamingConvention,
}


def get_naming_convention(name: str) -> NamingConvention:
    """
    Build a convention from its short name.

    Raises:
        ValueError: If the name is not a known convention
    """
    key = name.strip().lower()
    if key not in NAMING_CONVENTIONS:
        raise ValueError(f"Unsupported naming convention: {name}")
    return NAMING_CONVENTIONS[key]()
