"""Naming conventions used to auto-match unmapped properties."""

from .naming_convention import (
    NamingConvention,
    SnakeCaseNamingConvention,
    CamelCaseNamingConvention,
    PascalCaseNamingConvention,
    get_naming_convention,
    split_words,
)

__all__ = [
    "NamingConvention",
    "SnakeCaseNamingConvention",
    "CamelCaseNamingConvention",
    "PascalCaseNamingConvention",
    "get_naming_convention",
    "split_words",
]
