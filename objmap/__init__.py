"""
objmap - object-to-object mapping configuration

Declares, per (source, destination) pair, how destination properties are
produced:
- Explicit per-property operations (custom function, ignore, ...)
- Convention based fallback for unmapped properties
- Naming conventions (snake_case, camelCase, PascalCase)
- Reverse mappings
"""

from .configuration import AutoMapperConfig, Mapping, Options
from .exceptions import ObjmapError, InvalidPropertyError
from .mapping_operation import MappingOperation, Operation
from .naming import (
    NamingConvention,
    SnakeCaseNamingConvention,
    CamelCaseNamingConvention,
    PascalCaseNamingConvention,
)
from .schema import PropertySchema

__version__ = "0.1.0"

__all__ = [
    "AutoMapperConfig",
    "Mapping",
    "Options",
    "ObjmapError",
    "InvalidPropertyError",
    "MappingOperation",
    "Operation",
    "NamingConvention",
    "SnakeCaseNamingConvention",
    "CamelCaseNamingConvention",
    "PascalCaseNamingConvention",
    "PropertySchema",
]
