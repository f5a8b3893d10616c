"""
Mapping operations - rules producing one destination property

Variants:
- MapFrom: custom transform function
- Ignore: leave the property untouched
- DefaultMappingOperation: copy by (convention translated) name
- FromProperty / SetTo: read another source property, write a constant
"""

from .base import MappingOperation
from .default_mapping_operation import DefaultMappingOperation
from .from_property import FromProperty
from .ignore import Ignore
from .map_from import MapFrom
from .set_to import SetTo
from .operation import Operation

__all__ = [
    "MappingOperation",
    "DefaultMappingOperation",
    "FromProperty",
    "Ignore",
    "MapFrom",
    "SetTo",
    "Operation",
]
