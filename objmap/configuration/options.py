"""Per-mapping options."""
import copy
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from objmap.mapping_operation.base import MappingOperation
from objmap.mapping_operation.default_mapping_operation import DefaultMappingOperation
from objmap.naming.naming_convention import NamingConvention

logger = logging.getLogger(__name__)


@dataclass
class Options:
    """
    Settings bag scoped to one mapping.

    Options have value semantics: every mapping owns an independent copy
    made with clone(), so changing one never affects another mapping or
    the registry's template.
    """

    source_member_naming_convention: Optional[NamingConvention] = None
    destination_member_naming_convention: Optional[NamingConvention] = None
    should_skip_constructor: bool = False
    ignore_null_properties: bool = False
    default_mapping_operation: MappingOperation = field(default_factory=DefaultMappingOperation)

    @classmethod
    def default(cls) -> "Options":
        """Library defaults: no naming conversion, constructors are called."""
        return cls()

    def clone(self) -> "Options":
        """Independent deep copy."""
        return copy.deepcopy(self)

    def should_convert_name(self) -> bool:
        """Whether both naming conventions are set."""
        return (
            self.source_member_naming_convention is not None
            and self.destination_member_naming_convention is not None
        )

    def skip_constructor(self) -> None:
        self.should_skip_constructor = True

    def dont_skip_constructor(self) -> None:
        self.should_skip_constructor = False

    def set_source_member_naming_convention(self, convention: Optional[NamingConvention]) -> None:
        self.source_member_naming_convention = convention

    def set_destination_member_naming_convention(self, convention: Optional[NamingConvention]) -> None:
        self.destination_member_naming_convention = convention

    def set_default_mapping_operation(self, operation: MappingOperation) -> None:
        self.default_mapping_operation = operation

    def update(self, **values: Any) -> "Options":
        """
        Bulk-assign known option fields.

        Unknown keys are logged and skipped.
        """
        known = {f.name for f in fields(self)}
        for key, value in values.items():
            if key not in known:
                logger.warning(f"Unknown option ignored: {key}")
                continue
            setattr(self, key, value)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "source_member_naming_convention": repr(self.source_member_naming_convention),
            "destination_member_naming_convention": repr(self.destination_member_naming_convention),
            "should_skip_constructor": self.should_skip_constructor,
            "ignore_null_properties": self.ignore_null_properties,
            "default_mapping_operation": self.default_mapping_operation.describe(),
        }
