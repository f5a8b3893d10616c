"""
Exception classes for objmap.

Configuration errors are raised synchronously by the builder call that
detected them and are meant to reach the code doing the configuration.
"""

from typing import Optional, Dict, Any


class ObjmapError(Exception):
    """
    Base exception for all objmap errors.

    Attributes:
        code: Error code (e.g., "INVALID_PROPERTY")
        message: Human-readable message
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable representation."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class InvalidPropertyError(ObjmapError):
    """A property name was registered that the source type does not have."""

    def __init__(self, property_name: str, class_name: str):
        self.property_name = property_name
        self.class_name = class_name
        super().__init__(
            code="INVALID_PROPERTY",
            message=f'Property "{property_name}" does not exist on {class_name}',
            details={"property": property_name, "class": class_name},
        )

    @classmethod
    def from_name_and_class(cls, property_name: str, class_name: str) -> "InvalidPropertyError":
        return cls(property_name, class_name)
