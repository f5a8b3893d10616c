from .property_schema import PropertySchema

__all__ = ["PropertySchema"]
