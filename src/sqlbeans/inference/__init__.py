"""SQL type classification, enum synthesis and default normalization."""

from .defaults import normalize_default
from .enums import build_enum, enum_name_for, parse_enum_literals, to_enum_compliant_value
from .property_type import property_type_from_sql

__all__ = [
    "build_enum",
    "enum_name_for",
    "normalize_default",
    "parse_enum_literals",
    "property_type_from_sql",
    "to_enum_compliant_value",
]
