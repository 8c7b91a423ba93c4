"""Build a typed bean graph from relational catalog metadata."""

from .catalog import ColumnRow, KeyColumnUsageRow, TableRow
from .config import BuilderSettings
from .errors import (
    CatalogIntegrityError,
    MalformedEnumError,
    UnresolvableReferenceError,
    UnsupportedDefaultError,
)
from .graph import BeanGraph, build_bean_graph, build_beans
from .metadata import (
    Bean,
    BeanKey,
    BeanProperty,
    BeanPropertyColKey,
    BeanPropertyType,
    EnumDef,
    ForeignBeanField,
    PropertyKey,
)

__all__ = [
    "Bean",
    "BeanGraph",
    "BeanKey",
    "BeanProperty",
    "BeanPropertyColKey",
    "BeanPropertyType",
    "BuilderSettings",
    "CatalogIntegrityError",
    "ColumnRow",
    "EnumDef",
    "ForeignBeanField",
    "KeyColumnUsageRow",
    "MalformedEnumError",
    "PropertyKey",
    "TableRow",
    "UnresolvableReferenceError",
    "UnsupportedDefaultError",
    "build_bean_graph",
    "build_beans",
]
