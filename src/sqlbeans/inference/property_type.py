from __future__ import annotations

import re

from sqlbeans.metadata.property_type import BeanPropertyType

_INT_TYPES = {"tinyint", "smallint", "mediumint", "int", "integer", "bigint", "year"}
_FLOAT_TYPES = {"float", "double", "real", "decimal", "numeric", "dec", "fixed"}
_STRING_TYPES = {
    "char",
    "varchar",
    "tinytext",
    "text",
    "mediumtext",
    "longtext",
    "uuid",
    "inet4",
    "inet6",
}
_DATE_TYPES = {"date", "datetime", "timestamp", "time"}
_BOOL_TYPES = {"bool", "boolean"}
_ONE_BIT_TYPES = ("tinyint(1)", "bit(1)")


def property_type_from_sql(
    data_type: str | None, column_type: str | None = None
) -> BeanPropertyType:
    """Classify a column from its base SQL type and full column type.

    ``tinyint(1)`` and ``bit(1)`` are booleans; ``enum`` and ``set`` are enum-like;
    blobs, binaries and spatial types fall through to OBJECT.
    """
    base = re.split(r"[\s(]", (data_type or "").strip().lower(), maxsplit=1)[0]
    column = (column_type or "").strip().lower()

    if base in _BOOL_TYPES or column.startswith(_ONE_BIT_TYPES):
        return BeanPropertyType.BOOL
    if base == "enum":
        return BeanPropertyType.ENUM
    if base == "set":
        return BeanPropertyType.ENUM_LIST
    if base in _INT_TYPES:
        return BeanPropertyType.INT
    if base in _FLOAT_TYPES:
        return BeanPropertyType.FLOAT
    if base in _STRING_TYPES:
        return BeanPropertyType.STRING
    if base in _DATE_TYPES:
        return BeanPropertyType.DATE
    if base == "json":
        return BeanPropertyType.JSON
    return BeanPropertyType.OBJECT
