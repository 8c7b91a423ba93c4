"""Helpers for reading raw information_schema rows."""

from typing import Any, Mapping, Optional

from sqlbeans.errors import CatalogIntegrityError


def raw_value(row: Mapping[str, Any], name: str, default: Any = None) -> Any:
    """Read a catalog field regardless of the driver's column-name casing."""
    for candidate in (name, name.upper(), name.lower()):
        if candidate in row:
            return row[candidate]
    return default


def raw_str(row: Mapping[str, Any], name: str, default: Optional[str] = None) -> Optional[str]:
    """Read a catalog field as text, decoding bytes; None stays None."""
    value = raw_value(row, name, default)
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def require_str(row: Mapping[str, Any], name: str, source: str) -> str:
    """Read a catalog field that identifies the row; it must be non-empty.

    Raises:
        CatalogIntegrityError: If the field is missing or empty.
    """
    value = raw_str(row, name)
    if not value:
        raise CatalogIntegrityError(f"{source} row is missing {name}: {dict(row)!r}")
    return value
