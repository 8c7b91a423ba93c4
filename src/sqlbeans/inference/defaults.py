"""Default-value normalization per inferred property type."""

import logging
import re
from typing import Iterable, Optional

from sqlbeans.config.settings import DEFAULT_CURRENT_TIMESTAMP_FUNCTIONS
from sqlbeans.errors import UnsupportedDefaultError
from sqlbeans.metadata.property_type import BeanPropertyType

logger = logging.getLogger(__name__)

SQL_NULL = "NULL"
NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

_BOOLEAN_LITERALS = {
    "0": FALSE_LITERAL,
    "1": TRUE_LITERAL,
    FALSE_LITERAL: FALSE_LITERAL,
    TRUE_LITERAL: TRUE_LITERAL,
}
_QUOTED = re.compile(r"^(?:b)?'(.*)'$", re.IGNORECASE)
_FUNCTION_NAME = re.compile(r"^\s*([a-z_]+)\s*(?:\(|$)", re.IGNORECASE)

_VERBATIM_TYPES = {
    BeanPropertyType.INT,
    BeanPropertyType.FLOAT,
    BeanPropertyType.STRING,
    BeanPropertyType.JSON,
    BeanPropertyType.ENUM,
    BeanPropertyType.ENUM_LIST,
}


def is_current_timestamp_call(
    default_value: str, functions: Iterable[str] = DEFAULT_CURRENT_TIMESTAMP_FUNCTIONS
) -> bool:
    """Whether ``default_value`` calls a function like ``current_timestamp()``."""
    match = _FUNCTION_NAME.match(default_value)
    if not match:
        return False
    return match.group(1).lower() in {name.lower() for name in functions}


def boolean_default(
    default_value: Optional[str], is_nullable: bool, column_name: str = "", strict: bool = True
) -> Optional[str]:
    """Map a boolean column default to ``true``, ``false`` or ``null``.

    Already-normalized literals map to themselves.
    """
    if default_value is None:
        return NULL_LITERAL if is_nullable else None
    text = default_value.strip()
    if text.lower() == NULL_LITERAL:
        return NULL_LITERAL if is_nullable else None
    quoted = _QUOTED.match(text)
    if quoted:
        text = quoted.group(1)
    literal = _BOOLEAN_LITERALS.get(text.lower())
    if literal is None:
        if strict:
            raise UnsupportedDefaultError(column_name, default_value)
        logger.warning("Dropping unsupported boolean default %r on %s", default_value, column_name)
    return literal


def normalize_default(
    property_type: BeanPropertyType,
    default_value: Optional[str],
    is_nullable: bool,
    *,
    column_name: str = "",
    current_timestamp_functions: Iterable[str] = DEFAULT_CURRENT_TIMESTAMP_FUNCTIONS,
    strict_boolean: bool = True,
) -> Optional[str]:
    """Return the default literal a property should carry, or None for no default."""
    if default_value == SQL_NULL:
        default_value = None

    if property_type in _VERBATIM_TYPES:
        return default_value
    if property_type is BeanPropertyType.DATE:
        if default_value is not None and is_current_timestamp_call(
            default_value, current_timestamp_functions
        ):
            logger.debug("Suppressing dynamic default %r on %s", default_value, column_name)
            return None
        return default_value
    if property_type is BeanPropertyType.BOOL:
        return boolean_default(default_value, is_nullable, column_name, strict=strict_boolean)
    return None
