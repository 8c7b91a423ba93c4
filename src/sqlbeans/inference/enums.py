"""Enum synthesis for enum- and set-typed columns."""

import re
from typing import List

from sqlbeans.errors import MalformedEnumError
from sqlbeans.metadata.enum_def import EnumDef

_QUOTED_LITERAL = re.compile(r"'((?:[^']|'')*)'")
_NON_IDENTIFIER = re.compile(r"[^0-9A-Za-z]+")


def parse_enum_literals(column_type: str) -> List[str]:
    """Return every single-quoted literal of a column type, left to right.

    Doubled quotes inside a literal are unescaped; empty literals are kept.
    """
    return [
        literal.replace("''", "'") for literal in _QUOTED_LITERAL.findall(column_type or "")
    ]


def to_enum_compliant_value(value: str) -> str:
    """Turn an enum literal into an upper-case identifier token.

    >>> to_enum_compliant_value("in-progress")
    'IN_PROGRESS'
    >>> to_enum_compliant_value("2fa")
    '_2FA'
    """
    token = _NON_IDENTIFIER.sub("_", value).strip("_").upper()
    if not token:
        return "EMPTY"
    if token[0].isdigit():
        return f"_{token}"
    return token


def to_pascal_case(sql_name: str) -> str:
    """``user_status`` -> ``UserStatus``."""
    words = [word for word in _NON_IDENTIFIER.split(sql_name) if word]
    return "".join(word[:1].upper() + word[1:] for word in words)


def enum_name_for(table_name: str, column_name: str, suffix: str = "Enum") -> str:
    """Deterministic enum name for a table column."""
    return to_pascal_case(f"{table_name}_{column_name}") + suffix


def _distinct_values(literals: List[str]) -> List[str]:
    values: List[str] = []
    seen = set()
    for literal in literals:
        value = to_enum_compliant_value(literal)
        candidate = value
        counter = 2
        while candidate in seen:
            candidate = f"{value}_{counter}"
            counter += 1
        seen.add(candidate)
        values.append(candidate)
    return values


def build_enum(
    table_name: str,
    column_name: str,
    column_type: str,
    comment: str = "",
    suffix: str = "Enum",
) -> EnumDef:
    """Synthesize the enum declared by an enum- or set-typed column.

    Raises:
        MalformedEnumError: If ``column_type`` is empty or holds no quoted literal.
    """
    literals = parse_enum_literals(column_type)
    if not literals:
        raise MalformedEnumError(table_name, column_name, column_type)
    return EnumDef(
        name=enum_name_for(table_name, column_name, suffix),
        values=_distinct_values(literals),
        sql_comment=comment or "",
    )
