"""Unit tests for enum literal parsing and enum synthesis."""

import pytest

from sqlbeans.errors import CatalogIntegrityError, MalformedEnumError
from sqlbeans.inference import (
    build_enum,
    enum_name_for,
    parse_enum_literals,
    to_enum_compliant_value,
)


def test_parse_literals_in_order():
    """Literals come back in declaration order."""
    assert parse_enum_literals("enum('b','a','c')") == ["b", "a", "c"]


def test_parse_literal_count_matches_quoted_groups():
    """One value per single-quoted group, spaces and punctuation kept raw."""
    column_type = "set('read only','write-all','x')"
    literals = parse_enum_literals(column_type)
    assert literals == ["read only", "write-all", "x"]
    assert len(literals) == column_type.count("'") // 2


def test_parse_empty_and_escaped_literals():
    """Empty literals are kept and doubled quotes are unescaped."""
    assert parse_enum_literals("enum('','a')") == ["", "a"]
    assert parse_enum_literals("enum('it''s','x')") == ["it's", "x"]
    assert parse_enum_literals("set('a,b','''')") == ["a,b", "'"]


def test_build_enum_with_empty_and_escaped_literals():
    """Each quoted group becomes exactly one value, in order."""
    enum = build_enum("user", "mood", "enum('','it''s','x')")
    assert enum.values == ["EMPTY", "IT_S", "X"]


def test_parse_literals_empty():
    """No quoted groups yields no literals."""
    assert parse_enum_literals("") == []
    assert parse_enum_literals("enum()") == []


@pytest.mark.parametrize(
    "literal,expected",
    [
        ("ACTIVE", "ACTIVE"),
        ("active", "ACTIVE"),
        ("in-progress", "IN_PROGRESS"),
        ("read only", "READ_ONLY"),
        ("2fa", "_2FA"),
        ("--", "EMPTY"),
    ],
)
def test_to_enum_compliant_value(literal, expected):
    """Literals become upper-case identifier tokens."""
    assert to_enum_compliant_value(literal) == expected


def test_enum_name_is_deterministic():
    """Enum names derive from table and column names only."""
    assert enum_name_for("user", "status") == "UserStatusEnum"
    assert enum_name_for("order_line", "kind") == "OrderLineKindEnum"
    assert enum_name_for("user", "status", suffix="Type") == "UserStatusType"
    assert enum_name_for("user", "status") == enum_name_for("user", "status")


def test_build_enum():
    """Build an enum carrying the column comment."""
    enum = build_enum("user", "status", "enum('ACTIVE','BANNED')", comment="Account state")
    assert enum.name == "UserStatusEnum"
    assert enum.values == ["ACTIVE", "BANNED"]
    assert enum.sql_comment == "Account state"


def test_build_enum_keeps_colliding_values_distinct():
    """Literals that normalize to the same token stay distinct."""
    enum = build_enum("task", "state", "enum('in-progress','in_progress','IN PROGRESS')")
    assert enum.values == ["IN_PROGRESS", "IN_PROGRESS_2", "IN_PROGRESS_3"]
    assert len(set(enum.values)) == 3


@pytest.mark.parametrize("column_type", ["", "enum()"])
def test_build_enum_without_literals_fails(column_type):
    """Enum columns must declare values."""
    with pytest.raises(MalformedEnumError) as exc_info:
        build_enum("user", "status", column_type)
    assert isinstance(exc_info.value, CatalogIntegrityError)
    assert exc_info.value.column_name == "status"
    assert "user.status" in str(exc_info.value)
