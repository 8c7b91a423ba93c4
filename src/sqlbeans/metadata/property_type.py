from enum import Enum
from typing import Optional


class BeanPropertyType(str, Enum):
    """Type categories a column can be classified into."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    DATE = "date"
    JSON = "json"
    ENUM = "enum"
    ENUM_LIST = "enum_list"
    OBJECT = "object"

    @property
    def is_enum_like(self) -> bool:
        """Whether columns of this type carry a synthesized enum."""
        return self in (BeanPropertyType.ENUM, BeanPropertyType.ENUM_LIST)


class BeanPropertyColKey(str, Enum):
    """Key role of a column as reported by information_schema.columns.column_key."""

    PRI = "PRI"
    UNI = "UNI"
    MUL = "MUL"

    @classmethod
    def try_from(cls, value: Optional[str]) -> Optional["BeanPropertyColKey"]:
        """Return the matching role, or None for an empty or unknown value."""
        if not value:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None
