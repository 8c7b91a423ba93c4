"""Rows of information_schema.columns."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from sqlbeans.metadata.keys import BeanKey, PropertyKey

from ._raw import raw_str, require_str


class ColumnRow(BaseModel):
    """One row of information_schema.columns.

    Attributes:
        data_type: Base SQL type, e.g. ``enum`` or ``varchar``.
        column_type: Full SQL type, e.g. ``enum('A','B')`` or ``tinyint(1)``.
        column_key: ``PRI``, ``UNI``, ``MUL`` or empty.
        column_default: Default expression text as reported by the server.
    """

    table_schema: str
    table_name: str
    column_name: str
    data_type: str
    column_type: str = ""
    is_nullable: bool = False
    is_generated: bool = False
    column_key: str = ""
    column_default: Optional[str] = None
    column_comment: str = ""

    model_config = {"frozen": True}

    @property
    def bean_key(self) -> BeanKey:
        return BeanKey(schema_name=self.table_schema, table_name=self.table_name)

    @property
    def property_key(self) -> PropertyKey:
        return PropertyKey(bean=self.bean_key, column_name=self.column_name)

    @classmethod
    def from_catalog_row(cls, row: Mapping[str, Any]) -> "ColumnRow":
        """Build from a raw information_schema.columns mapping.

        ``IS_NULLABLE`` is ``YES``/``NO``. A column counts as generated when ``EXTRA``
        mentions ``GENERATED`` or ``GENERATION_EXPRESSION`` is non-empty.
        """
        extra = (raw_str(row, "extra") or "").upper()
        generation_expression = raw_str(row, "generation_expression") or ""
        source = "information_schema.columns"
        return cls(
            table_schema=require_str(row, "table_schema", source),
            table_name=require_str(row, "table_name", source),
            column_name=require_str(row, "column_name", source),
            data_type=raw_str(row, "data_type") or "",
            column_type=raw_str(row, "column_type") or "",
            is_nullable=(raw_str(row, "is_nullable") or "").upper() == "YES",
            is_generated="GENERATED" in extra or bool(generation_expression.strip()),
            column_key=raw_str(row, "column_key") or "",
            column_default=raw_str(row, "column_default"),
            column_comment=raw_str(row, "column_comment") or "",
        )
