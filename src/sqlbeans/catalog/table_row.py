"""Rows of information_schema.tables."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from sqlbeans.metadata.keys import BeanKey

from ._raw import raw_str, require_str


class TableRow(BaseModel):
    """One row of information_schema.tables."""

    table_schema: str
    table_name: str
    table_comment: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def key(self) -> BeanKey:
        return BeanKey(schema_name=self.table_schema, table_name=self.table_name)

    @classmethod
    def from_catalog_row(cls, row: Mapping[str, Any]) -> "TableRow":
        """Build from a raw information_schema.tables mapping."""
        source = "information_schema.tables"
        return cls(
            table_schema=require_str(row, "table_schema", source),
            table_name=require_str(row, "table_name", source),
            table_comment=raw_str(row, "table_comment") or None,
        )
