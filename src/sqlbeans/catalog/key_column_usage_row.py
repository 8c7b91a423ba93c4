"""Rows of information_schema.key_column_usage."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from sqlbeans.metadata.keys import BeanKey, PropertyKey

from ._raw import raw_str, require_str


class KeyColumnUsageRow(BaseModel):
    """One row of information_schema.key_column_usage.

    Rows with ``referenced_*`` fields describe one column of a foreign key; the rest
    describe one column of a primary or unique key.
    """

    constraint_name: str
    table_schema: str
    table_name: str
    column_name: str
    referenced_table_schema: Optional[str] = None
    referenced_table_name: Optional[str] = None
    referenced_column_name: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def is_foreign_key(self) -> bool:
        return self.referenced_table_name is not None

    @property
    def bean_key(self) -> BeanKey:
        return BeanKey(schema_name=self.table_schema, table_name=self.table_name)

    @property
    def property_key(self) -> PropertyKey:
        return PropertyKey(bean=self.bean_key, column_name=self.column_name)

    @property
    def referenced_bean_key(self) -> Optional[BeanKey]:
        if not self.is_foreign_key:
            return None
        return BeanKey(
            schema_name=self.referenced_table_schema or self.table_schema,
            table_name=self.referenced_table_name,
        )

    @property
    def referenced_property_key(self) -> Optional[PropertyKey]:
        bean_key = self.referenced_bean_key
        if bean_key is None or self.referenced_column_name is None:
            return None
        return PropertyKey(bean=bean_key, column_name=self.referenced_column_name)

    @classmethod
    def from_catalog_row(cls, row: Mapping[str, Any]) -> "KeyColumnUsageRow":
        """Build from a raw information_schema.key_column_usage mapping."""
        source = "information_schema.key_column_usage"
        return cls(
            constraint_name=require_str(row, "constraint_name", source),
            table_schema=require_str(row, "table_schema", source),
            table_name=require_str(row, "table_name", source),
            column_name=require_str(row, "column_name", source),
            referenced_table_schema=raw_str(row, "referenced_table_schema"),
            referenced_table_name=raw_str(row, "referenced_table_name"),
            referenced_column_name=raw_str(row, "referenced_column_name"),
        )
