"""Lookup indices over the raw catalog rows."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from sqlbeans.catalog import KeyColumnUsageRow, TableRow
from sqlbeans.errors import UnresolvableReferenceError
from sqlbeans.metadata import BeanKey


@dataclass
class CatalogIndex:
    """Tables by identity, and key-column-usage rows by their owning table."""

    tables_by_key: Dict[BeanKey, TableRow] = field(default_factory=dict)
    key_column_usages_by_table: Dict[BeanKey, List[KeyColumnUsageRow]] = field(
        default_factory=dict
    )

    def table(self, key: BeanKey) -> TableRow:
        """Return the table row for ``key``."""
        table = self.tables_by_key.get(key)
        if table is None:
            raise UnresolvableReferenceError(
                "Column belongs to an unknown table",
                table_schema=key.schema_name,
                table_name=key.table_name,
            )
        return table

    def key_column_usages_for(self, key: BeanKey) -> List[KeyColumnUsageRow]:
        return self.key_column_usages_by_table.get(key, [])


def build_catalog_index(
    tables: Iterable[TableRow], key_column_usages: Iterable[KeyColumnUsageRow]
) -> CatalogIndex:
    """Index tables by identity and key-column-usage rows by owning table.

    A duplicated table identity keeps the last row. Rows are grouped by the table
    they are declared on, never by the table they reference.
    """
    index = CatalogIndex()
    for table in tables:
        index.tables_by_key[table.key] = table
    for usage in key_column_usages:
        index.key_column_usages_by_table.setdefault(usage.bean_key, []).append(usage)
    return index
