"""Catalog rows consumed by the bean graph builder."""

from .column_row import ColumnRow
from .key_column_usage_row import KeyColumnUsageRow
from .table_row import TableRow

__all__ = ["ColumnRow", "KeyColumnUsageRow", "TableRow"]
