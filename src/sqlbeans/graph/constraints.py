"""Record non-foreign unique constraints on their beans."""

import logging

from sqlbeans.errors import UnresolvableReferenceError

from .arena import BeanGraph
from .index import CatalogIndex

logger = logging.getLogger(__name__)


def record_unique_constraints(graph: BeanGraph, index: CatalogIndex) -> None:
    """Group unique-key columns by constraint name on each bean.

    Primary-key columns and foreign-key rows are skipped; composite unique keys keep
    their column order. Rows declared on a table that produced no bean are
    unresolvable.
    """
    for bean in graph.beans:
        for usage in index.key_column_usages_for(bean.key):
            prop = bean.get_property(usage.column_name)
            if prop is None:
                raise UnresolvableReferenceError(
                    "Key column usage on unknown property",
                    constraint_name=usage.constraint_name,
                    table_schema=usage.table_schema,
                    table_name=usage.table_name,
                    column_name=usage.column_name,
                )
            if usage.is_foreign_key or prop.is_primary_key:
                logger.debug("Skipping %s on %s", usage.constraint_name, prop.key)
                continue
            bean.col_names_by_unique_constraint_name.setdefault(usage.constraint_name, []).append(
                usage.column_name
            )

    for table_key, usages in index.key_column_usages_by_table.items():
        if not graph.has_bean(table_key):
            usage = usages[0]
            raise UnresolvableReferenceError(
                "Key column usage on a table without columns",
                constraint_name=usage.constraint_name,
                table_schema=usage.table_schema,
                table_name=usage.table_name,
                column_name=usage.column_name,
            )
