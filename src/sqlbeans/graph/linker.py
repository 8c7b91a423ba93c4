"""Link beans through their foreign keys."""

from typing import Iterable, Optional

from sqlbeans.catalog import KeyColumnUsageRow
from sqlbeans.errors import UnresolvableReferenceError
from sqlbeans.metadata import BeanProperty, ForeignBeanField, PropertyKey

from .arena import BeanGraph


def _resolve(
    graph: BeanGraph,
    usage: KeyColumnUsageRow,
    key: Optional[PropertyKey],
    referenced: bool,
) -> BeanProperty:
    if key is not None and graph.has_property(key):
        return graph.get_property(key)
    if referenced:
        table_schema = usage.referenced_table_schema or usage.table_schema
        table_name = usage.referenced_table_name
        column_name = usage.referenced_column_name
    else:
        table_schema = usage.table_schema
        table_name = usage.table_name
        column_name = usage.column_name
    raise UnresolvableReferenceError(
        "Foreign key references an unknown column",
        constraint_name=usage.constraint_name,
        table_schema=table_schema,
        table_name=table_name,
        column_name=column_name,
    )


def link_foreign_keys(graph: BeanGraph, key_column_usages: Iterable[KeyColumnUsageRow]) -> int:
    """Add a forward field and its array-valued mirror for every foreign-key row.

    Both ends are resolved before either field is appended. Returns the number of
    foreign keys linked.
    """
    linked = 0
    for usage in key_column_usages:
        if not usage.is_foreign_key:
            continue
        with_property = _resolve(graph, usage, usage.property_key, referenced=False)
        on_property = _resolve(graph, usage, usage.referenced_property_key, referenced=True)
        bean = graph.get_bean(with_property.belongs_to_bean)
        on_bean = graph.get_bean(on_property.belongs_to_bean)

        forward = ForeignBeanField(
            to_bean=on_bean.key,
            with_property=with_property.key,
            on_property=on_property.key,
        )
        bean.foreign_fields.append(forward)
        on_bean.foreign_fields.append(forward.mirrored(bean.key))
        linked += 1
    return linked
