"""Turn column rows into beans and typed properties."""

import logging
from typing import Iterable

from sqlbeans.catalog import ColumnRow
from sqlbeans.config.settings import BuilderSettings
from sqlbeans.inference import build_enum, normalize_default, property_type_from_sql
from sqlbeans.metadata import BeanPropertyColKey

from .arena import BeanGraph
from .index import CatalogIndex

logger = logging.getLogger(__name__)


def materialize_columns(
    graph: BeanGraph,
    index: CatalogIndex,
    columns: Iterable[ColumnRow],
    settings: BuilderSettings,
) -> None:
    """Create one bean per table and one property per column, in column order.

    A column seen twice updates the property created the first time.
    """
    for column in columns:
        table = index.table(column.bean_key)
        bean = graph.fetch_or_create_bean(table.key, comment=table.table_comment)

        prop, created = graph.fetch_or_create_property(column.property_key)
        if not created:
            logger.debug("Column %s seen again, updating in place", prop.key)
        prop.sql_comment = column.column_comment
        prop.is_nullable = column.is_nullable
        prop.is_generated = column.is_generated
        prop.property_type = property_type_from_sql(column.data_type, column.column_type)
        prop.column_key = BeanPropertyColKey.try_from(column.column_key)
        prop.default_value = normalize_default(
            prop.property_type,
            column.column_default,
            prop.is_nullable,
            column_name=str(prop.key),
            current_timestamp_functions=settings.current_timestamp_functions,
            strict_boolean=settings.strict_boolean_defaults,
        )
        prop.enum = None
        if prop.property_type.is_enum_like:
            prop.enum = build_enum(
                bean.sql_table,
                prop.sql_name,
                column.column_type,
                comment=column.column_comment,
                suffix=settings.enum_name_suffix,
            )
