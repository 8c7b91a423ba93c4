"""Build a linked bean graph from catalog rows."""

import logging
from typing import List, Optional, Sequence

from sqlbeans.catalog import ColumnRow, KeyColumnUsageRow, TableRow
from sqlbeans.config.settings import BuilderSettings
from sqlbeans.errors import CatalogIntegrityError
from sqlbeans.metadata import Bean

from .arena import BeanGraph
from .constraints import record_unique_constraints
from .index import build_catalog_index
from .linker import link_foreign_keys
from .materializer import materialize_columns

logger = logging.getLogger(__name__)


def build_bean_graph(
    tables: Sequence[TableRow],
    columns: Sequence[ColumnRow],
    key_column_usages: Sequence[KeyColumnUsageRow],
    settings: Optional[BuilderSettings] = None,
) -> BeanGraph:
    """Build the bean graph and return it with its identity-keyed lookups.

    Runs, in order: indexing, column materialization, unique-constraint recording and
    foreign-key linking. Any inconsistency aborts the whole build.

    Args:
        tables: information_schema.tables rows.
        columns: information_schema.columns rows, in ordinal order per table.
        key_column_usages: information_schema.key_column_usage rows.
        settings: Inference settings; defaults are used when omitted.

    Raises:
        CatalogIntegrityError: If a row cannot be resolved or an enum cannot be parsed.
    """
    settings = settings or BuilderSettings()
    graph = BeanGraph()
    try:
        index = build_catalog_index(tables, key_column_usages)
        materialize_columns(graph, index, columns, settings)
        record_unique_constraints(graph, index)
        linked = link_foreign_keys(graph, key_column_usages)
    except CatalogIntegrityError as exc:
        logger.error("Bean graph build aborted: %s", exc)
        raise

    logger.info(
        "Built %d beans with %d properties, %d enums and %d foreign keys",
        len(graph),
        len(graph.properties),
        sum(1 for prop in graph.properties if prop.enum is not None),
        linked,
    )
    return graph


def build_beans(
    tables: Sequence[TableRow],
    columns: Sequence[ColumnRow],
    key_column_usages: Sequence[KeyColumnUsageRow],
    settings: Optional[BuilderSettings] = None,
) -> List[Bean]:
    """Build the bean graph and return its beans in first-seen table order."""
    return build_bean_graph(tables, columns, key_column_usages, settings).beans
