"""Row factories shared by the bean graph tests."""

from typing import Optional

from sqlbeans.catalog import ColumnRow, KeyColumnUsageRow, TableRow

SCHEMA = "shop"


def table(name: str, schema: str = SCHEMA, comment: Optional[str] = None) -> TableRow:
    return TableRow(table_schema=schema, table_name=name, table_comment=comment)


def column(
    table_name: str,
    name: str,
    data_type: str = "int",
    column_type: Optional[str] = None,
    *,
    nullable: bool = False,
    generated: bool = False,
    key: str = "",
    default: Optional[str] = None,
    comment: str = "",
    schema: str = SCHEMA,
) -> ColumnRow:
    return ColumnRow(
        table_schema=schema,
        table_name=table_name,
        column_name=name,
        data_type=data_type,
        column_type=column_type if column_type is not None else data_type,
        is_nullable=nullable,
        is_generated=generated,
        column_key=key,
        column_default=default,
        column_comment=comment,
    )


def unique_key(
    constraint: str, table_name: str, column_name: str, schema: str = SCHEMA
) -> KeyColumnUsageRow:
    return KeyColumnUsageRow(
        constraint_name=constraint,
        table_schema=schema,
        table_name=table_name,
        column_name=column_name,
    )


def foreign_key(
    constraint: str,
    table_name: str,
    column_name: str,
    referenced_table: str,
    referenced_column: str,
    schema: str = SCHEMA,
    referenced_schema: Optional[str] = None,
) -> KeyColumnUsageRow:
    return KeyColumnUsageRow(
        constraint_name=constraint,
        table_schema=schema,
        table_name=table_name,
        column_name=column_name,
        referenced_table_schema=referenced_schema or schema,
        referenced_table_name=referenced_table,
        referenced_column_name=referenced_column,
    )
