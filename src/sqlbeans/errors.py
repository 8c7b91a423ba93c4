"""Errors raised while building a bean graph from catalog rows."""

from typing import Optional


class CatalogIntegrityError(ValueError):
    """Raised when catalog rows are inconsistent and no graph can be built."""


class UnresolvableReferenceError(CatalogIntegrityError):
    """Raised when a row references a table or column that was never materialized."""

    def __init__(
        self,
        message: str,
        *,
        constraint_name: Optional[str] = None,
        table_schema: Optional[str] = None,
        table_name: Optional[str] = None,
        column_name: Optional[str] = None,
    ) -> None:
        """Keep the offending catalog coordinates for diagnostics."""
        self.constraint_name = constraint_name
        self.table_schema = table_schema
        self.table_name = table_name
        self.column_name = column_name
        context = []
        if constraint_name is not None:
            context.append(f"constraint={constraint_name}")
        if table_name is not None:
            context.append(f"table={table_schema}.{table_name}")
        if column_name is not None:
            context.append(f"column={column_name}")
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


class MalformedEnumError(CatalogIntegrityError):
    """Raised when an enum-like column type carries no quoted literals."""

    def __init__(self, table_name: str, column_name: str, column_type: str) -> None:
        """Record the column whose type could not be parsed."""
        self.table_name = table_name
        self.column_name = column_name
        self.column_type = column_type
        super().__init__(
            f"Enum column {table_name}.{column_name} must declare values, got {column_type!r}."
        )


class UnsupportedDefaultError(CatalogIntegrityError):
    """Raised when a boolean column default cannot be mapped to a literal."""

    def __init__(self, column_name: str, default_value: str) -> None:
        """Record the column and its raw default."""
        self.column_name = column_name
        self.default_value = default_value
        super().__init__(
            f"Unsupported boolean default {default_value!r} on column {column_name}."
        )
