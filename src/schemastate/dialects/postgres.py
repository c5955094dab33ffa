"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..model.column import Column
from .base import DialectCapabilities, render_generic_type

_TYPES: Final[dict[str, str]] = {
    "integer": "INTEGER",
    "bigint": "BIGINT",
    "smallint": "SMALLINT",
    "string": "VARCHAR({length})",
    "text": "TEXT",
    "boolean": "BOOLEAN",
    "datetime": "TIMESTAMP(0) WITHOUT TIME ZONE",
    "date": "DATE",
    "float": "DOUBLE PRECISION",
    "decimal": "NUMERIC({precision}, {scale})",
}

_SERIAL_TYPES: Final[dict[str, str]] = {
    "integer": "SERIAL",
    "bigint": "BIGSERIAL",
    "smallint": "SMALLSERIAL",
}


class PostgresDialect:
    """
    PostgreSQL dialect; auto-increment columns map to the SERIAL family.
    """

    name: Final[str] = "postgresql"
    autoincrement_clause: Final[str] = ""
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_alter_foreign_keys=True,
        supports_schema_namespaces=True,
    )

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table_name)

    def column_type(self, column: Column) -> str:
        if column.autoincrement and column.type_name in _SERIAL_TYPES:
            return _SERIAL_TYPES[column.type_name]
        return render_generic_type(_TYPES, column, dialect=self.name)

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"
