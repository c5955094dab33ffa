"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..model.column import Column
from .base import DialectCapabilities, render_generic_type

_TYPES: Final[dict[str, str]] = {
    "integer": "INTEGER",
    "bigint": "INTEGER",
    "smallint": "INTEGER",
    "string": "VARCHAR({length})",
    "text": "TEXT",
    "boolean": "BOOLEAN",
    "datetime": "DATETIME",
    "date": "DATE",
    "float": "REAL",
    "decimal": "NUMERIC({precision}, {scale})",
}


class SQLiteDialect:
    """
    SQLite dialect; foreign keys can only be declared inside CREATE TABLE.
    """

    name: Final[str] = "sqlite"
    autoincrement_clause: Final[str] = ""
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_alter_foreign_keys=False,
        supports_schema_namespaces=False,
    )

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def column_type(self, column: Column) -> str:
        return render_generic_type(_TYPES, column, dialect=self.name)

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"
