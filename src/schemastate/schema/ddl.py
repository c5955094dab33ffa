"""
DDL renderer converting schema definitions into SQL statements.
"""

from __future__ import annotations

from typing import List, Optional

from ..dialects.base import Dialect
from ..model import Column, ForeignKeyConstraint, Index, Schema, Table
from ..utils import get_logger


class DDLRenderer:
    """
    Produces dialect-specific SQL for a schema definition.
    """

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect
        self.logger = get_logger("schema.ddl")

    def render(self, schema: Schema) -> List[str]:
        """
        Render every table, then its secondary indexes, then foreign keys.

        Dialects that cannot add foreign keys after creation get them inlined
        in each ``CREATE TABLE`` instead.
        """
        namespace = self._namespace(schema)
        statements: List[str] = []
        for table in schema.tables:
            statements.append(self.create_table_sql(table, namespace=namespace))
            for index in table.indexes:
                if not index.primary:
                    statements.append(self.create_index_sql(table, index, namespace=namespace))
        if self.dialect.capabilities.supports_alter_foreign_keys:
            for table in schema.tables:
                for fk in table.foreign_keys:
                    statements.append(self.foreign_key_sql(fk, namespace=namespace))
        self.logger.debug(
            "Rendered %s statements for %s tables (%s)",
            len(statements),
            len(schema),
            self.dialect.name,
        )
        return statements

    def create_table_sql(self, table: Table, *, namespace: Optional[str] = None) -> str:
        pieces = [self._render_column(column) for column in table.columns]
        if table.has_primary_key():
            pieces.append(f"PRIMARY KEY ({self._column_list(table.get_primary_key_columns())})")
        if not self.dialect.capabilities.supports_alter_foreign_keys:
            pieces.extend(
                self._constraint_clause(fk, namespace=namespace) for fk in table.foreign_keys
            )
        table_name = self._format_table(table.name, namespace)
        return f"CREATE TABLE IF NOT EXISTS {table_name} ({', '.join(pieces)})"

    def create_index_sql(
        self, table: Table, index: Index, *, namespace: Optional[str] = None
    ) -> str:
        kind = "UNIQUE INDEX" if index.unique else "INDEX"
        index_name = self.dialect.quote_identifier(index.name)
        table_name = self._format_table(table.name, namespace)
        return f"CREATE {kind} {index_name} ON {table_name} ({self._column_list(index.columns)})"

    def foreign_key_sql(self, fk: ForeignKeyConstraint, *, namespace: Optional[str] = None) -> str:
        table_name = self._format_table(fk.local_table_name, namespace)
        return f"ALTER TABLE {table_name} ADD {self._constraint_clause(fk, namespace=namespace)}"

    def drop_table_sql(self, name: str, *, namespace: Optional[str] = None) -> str:
        table_name = self._format_table(name, namespace)
        self.logger.warning(
            "DROP TABLE generated for %s; confirm destructive migration before applying.",
            table_name,
        )
        return f"DROP TABLE IF EXISTS {table_name}"

    def _constraint_clause(self, fk: ForeignKeyConstraint, *, namespace: Optional[str]) -> str:
        clause = (
            f"CONSTRAINT {self.dialect.quote_identifier(fk.name)} "
            f"FOREIGN KEY ({self._column_list(fk.local_columns)}) "
            f"REFERENCES {self._format_table(fk.foreign_table_name, namespace)} "
            f"({self._column_list(fk.foreign_columns)})"
        )
        if fk.on_delete:
            clause += f" ON DELETE {fk.on_delete}"
        if fk.on_update:
            clause += f" ON UPDATE {fk.on_update}"
        return clause

    def _render_column(self, column: Column) -> str:
        column_def = self.dialect.render_column_definition(
            column.name,
            self.dialect.column_type(column),
            nullable=column.nullable,
        )
        extras: List[str] = []
        if column.autoincrement and self.dialect.autoincrement_clause:
            extras.append(self.dialect.autoincrement_clause)
        default_sql = self._default_clause(column)
        if default_sql:
            extras.append(default_sql)
        if extras:
            column_def = f"{column_def} {' '.join(extras)}"
        return column_def

    def _default_clause(self, column: Column) -> str | None:
        value = column.default
        if value is None or callable(value):
            return None
        if isinstance(value, str):
            escaped = value.replace("'", "''")
            return f"DEFAULT '{escaped}'"
        if isinstance(value, bool):
            return f"DEFAULT {1 if value else 0}"
        return f"DEFAULT {value}"

    def _column_list(self, columns: List[str]) -> str:
        return ", ".join(self.dialect.quote_identifier(column) for column in columns)

    def _format_table(self, name: str, namespace: Optional[str]) -> str:
        if namespace and "." not in name:
            name = f"{namespace}.{name}"
        return self.dialect.format_table(name)

    def _namespace(self, schema: Schema) -> Optional[str]:
        if schema.name and self.dialect.capabilities.supports_schema_namespaces:
            return schema.name
        return None
