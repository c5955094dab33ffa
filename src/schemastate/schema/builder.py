"""
Desired-state schema builder.

Expresses a schema definition in terms of the state it should end up in
rather than the changes needed to reach it, so definition scripts can be run
repeatedly against the same :class:`Schema` without branching on what
already exists.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence, Union

from ..model import Schema, Table
from ..utils import get_logger

TableDefinition = Callable[[Table], Any]
TableRef = Union[Table, str]


class SchemaBuilder:
    """
    Applies idempotent table and foreign key operations to a schema.

    Every operation returns the builder so calls can be chained::

        (
            SchemaBuilder(schema)
            .create_table("author", define_author)
            .define_table("book", define_book)
            .define_named_foreign_key("FK_book_author", "book", ["author_id"], "author")
        )
    """

    def __init__(self, schema: Schema) -> None:
        self.schema = schema
        self.logger = get_logger("schema.builder")

    def create_table(self, name: str, definition: TableDefinition) -> "SchemaBuilder":
        """
        Create ``name`` and pass it to ``definition`` unless it already exists.

        An existing table is left untouched and ``definition`` is not called.
        """
        if self.schema.has_table(name):
            self.logger.debug("Table %s already exists; skipping definition.", name)
            return self
        self.logger.info("Creating table %s", name)
        definition(self.schema.create_table(name))
        return self

    def define_table(self, name: str, definition: TableDefinition) -> "SchemaBuilder":
        """
        Replace any existing ``name`` table with a freshly defined one.

        Foreign keys on other tables that reference ``name`` are not touched.
        """
        self.drop_table(name)
        self.logger.info("Defining table %s", name)
        definition(self.schema.create_table(name))
        return self

    def drop_table(self, name: str) -> "SchemaBuilder":
        if self.schema.has_table(name):
            self.logger.warning("Dropping table %s from schema; its definition is discarded.", name)
            self.schema.drop_table(name)
        else:
            self.logger.debug("Table %s not present; nothing to drop.", name)
        return self

    def define_named_foreign_key(
        self,
        name: str,
        local_table: TableRef,
        local_columns: Sequence[str],
        foreign_table: TableRef,
        foreign_columns: Optional[Sequence[str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> "SchemaBuilder":
        """
        Define foreign key ``name`` on ``local_table``, replacing any key of that name.

        Tables may be given by name or instance; unknown names raise
        :class:`TableNotFoundError`. ``foreign_columns`` defaults to the
        foreign table's primary key columns.
        """
        local = self._resolve_table(local_table)
        foreign = self._resolve_table(foreign_table)
        if foreign_columns is None:
            foreign_columns = foreign.get_primary_key_columns()

        if local.has_foreign_key(name):
            self.logger.debug("Replacing foreign key %s on %s", name, local.name)
            local.remove_foreign_key(name)

        local.add_named_foreign_key_constraint(
            name, foreign, local_columns, foreign_columns, options or {}
        )
        self.logger.info(
            "Defined foreign key %s: %s(%s) -> %s(%s)",
            name,
            local.name,
            ", ".join(local_columns),
            foreign.name,
            ", ".join(foreign_columns),
        )
        return self

    def _resolve_table(self, table: TableRef) -> Table:
        if isinstance(table, Table):
            return table
        return self.schema.get_table(table)
