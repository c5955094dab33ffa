"""
Schema container mapping table names to table definitions.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from ..config import SchemaConfig
from .errors import TableAlreadyExistsError, TableNotFoundError
from .table import Table, validate_identifier

if TYPE_CHECKING:  # pragma: no cover
    from ..dialects.base import Dialect


class Schema:
    """
    In-memory collection of tables keyed by case-sensitive name.
    """

    def __init__(self, tables: Iterable[Table] = (), config: Optional[SchemaConfig] = None) -> None:
        self.config = config or SchemaConfig()
        self._tables: "OrderedDict[str, Table]" = OrderedDict()
        for table in tables:
            self.add_table(table)

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[Table]:
        return iter(list(self._tables.values()))

    def __repr__(self) -> str:
        return f"Schema(name={self.config.name!r}, tables={self.table_names})"

    @property
    def name(self) -> Optional[str]:
        return self.config.name

    @property
    def tables(self) -> List[Table]:
        return list(self._tables.values())

    @property
    def table_names(self) -> List[str]:
        return list(self._tables)

    def has_table(self, name: str) -> bool:
        return name in self._tables

    def get_table(self, name: str) -> Table:
        try:
            return self._tables[name]
        except KeyError as exc:
            raise TableNotFoundError(name) from exc

    def add_table(self, table: Table) -> Table:
        validate_identifier(table.name, max_length=self.config.max_identifier_length, kind="table")
        if table.name in self._tables:
            raise TableAlreadyExistsError(table.name)
        self._tables[table.name] = table
        return table

    def create_table(self, name: str) -> Table:
        table = Table(
            name,
            options=self.config.default_table_options,
            max_identifier_length=self.config.max_identifier_length,
        )
        return self.add_table(table)

    def drop_table(self, name: str) -> None:
        if name not in self._tables:
            raise TableNotFoundError(name)
        del self._tables[name]

    def to_sql(self, dialect: "Dialect") -> List[str]:
        from ..schema.ddl import DDLRenderer

        return DDLRenderer(dialect).render(self)
