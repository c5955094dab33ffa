"""
Table definitions owning columns, indexes, and foreign keys.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..config import DEFAULT_MAX_IDENTIFIER_LENGTH
from ..utils import generate_identifier_name
from .column import Column
from .constraints import ForeignKeyConstraint, Index
from .errors import (
    ColumnAlreadyExistsError,
    ColumnNotFoundError,
    ForeignKeyAlreadyExistsError,
    ForeignKeyNotFoundError,
    IndexAlreadyExistsError,
    IndexNotFoundError,
    InvalidIdentifierError,
    PrimaryKeyMissingError,
)

PRIMARY_INDEX_NAME = "primary"


def validate_identifier(name: str, *, max_length: int, kind: str = "identifier") -> str:
    if not name:
        raise InvalidIdentifierError(f"{kind.capitalize()} name must not be empty")
    if len(name) > max_length:
        raise InvalidIdentifierError(
            f"{kind.capitalize()} name '{name}' exceeds {max_length} characters"
        )
    return name


class Table:
    """
    Mutable definition of a single table.

    Columns keep declaration order; indexes and foreign keys are keyed by
    name and each name is unique within the table.
    """

    def __init__(
        self,
        name: str,
        columns: Iterable[Column] = (),
        *,
        options: Optional[Mapping[str, Any]] = None,
        max_identifier_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH,
    ) -> None:
        self.max_identifier_length = max_identifier_length
        self.name = validate_identifier(name, max_length=max_identifier_length, kind="table")
        self.options: Dict[str, Any] = dict(options or {})
        self._columns: "OrderedDict[str, Column]" = OrderedDict()
        self._indexes: Dict[str, Index] = {}
        self._primary_key: Optional[str] = None
        self._foreign_keys: Dict[str, ForeignKeyConstraint] = {}
        for column in columns:
            self._add_column(column)

    def __repr__(self) -> str:
        return f"Table({self.name!r}, columns={list(self._columns)})"

    # Columns ---------------------------------------------------------------

    def add_column(self, name: str, type_name: str, **options: Any) -> Column:
        return self._add_column(Column(name, type_name, **options))

    def _add_column(self, column: Column) -> Column:
        validate_identifier(column.name, max_length=self.max_identifier_length, kind="column")
        if column.name in self._columns:
            raise ColumnAlreadyExistsError(column.name, self.name)
        stored = replace(column)
        self._columns[column.name] = stored
        return stored

    def has_column(self, name: str) -> bool:
        return name in self._columns

    def get_column(self, name: str) -> Column:
        try:
            return self._columns[name]
        except KeyError as exc:
            raise ColumnNotFoundError(name, self.name) from exc

    def drop_column(self, name: str) -> None:
        if name not in self._columns:
            raise ColumnNotFoundError(name, self.name)
        del self._columns[name]

    @property
    def columns(self) -> List[Column]:
        return list(self._columns.values())

    # Indexes ---------------------------------------------------------------

    def set_primary_key(
        self, columns: Sequence[str], index_name: str = PRIMARY_INDEX_NAME
    ) -> Index:
        self._require_columns(columns)
        validate_identifier(index_name, max_length=self.max_identifier_length, kind="index")
        if index_name in self._indexes and index_name != self._primary_key:
            raise IndexAlreadyExistsError(index_name, self.name)
        if self._primary_key is not None:
            del self._indexes[self._primary_key]
            self._primary_key = None
        index = self._add_index(Index(index_name, list(columns), unique=True, primary=True))
        for column in columns:
            self._columns[column].nullable = False
        self._primary_key = index.name
        return index

    def has_primary_key(self) -> bool:
        return self._primary_key is not None

    def get_primary_key(self) -> Index:
        if self._primary_key is None:
            raise PrimaryKeyMissingError(self.name)
        return self._indexes[self._primary_key]

    def get_primary_key_columns(self) -> List[str]:
        return list(self.get_primary_key().columns)

    def add_index(self, columns: Sequence[str], name: Optional[str] = None) -> Index:
        self._require_columns(columns)
        name = name or self._generate_name(columns, "IDX")
        return self._add_index(Index(name, list(columns)))

    def add_unique_index(self, columns: Sequence[str], name: Optional[str] = None) -> Index:
        self._require_columns(columns)
        name = name or self._generate_name(columns, "UNIQ")
        return self._add_index(Index(name, list(columns), unique=True))

    def _add_index(self, index: Index) -> Index:
        validate_identifier(index.name, max_length=self.max_identifier_length, kind="index")
        if index.name in self._indexes:
            raise IndexAlreadyExistsError(index.name, self.name)
        self._indexes[index.name] = index
        return index

    def has_index(self, name: str) -> bool:
        return name in self._indexes

    def get_index(self, name: str) -> Index:
        try:
            return self._indexes[name]
        except KeyError as exc:
            raise IndexNotFoundError(name, self.name) from exc

    def drop_index(self, name: str) -> None:
        if name not in self._indexes:
            raise IndexNotFoundError(name, self.name)
        if name == self._primary_key:
            self._primary_key = None
        del self._indexes[name]

    @property
    def indexes(self) -> List[Index]:
        return list(self._indexes.values())

    # Foreign keys ----------------------------------------------------------

    def add_foreign_key_constraint(
        self,
        foreign_table: Union["Table", str],
        local_columns: Sequence[str],
        foreign_columns: Sequence[str],
        options: Optional[Mapping[str, Any]] = None,
    ) -> ForeignKeyConstraint:
        name = self._generate_name(local_columns, "FK")
        return self.add_named_foreign_key_constraint(
            name, foreign_table, local_columns, foreign_columns, options
        )

    def add_named_foreign_key_constraint(
        self,
        name: str,
        foreign_table: Union["Table", str],
        local_columns: Sequence[str],
        foreign_columns: Sequence[str],
        options: Optional[Mapping[str, Any]] = None,
    ) -> ForeignKeyConstraint:
        validate_identifier(name, max_length=self.max_identifier_length, kind="foreign key")
        if name in self._foreign_keys:
            raise ForeignKeyAlreadyExistsError(name, self.name)
        self._require_columns(local_columns)
        foreign_name = foreign_table.name if isinstance(foreign_table, Table) else foreign_table
        constraint = ForeignKeyConstraint(
            name=name,
            local_table=self,
            local_columns=list(local_columns),
            foreign_table_name=foreign_name,
            foreign_columns=list(foreign_columns),
            options=dict(options or {}),
        )
        self._foreign_keys[name] = constraint
        return constraint

    def has_foreign_key(self, name: str) -> bool:
        return name in self._foreign_keys

    def get_foreign_key(self, name: str) -> ForeignKeyConstraint:
        try:
            return self._foreign_keys[name]
        except KeyError as exc:
            raise ForeignKeyNotFoundError(name, self.name) from exc

    def remove_foreign_key(self, name: str) -> None:
        if name not in self._foreign_keys:
            raise ForeignKeyNotFoundError(name, self.name)
        del self._foreign_keys[name]

    @property
    def foreign_keys(self) -> List[ForeignKeyConstraint]:
        return list(self._foreign_keys.values())

    # Helpers ---------------------------------------------------------------

    def _require_columns(self, columns: Sequence[str]) -> None:
        for column in columns:
            if column not in self._columns:
                raise ColumnNotFoundError(column, self.name)

    def _generate_name(self, columns: Sequence[str], prefix: str) -> str:
        return generate_identifier_name(
            self.name, columns, prefix, max_length=min(30, self.max_identifier_length)
        )
