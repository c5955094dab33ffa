"""
In-memory schema model: schemas, tables, columns, and constraints.
"""

from .column import Column
from .constraints import ForeignKeyConstraint, Index
from .errors import (
    AlreadyExistsError,
    ColumnAlreadyExistsError,
    ColumnNotFoundError,
    ForeignKeyAlreadyExistsError,
    ForeignKeyNotFoundError,
    IndexAlreadyExistsError,
    IndexNotFoundError,
    InvalidIdentifierError,
    NotFoundError,
    PrimaryKeyMissingError,
    SchemaError,
    TableAlreadyExistsError,
    TableNotFoundError,
    UnsupportedTypeError,
)
from .schema import Schema
from .table import Table

__all__ = [
    "AlreadyExistsError",
    "Column",
    "ColumnAlreadyExistsError",
    "ColumnNotFoundError",
    "ForeignKeyAlreadyExistsError",
    "ForeignKeyConstraint",
    "ForeignKeyNotFoundError",
    "Index",
    "IndexAlreadyExistsError",
    "IndexNotFoundError",
    "InvalidIdentifierError",
    "NotFoundError",
    "PrimaryKeyMissingError",
    "Schema",
    "SchemaError",
    "Table",
    "TableAlreadyExistsError",
    "TableNotFoundError",
    "UnsupportedTypeError",
]
