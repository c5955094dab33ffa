"""
schemastate public package initialization.

Declarative, idempotent reconciliation of an in-memory database schema.
"""

from .model import (  # noqa: F401
    Column,
    ForeignKeyConstraint,
    Index,
    Schema,
    Table,
)
from .model.errors import (  # noqa: F401
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
from .config import ConfigurationError, SchemaConfig  # noqa: F401
from .dialects import MySQLDialect, PostgresDialect, SQLiteDialect, get_dialect  # noqa: F401
from .schema import DDLRenderer, SchemaBuilder  # noqa: F401

__all__ = [
    "SchemaBuilder",
    "DDLRenderer",
    "Schema",
    "Table",
    "Column",
    "Index",
    "ForeignKeyConstraint",
    "SchemaConfig",
    "ConfigurationError",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "get_dialect",
    "SchemaError",
    "NotFoundError",
    "AlreadyExistsError",
    "TableNotFoundError",
    "TableAlreadyExistsError",
    "ColumnNotFoundError",
    "ColumnAlreadyExistsError",
    "IndexNotFoundError",
    "IndexAlreadyExistsError",
    "ForeignKeyNotFoundError",
    "ForeignKeyAlreadyExistsError",
    "PrimaryKeyMissingError",
    "InvalidIdentifierError",
    "UnsupportedTypeError",
]
