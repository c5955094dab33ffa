"""
Error hierarchy for the schema model.
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base error for schema model failures."""


class NotFoundError(SchemaError):
    """Raised when a named schema object does not exist."""


class AlreadyExistsError(SchemaError):
    """Raised when a named schema object would be duplicated."""


class TableNotFoundError(NotFoundError):
    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f"Table '{table}' does not exist in the schema")


class TableAlreadyExistsError(AlreadyExistsError):
    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f"Table '{table}' already exists in the schema")


class ColumnNotFoundError(NotFoundError):
    def __init__(self, column: str, table: str) -> None:
        self.column = column
        self.table = table
        super().__init__(f"Column '{column}' does not exist on table '{table}'")


class ColumnAlreadyExistsError(AlreadyExistsError):
    def __init__(self, column: str, table: str) -> None:
        self.column = column
        self.table = table
        super().__init__(f"Column '{column}' already exists on table '{table}'")


class IndexNotFoundError(NotFoundError):
    def __init__(self, index: str, table: str) -> None:
        self.index = index
        self.table = table
        super().__init__(f"Index '{index}' does not exist on table '{table}'")


class IndexAlreadyExistsError(AlreadyExistsError):
    def __init__(self, index: str, table: str) -> None:
        self.index = index
        self.table = table
        super().__init__(f"Index '{index}' already exists on table '{table}'")


class ForeignKeyNotFoundError(NotFoundError):
    def __init__(self, name: str, table: str) -> None:
        self.name = name
        self.table = table
        super().__init__(f"Foreign key '{name}' does not exist on table '{table}'")


class ForeignKeyAlreadyExistsError(AlreadyExistsError):
    def __init__(self, name: str, table: str) -> None:
        self.name = name
        self.table = table
        super().__init__(f"Foreign key '{name}' already exists on table '{table}'")


class PrimaryKeyMissingError(SchemaError):
    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f"Table '{table}' has no primary key")


class InvalidIdentifierError(SchemaError):
    """Raised for empty identifiers or identifiers exceeding the configured length."""


class UnsupportedTypeError(SchemaError):
    """Raised when a dialect cannot render a generic column type."""
