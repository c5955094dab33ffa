import pytest

from schemastate.dialects import PostgresDialect, SQLiteDialect, get_dialect
from schemastate.model import Column, UnsupportedTypeError


def test_sqlite_identifier_quoting():
    dialect = SQLiteDialect()
    assert dialect.quote_identifier("table") == '"table"'
    assert dialect.quote_identifier('bad"name') == '"bad""name"'


def test_sqlite_column_definition():
    dialect = SQLiteDialect()
    rendered = dialect.render_column_definition("name", "TEXT", nullable=False)
    assert rendered == '"name" TEXT NOT NULL'
    assert dialect.render_column_definition("note", "TEXT", nullable=True) == '"note" TEXT'


def test_sqlite_column_types():
    dialect = SQLiteDialect()
    assert dialect.column_type(Column("name", "string")) == "VARCHAR(255)"
    assert dialect.column_type(Column("code", "string", length=3)) == "VARCHAR(3)"
    with pytest.raises(UnsupportedTypeError):
        dialect.column_type(Column("data", "json"))


def test_sqlite_capabilities():
    assert SQLiteDialect().capabilities.supports_alter_foreign_keys is False


def test_get_dialect_registry():
    assert isinstance(get_dialect("SQLite"), SQLiteDialect)
    assert isinstance(get_dialect("postgres"), PostgresDialect)
    with pytest.raises(ValueError):
        get_dialect("oracle")
