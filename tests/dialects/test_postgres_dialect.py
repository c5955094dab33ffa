from schemastate.dialects import PostgresDialect
from schemastate.model import Column


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.quote_identifier('table"name') == '"table""name"'
    assert dialect.format_table("public.users") == '"public"."users"'


def test_postgres_serial_types():
    dialect = PostgresDialect()
    assert dialect.column_type(Column("id", "integer", autoincrement=True)) == "SERIAL"
    assert dialect.column_type(Column("id", "bigint", autoincrement=True)) == "BIGSERIAL"
    assert dialect.column_type(Column("id", "integer")) == "INTEGER"


def test_postgres_decimal_type():
    dialect = PostgresDialect()
    column = Column("price", "decimal", precision=8, scale=2)
    assert dialect.column_type(column) == "NUMERIC(8, 2)"
    assert dialect.column_type(Column("ratio", "decimal")) == "NUMERIC(10, 0)"
