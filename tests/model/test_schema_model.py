import pytest

from schemastate import Schema, SchemaConfig, Table
from schemastate.model import InvalidIdentifierError, TableAlreadyExistsError, TableNotFoundError


def test_schema_tracks_tables_in_insertion_order():
    schema = Schema([Table("b"), Table("a")])
    schema.create_table("c")
    assert schema.table_names == ["b", "a", "c"]
    assert "a" in schema
    assert len(schema) == 3
    assert [table.name for table in schema] == ["b", "a", "c"]


def test_table_names_are_case_sensitive():
    schema = Schema([Table("Foo")])
    assert schema.has_table("Foo")
    assert not schema.has_table("foo")
    schema.create_table("foo")
    assert len(schema) == 2


def test_get_missing_table_raises():
    with pytest.raises(TableNotFoundError) as excinfo:
        Schema().get_table("missing")
    assert excinfo.value.table == "missing"


def test_create_duplicate_table_raises():
    schema = Schema()
    schema.create_table("foo")
    with pytest.raises(TableAlreadyExistsError):
        schema.create_table("foo")


def test_drop_missing_table_raises():
    with pytest.raises(TableNotFoundError):
        Schema().drop_table("missing")


def test_create_table_applies_config():
    config = SchemaConfig(max_identifier_length=10, default_table_options={"engine": "InnoDB"})
    schema = Schema(config=config)
    table = schema.create_table("orders")
    table.options["charset"] = "utf8mb4"
    assert table.options == {"engine": "InnoDB", "charset": "utf8mb4"}
    assert config.default_table_options == {"engine": "InnoDB"}
    with pytest.raises(InvalidIdentifierError):
        schema.create_table("order_line_items")
