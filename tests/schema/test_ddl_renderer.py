import logging

import pytest

from schemastate import SchemaConfig
from schemastate.dialects import MySQLDialect, PostgresDialect, SQLiteDialect
from schemastate.model import Schema, Table, UnsupportedTypeError
from schemastate.schema import DDLRenderer, SchemaBuilder


def build_schema(config: SchemaConfig | None = None) -> Schema:
    schema = Schema(config=config)

    def define_author(table: Table) -> None:
        table.add_column("id", "integer", autoincrement=True)
        table.add_column("name", "string", length=80)
        table.set_primary_key(["id"])

    def define_post(table: Table) -> None:
        table.add_column("id", "integer")
        table.add_column("title", "string")
        table.add_column("views", "integer", default=0)
        table.add_column("author_id", "integer", nullable=True)
        table.set_primary_key(["id"])
        table.add_index(["author_id"], "IDX_post_author")

    (
        SchemaBuilder(schema)
        .create_table("author", define_author)
        .create_table("post", define_post)
        .define_named_foreign_key(
            "FK_post_author", "post", ["author_id"], "author", options={"onDelete": "set null"}
        )
    )
    return schema


def test_create_table_sql_sqlite():
    renderer = DDLRenderer(SQLiteDialect())
    sql = renderer.create_table_sql(build_schema().get_table("author"))
    expected = (
        'CREATE TABLE IF NOT EXISTS "author" ("id" INTEGER NOT NULL, '
        '"name" VARCHAR(80) NOT NULL, PRIMARY KEY ("id"))'
    )
    assert sql == expected


def test_sqlite_inlines_foreign_keys():
    statements = DDLRenderer(SQLiteDialect()).render(build_schema())
    assert statements == [
        'CREATE TABLE IF NOT EXISTS "author" ("id" INTEGER NOT NULL, '
        '"name" VARCHAR(80) NOT NULL, PRIMARY KEY ("id"))',
        'CREATE TABLE IF NOT EXISTS "post" ("id" INTEGER NOT NULL, "title" VARCHAR(255) NOT NULL, '
        '"views" INTEGER NOT NULL DEFAULT 0, "author_id" INTEGER, PRIMARY KEY ("id"), '
        'CONSTRAINT "FK_post_author" FOREIGN KEY ("author_id") '
        'REFERENCES "author" ("id") ON DELETE SET NULL)',
        'CREATE INDEX "IDX_post_author" ON "post" ("author_id")',
    ]


def test_postgres_emits_alter_table_for_foreign_keys():
    statements = DDLRenderer(PostgresDialect()).render(build_schema())
    assert statements[0].startswith('CREATE TABLE IF NOT EXISTS "author" ("id" SERIAL NOT NULL')
    assert statements[-1] == (
        'ALTER TABLE "post" ADD CONSTRAINT "FK_post_author" FOREIGN KEY ("author_id") '
        'REFERENCES "author" ("id") ON DELETE SET NULL'
    )
    assert not any("CONSTRAINT" in stmt for stmt in statements[:-1])


def test_mysql_autoincrement_and_quoting():
    sql = DDLRenderer(MySQLDialect()).create_table_sql(build_schema().get_table("author"))
    assert "`id` INT NOT NULL AUTO_INCREMENT" in sql
    assert sql.endswith("PRIMARY KEY (`id`))")


def test_namespace_applied_when_dialect_supports_it():
    schema = build_schema(SchemaConfig(name="library"))
    statements = schema.to_sql(PostgresDialect())
    assert statements[0].startswith('CREATE TABLE IF NOT EXISTS "library"."author"')
    assert 'REFERENCES "library"."author"' in statements[-1]
    sqlite_statements = schema.to_sql(SQLiteDialect())
    assert sqlite_statements[0].startswith('CREATE TABLE IF NOT EXISTS "author"')


def test_unique_index_rendering():
    table = Table("tag")
    table.add_column("label", "string", length=32)
    index = table.add_unique_index(["label"], "UNIQ_tag_label")
    sql = DDLRenderer(SQLiteDialect()).create_index_sql(table, index)
    assert sql == 'CREATE UNIQUE INDEX "UNIQ_tag_label" ON "tag" ("label")'


def test_string_and_boolean_defaults():
    table = Table("flags")
    table.add_column("label", "string", default="it's")
    table.add_column("enabled", "boolean", default=True)
    sql = DDLRenderer(SQLiteDialect()).create_table_sql(table)
    assert "DEFAULT 'it''s'" in sql
    assert '"enabled" BOOLEAN NOT NULL DEFAULT 1' in sql


def test_unsupported_type_raises():
    table = Table("blob_store")
    table.add_column("payload", "blob")
    with pytest.raises(UnsupportedTypeError):
        DDLRenderer(SQLiteDialect()).create_table_sql(table)


def test_drop_table_sql_logs_warning(caplog):
    caplog.set_level(logging.WARNING, logger="schemastate.schema.ddl")
    sql = DDLRenderer(SQLiteDialect()).drop_table_sql("post")
    assert sql == 'DROP TABLE IF EXISTS "post"'
    assert any("DROP TABLE generated" in record.message for record in caplog.records)
