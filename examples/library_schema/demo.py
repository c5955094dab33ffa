"""
Library example showcasing idempotent schema definition.
"""

from __future__ import annotations

from typing import List

from schemastate import Schema, SchemaBuilder, Table, get_dialect


def define_writer(table: Table) -> None:
    table.add_column("id", "integer", autoincrement=True)
    table.add_column("name", "string", length=120)
    table.add_column("country", "string", length=60, nullable=True)
    table.set_primary_key(["id"])


def define_genre(table: Table) -> None:
    table.add_column("id", "integer", autoincrement=True)
    table.add_column("name", "string", length=60)
    table.set_primary_key(["id"])
    table.add_unique_index(["name"], "UNIQ_genre_name")


def define_book(table: Table) -> None:
    table.add_column("id", "integer", autoincrement=True)
    table.add_column("title", "string")
    table.add_column("published", "boolean", default=False)
    table.add_column("author_id", "integer")
    table.set_primary_key(["id"])
    table.add_index(["author_id"], "IDX_book_author")


def define_book_genre(table: Table) -> None:
    table.add_column("book_id", "integer")
    table.add_column("genre_id", "integer")
    table.set_primary_key(["book_id", "genre_id"])


def build_schema(schema: Schema | None = None) -> Schema:
    """
    Bring ``schema`` to the library layout; safe to call repeatedly.
    """
    schema = schema if schema is not None else Schema()
    (
        SchemaBuilder(schema)
        .create_table("writer", define_writer)
        .create_table("genre", define_genre)
        .define_table("book", define_book)
        .create_table("book_genre", define_book_genre)
        .define_named_foreign_key(
            "FK_book_writer", "book", ["author_id"], "writer", options={"onDelete": "cascade"}
        )
        .define_named_foreign_key("FK_book_genre_book", "book_genre", ["book_id"], "book")
        .define_named_foreign_key("FK_book_genre_genre", "book_genre", ["genre_id"], "genre")
        .drop_table("legacy_loans")
    )
    return schema


def run_demo(dialect: str = "sqlite") -> List[str]:
    return build_schema().to_sql(get_dialect(dialect))


if __name__ == "__main__":
    for statement in run_demo():
        print(f"{statement};")
