"""
Dialect strategy interfaces describing DDL rendering behaviors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol

from ..model.column import Column
from ..model.errors import UnsupportedTypeError

DEFAULT_STRING_LENGTH = 255
DEFAULT_DECIMAL_PRECISION = 10
DEFAULT_DECIMAL_SCALE = 0


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_alter_foreign_keys: bool = True
    supports_schema_namespaces: bool = False


class Dialect(Protocol):
    """
    Strategy interface consumed by the DDL renderer.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    @property
    def autoincrement_clause(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def column_type(self, column: Column) -> str: ...

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str: ...


def render_generic_type(type_map: Mapping[str, str], column: Column, *, dialect: str) -> str:
    try:
        template = type_map[column.type_name]
    except KeyError as exc:
        raise UnsupportedTypeError(
            f"Dialect '{dialect}' cannot render type '{column.type_name}' "
            f"for column '{column.name}'"
        ) from exc
    return template.format(
        length=column.length or DEFAULT_STRING_LENGTH,
        precision=column.precision or DEFAULT_DECIMAL_PRECISION,
        scale=column.scale if column.scale is not None else DEFAULT_DECIMAL_SCALE,
    )
