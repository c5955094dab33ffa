"""
Dialect strategy registry.
"""

from typing import Callable, Dict

from .base import Dialect, DialectCapabilities
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

_REGISTRY: Dict[str, Callable[[], Dialect]] = {
    "sqlite": SQLiteDialect,
    "postgresql": PostgresDialect,
    "postgres": PostgresDialect,
    "mysql": MySQLDialect,
}


def get_dialect(name: str) -> Dialect:
    try:
        factory = _REGISTRY[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown dialect '{name}'") from exc
    return factory()


__all__ = [
    "Dialect",
    "DialectCapabilities",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "get_dialect",
]
