"""
Schema-level configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

DEFAULT_MAX_IDENTIFIER_LENGTH = 63


class ConfigurationError(ValueError):
    """Raised when schema configuration values are invalid."""


@dataclass
class SchemaConfig:
    """
    Settings shared by every table created within a :class:`Schema`.

    ``default_table_options`` is copied into each table created through
    :meth:`Schema.create_table`, so per-table edits never leak back here.
    """

    name: Optional[str] = None
    max_identifier_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
    default_table_options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.max_identifier_length <= 0:
            raise ConfigurationError(
                f"max_identifier_length must be positive, got {self.max_identifier_length}"
            )

    @classmethod
    def from_env(cls, prefix: str = "SCHEMASTATE_", **kwargs: Any) -> "SchemaConfig":
        """
        Build a config from ``<prefix>NAME`` and ``<prefix>MAX_IDENTIFIER_LENGTH``.

        Explicit keyword arguments win over environment values.
        """

        values: Dict[str, Any] = {}
        name = os.getenv(f"{prefix}NAME")
        if name:
            values["name"] = name
        raw_length = os.getenv(f"{prefix}MAX_IDENTIFIER_LENGTH")
        if raw_length:
            values["max_identifier_length"] = _parse_positive_int(
                raw_length, key=f"{prefix}MAX_IDENTIFIER_LENGTH"
            )
        values.update(kwargs)
        return cls(**values)


def _parse_positive_int(value: str, *, key: str) -> int:
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got '{value}'") from exc
    if parsed <= 0:
        raise ConfigurationError(f"{key} must be positive, got {parsed}")
    return parsed
