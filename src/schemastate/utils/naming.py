"""
Naming utilities for schema identifiers.
"""

import zlib
from typing import Sequence


def generate_identifier_name(
    table: str, columns: Sequence[str], prefix: str, max_length: int = 30
) -> str:
    """
    Derive a stable constraint or index name from a table and its columns.

    ``generate_identifier_name("foo", ["bar_id"], "FK")`` always yields the same
    upper-case ``FK_<hash>`` string, truncated to ``max_length``.
    """
    digest = "".join(format(zlib.crc32(part.encode("utf-8")), "x") for part in [table, *columns])
    return f"{prefix}_{digest}"[:max_length].upper()
