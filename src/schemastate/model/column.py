"""
Column definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Column:
    """
    A single column on a :class:`Table`.

    ``type_name`` is a generic type name; dialects translate it to SQL.
    """

    name: str
    type_name: str
    nullable: bool = False
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    default: Any = None
    autoincrement: bool = False
