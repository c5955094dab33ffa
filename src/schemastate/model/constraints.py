"""
Index and foreign key constraint definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .table import Table


@dataclass
class Index:
    name: str
    columns: List[str]
    unique: bool = False
    primary: bool = False


@dataclass
class ForeignKeyConstraint:
    """
    Named mapping of local columns onto columns of another table.

    The foreign side is held by name so replacing the referenced table in a
    schema never leaves the constraint pointing at a stale object.
    """

    name: str
    local_table: "Table"
    local_columns: List[str]
    foreign_table_name: str
    foreign_columns: List[str]
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def local_table_name(self) -> str:
        return self.local_table.name

    @property
    def on_delete(self) -> Optional[str]:
        return self._option("onDelete", "on_delete")

    @property
    def on_update(self) -> Optional[str]:
        return self._option("onUpdate", "on_update")

    def _option(self, *keys: str) -> Optional[str]:
        for key in keys:
            value = self.options.get(key)
            if value:
                return str(value).upper()
        return None

    def __repr__(self) -> str:
        return (
            f"ForeignKeyConstraint({self.name!r}, "
            f"{self.local_table_name}{tuple(self.local_columns)}"
            f" -> {self.foreign_table_name}{tuple(self.foreign_columns)})"
        )
