"""Identifiers for entity fields and generic column descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from canyonsql.operators import DatabaseType


@dataclass(frozen=True)
class ColumnType:
    """A column type as reported by a specific database driver."""

    database_type: DatabaseType
    native: Any


@dataclass(frozen=True)
class Column:
    """A result column: its name and its driver type."""

    name: str
    column_type: ColumnType


class FieldIdentifier:
    """Mixin for enums whose members name the fields of an entity.

    ``class LeagueField(FieldIdentifier, Enum)`` gives each member an
    ``as_str`` returning the field (column) name.
    """

    def as_str(self) -> str:
        """Return the field name of this member."""
        return self.name  # type: ignore[attr-defined]


@dataclass(frozen=True)
class FieldValueIdentifier:
    """A field name paired with a value usable as a query parameter."""

    column_name: str
    parameter: Any

    def value(self) -> tuple[str, Any]:
        """Return the column name and the parameter value."""
        return self.column_name, self.parameter


class ForeignKeyable:
    """Mixin for entities that may be the parent side of a foreign key."""

    def get_fk_column(self, column: str) -> Any | None:
        """Return the value of the field named ``column``, or None if absent."""
        if column.startswith("_"):
            return None
        return getattr(self, column, None)