"""Result rows returned by a database query, tagged with their engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from canyonsql.operators import DatabaseType

_DESERIALIZERS = {
    DatabaseType.POSTGRESQL: "deserialize_postgresql",
    DatabaseType.SQLSERVER: "deserialize_sqlserver",
    DatabaseType.MYSQL: "deserialize_mysql",
}


@dataclass
class CanyonRows:
    """The rows of a query result together with the engine that produced them.

    A mapper given to :meth:`into_results` provides ``deserialize_postgresql``,
    ``deserialize_sqlserver`` and ``deserialize_mysql``, each turning one
    driver row into a user instance.
    """

    database_type: DatabaseType
    rows: list[Any] = field(default_factory=list)

    def rows_for(self, database_type: DatabaseType) -> list[Any]:
        """Return the raw rows, checking they came from ``database_type``."""
        if self.database_type is not database_type:
            raise ValueError(
                f"rows come from {self.database_type.value}, not {database_type.value}"
            )
        return self.rows

    def into_results(self, mapper: Any) -> list[Any]:
        """Deserialize every row with the mapper method for this engine."""
        deserialize = getattr(mapper, _DESERIALIZERS[self.database_type])
        return [deserialize(row) for row in self.rows]

    def is_empty(self) -> bool:
        """Return True when there are no rows."""
        return not self.rows

    def __len__(self) -> int:
        return len(self.rows)