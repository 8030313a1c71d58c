"""SQL comparison and pattern operators used when building filters."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class DatabaseType(Enum):
    """The database engines a datasource can point to."""

    POSTGRESQL = "postgresql"
    SQLSERVER = "sqlserver"
    MYSQL = "mysql"


@runtime_checkable
class Operator(Protocol):
    """Anything that renders a binary SQL operator with its placeholder."""

    def as_str(self, placeholder_counter: int, datasource_type: DatabaseType) -> str:
        """Render the operator followed by the ``$n`` placeholder."""
        ...


class Comp(Enum):
    """Comparison operators."""

    EQ = "="
    NEQ = "<>"
    GT = ">"
    GT_EQ = ">="
    LT = "<"
    LT_EQ = "<="

    def as_str(self, placeholder_counter: int, datasource_type: DatabaseType) -> str:
        """Render e.g. `` = $1``; the datasource type does not matter here."""
        return f" {self.value} ${placeholder_counter}"


_LIKE_CAST_TYPE = {
    DatabaseType.POSTGRESQL: "VARCHAR",
    DatabaseType.SQLSERVER: "VARCHAR",
    DatabaseType.MYSQL: "CHAR",
}


class Like(Enum):
    """``LIKE`` operators matching on both sides, the left side or the right side."""

    FULL = "full"
    LEFT = "left"
    RIGHT = "right"

    def as_str(self, placeholder_counter: int, datasource_type: DatabaseType) -> str:
        """Render the ``LIKE CONCAT(...)`` expression for the given engine."""
        cast = f"CAST(${placeholder_counter} AS {_LIKE_CAST_TYPE[datasource_type]})"
        if self is Like.FULL:
            return f" LIKE CONCAT('%', {cast} ,'%')"
        if self is Like.LEFT:
            return f" LIKE CONCAT('%', {cast})"
        return f" LIKE CONCAT({cast} ,'%')"