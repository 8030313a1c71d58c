"""Rewriting of generic ``$n`` SQL statements for specific engines."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple, TypeVar

DETECT_PARAMS_IN_QUERY = r"\$(\d)+"
DETECT_QUOTE_IN_QUERY = r"\"|\\"

_PARAMS = re.compile(DETECT_PARAMS_IN_QUERY)
_QUOTES = re.compile(DETECT_QUOTE_IN_QUERY)

T = TypeVar("T")


class MySqlStatement(NamedTuple):
    """A statement rewritten for MySQL and whether it was an insert."""

    sql: str
    is_insert: bool


def reorder_params(
    stmt: str, params: Sequence[Any], parser: Callable[[Any], T]
) -> list[T]:
    """Return the parsed params in the order their ``$n`` placeholders appear.

    A placeholder used twice yields its parameter twice. Raises IndexError
    when a placeholder has no matching parameter.
    """
    ordered = []
    for match in _PARAMS.finditer(stmt):
        index = int(match.group()[1:]) - 1
        if not 0 <= index < len(params):
            raise IndexError(f"no parameter for the placeholder {match.group()}")
        ordered.append(parser(params[index]))
    return ordered


def sqlserver_statement(stmt: str) -> str:
    """Adapt a statement to SQL Server.

    A trailing ``RETURNING`` clause becomes ``OUTPUT inserted.<cols>`` before
    ``VALUES``, and ``$n`` placeholders become ``@Pn``.
    """
    if "RETURNING" in stmt:
        head, returning = stmt.split("RETURNING", 1)
        if "VALUES" not in head:
            raise ValueError("a RETURNING statement must contain a VALUES clause")
        columns, values = head.split("VALUES", 1)
        stmt = (
            f"{columns.strip()} OUTPUT inserted.{returning.strip()} VALUES {values.strip()}"
        )
    return stmt.replace("$", "@P")


def mysql_statement(stmt: str) -> MySqlStatement:
    """Adapt a statement to MySQL.

    ``$n`` placeholders become ``?``, double quotes and backslashes are
    dropped, and a `` RETURNING`` clause is cut off, marking the statement
    as an insert.
    """
    sql = _QUOTES.sub("", _PARAMS.sub("?", stmt))
    cut = sql.find(" RETURNING")
    if cut == -1:
        return MySqlStatement(sql, False)
    return MySqlStatement(sql[:cut], True)