"""Values accepted as query parameters and their SQL Server representation."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import Enum
from typing import Any

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1


@dataclass(frozen=True)
class ColumnData:
    """A typed value ready to be bound to a SQL Server statement."""

    class Kind(Enum):
        """The SQL Server wire types a parameter can be sent as."""

        NULL = "Null"
        BIT = "Bit"
        I32 = "I32"
        I64 = "I64"
        F64 = "F64"
        STRING = "String"
        DATE = "Date"
        TIME = "Time"
        DATETIME2 = "DateTime2"
        DATETIMEOFFSET = "DateTimeOffset"

    kind: Kind
    value: Any


def is_query_parameter(value: Any) -> bool:
    """Tell whether ``value`` may be passed as a query parameter."""
    if value is None or isinstance(value, (bool, float, str)):
        return True
    if isinstance(value, int):
        return _I64_MIN <= value <= _I64_MAX
    return isinstance(value, (_dt.datetime, _dt.date, _dt.time))


def to_sqlserver_param(value: Any) -> ColumnData:
    """Convert a query parameter into its SQL Server column data.

    Raises TypeError for unsupported types and ValueError for integers
    outside the 64-bit signed range.
    """
    kind = ColumnData.Kind
    if value is None:
        return ColumnData(kind.NULL, None)
    if isinstance(value, bool):
        return ColumnData(kind.BIT, value)
    if isinstance(value, int):
        if _I32_MIN <= value <= _I32_MAX:
            return ColumnData(kind.I32, value)
        if _I64_MIN <= value <= _I64_MAX:
            return ColumnData(kind.I64, value)
        raise ValueError(f"integer parameter out of the 64-bit range: {value}")
    if isinstance(value, float):
        return ColumnData(kind.F64, value)
    if isinstance(value, str):
        return ColumnData(kind.STRING, value)
    if isinstance(value, _dt.datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return ColumnData(kind.DATETIMEOFFSET, value)
        return ColumnData(kind.DATETIME2, value)
    if isinstance(value, _dt.date):
        return ColumnData(kind.DATE, value)
    if isinstance(value, _dt.time):
        return ColumnData(kind.TIME, value)
    raise TypeError(f"unsupported query parameter type: {type(value).__name__}")