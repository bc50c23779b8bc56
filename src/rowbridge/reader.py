"""
Column extraction from a positioned result cursor.

Each reader calls the cursor's native accessor for its type and then the
null indicator. A set indicator wins over whatever the accessor returned, so
a NULL integer column never reads back as 0.
"""
import datetime
import decimal
from typing import Any

from rowbridge.protocol import ResultCursor

__all__ = [
    'read_integer',
    'read_long',
    'read_float',
    'read_double',
    'read_boolean',
    'read_string',
    'read_time',
    'read_timestamp',
    'read_date',
    'read_decimal',
]


def _read(accessor: str, col: int, cursor: ResultCursor) -> Any:
    val = getattr(cursor, accessor)(col)
    if val is None or cursor.was_null():
        return None
    return val


def read_integer(col: int, cursor: ResultCursor) -> int | None:
    return _read('get_int', col, cursor)


def read_long(col: int, cursor: ResultCursor) -> int | None:
    return _read('get_long', col, cursor)


def read_float(col: int, cursor: ResultCursor) -> float | None:
    return _read('get_float', col, cursor)


def read_double(col: int, cursor: ResultCursor) -> float | None:
    return _read('get_double', col, cursor)


def read_boolean(col: int, cursor: ResultCursor) -> bool | None:
    return _read('get_boolean', col, cursor)


def read_string(col: int, cursor: ResultCursor) -> str | None:
    """Read a text column. Empty string is a present value, not absent.
    """
    return _read('get_string', col, cursor)


def read_time(col: int, cursor: ResultCursor) -> datetime.time | None:
    return _read('get_time', col, cursor)


def read_timestamp(col: int, cursor: ResultCursor) -> datetime.datetime | None:
    return _read('get_timestamp', col, cursor)


def read_date(col: int, cursor: ResultCursor) -> datetime.date | None:
    return _read('get_date', col, cursor)


def read_decimal(col: int, cursor: ResultCursor) -> decimal.Decimal | None:
    return _read('get_decimal', col, cursor)
