"""
Kind-keyed dispatch over the readers and writers.

Row-level callers that know each column's `ValueKind` use these tables
instead of naming a reader per column.
"""
from collections.abc import Callable, Sequence
from typing import Any

from rowbridge.lob import read_blob_ref, read_clob_ref
from rowbridge.lob import write_blob_ref, write_clob_ref
from rowbridge.options import BridgeOptions
from rowbridge.protocol import ParameterStatement, ResultCursor
from rowbridge.reader import read_boolean, read_date, read_decimal
from rowbridge.reader import read_double, read_float, read_integer
from rowbridge.reader import read_long, read_string, read_time
from rowbridge.reader import read_timestamp
from rowbridge.types import DEFAULT_SQL_TYPES, LOB_KINDS, PYTHON_TYPES
from rowbridge.types import ValueKind
from rowbridge.writer import write_boolean, write_date, write_decimal
from rowbridge.writer import write_double, write_float, write_integer
from rowbridge.writer import write_long, write_string, write_time
from rowbridge.writer import write_timestamp

__all__ = [
    'READERS',
    'WRITERS',
    'read_value',
    'write_value',
    'read_columns',
    'write_parameters',
]

READERS: dict[ValueKind, Callable[..., Any]] = {
    ValueKind.INTEGER: read_integer,
    ValueKind.LONG: read_long,
    ValueKind.FLOAT: read_float,
    ValueKind.DOUBLE: read_double,
    ValueKind.BOOLEAN: read_boolean,
    ValueKind.STRING: read_string,
    ValueKind.TIME: read_time,
    ValueKind.TIMESTAMP: read_timestamp,
    ValueKind.DATE: read_date,
    ValueKind.DECIMAL: read_decimal,
    ValueKind.BLOB: read_blob_ref,
    ValueKind.CLOB: read_clob_ref,
}

WRITERS: dict[ValueKind, Callable[..., None]] = {
    ValueKind.INTEGER: write_integer,
    ValueKind.LONG: write_long,
    ValueKind.FLOAT: write_float,
    ValueKind.DOUBLE: write_double,
    ValueKind.BOOLEAN: write_boolean,
    ValueKind.STRING: write_string,
    ValueKind.TIME: write_time,
    ValueKind.TIMESTAMP: write_timestamp,
    ValueKind.DATE: write_date,
    ValueKind.DECIMAL: write_decimal,
    ValueKind.BLOB: write_blob_ref,
    ValueKind.CLOB: write_clob_ref,
}


def read_value(kind: ValueKind, col: int, cursor: ResultCursor,
               options: BridgeOptions | None = None) -> Any:
    """Read one column of the given kind.
    """
    if kind in LOB_KINDS:
        return READERS[kind](col, cursor, options)
    return READERS[kind](col, cursor)


def write_value(kind: ValueKind, val: Any, param: int, stmt: ParameterStatement,
                sql_type: int | None = None) -> None:
    """Bind one parameter of the given kind.

    Without `sql_type` the kind's default code is used for NULL binding.
    A present value must already have the kind's Python type; nothing is
    coerced.
    """
    if val is not None and kind not in LOB_KINDS:
        expected = PYTHON_TYPES[kind]
        if not isinstance(val, expected):
            raise TypeError(f'{kind.name} parameter {param} expects {expected.__name__}, '
                            f'got {type(val).__name__}')
    if sql_type is None:
        sql_type = DEFAULT_SQL_TYPES[kind]
    WRITERS[kind](val, param, sql_type, stmt)


def read_columns(kinds: Sequence[ValueKind], cursor: ResultCursor,
                 options: BridgeOptions | None = None) -> tuple:
    """Read columns 1..n of the current row, in order.

    >>> from rowbridge.cursor import RowCursor
    >>> import sqlite3
    >>> cur = sqlite3.connect(':memory:').execute("select null, 'hello', 42")
    >>> rc = RowCursor(cur)
    >>> rc.next()
    True
    >>> read_columns([ValueKind.INTEGER, ValueKind.STRING, ValueKind.LONG], rc)
    (None, 'hello', 42)
    """
    return tuple(read_value(kind, col, cursor, options)
                 for col, kind in enumerate(kinds, start=1))


def write_parameters(kinds: Sequence[ValueKind], values: Sequence[Any],
                     stmt: ParameterStatement,
                     sql_types: Sequence[int | None] | None = None) -> None:
    """Bind parameters 1..n, in order.
    """
    if len(kinds) != len(values):
        raise ValueError(f'Got {len(values)} values for {len(kinds)} kinds')
    if sql_types is None:
        sql_types = [None] * len(kinds)
    elif len(sql_types) != len(kinds):
        raise ValueError(f'Got {len(sql_types)} type codes for {len(kinds)} kinds')
    for param, (kind, val, sql_type) in enumerate(zip(kinds, values, sql_types), start=1):
        write_value(kind, val, param, stmt, sql_type)
