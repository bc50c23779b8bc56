"""
Parameter injection into an outbound statement.

None binds a SQL NULL tagged with the caller's type code; some drivers reject
an untyped NULL, so the code is always required. Present values go through
the native setter for their type with no coercion.
"""
import datetime
import decimal
from typing import Any

from rowbridge.protocol import ParameterStatement

__all__ = [
    'write_integer',
    'write_long',
    'write_float',
    'write_double',
    'write_boolean',
    'write_string',
    'write_time',
    'write_timestamp',
    'write_date',
    'write_decimal',
]


def _write(setter: str, val: Any, param: int, sql_type: int,
           stmt: ParameterStatement) -> None:
    if val is None:
        stmt.set_null(param, sql_type)
    else:
        getattr(stmt, setter)(param, val)


def write_integer(val: int | None, param: int, sql_type: int,
                  stmt: ParameterStatement) -> None:
    _write('set_int', val, param, sql_type, stmt)


def write_long(val: int | None, param: int, sql_type: int,
               stmt: ParameterStatement) -> None:
    _write('set_long', val, param, sql_type, stmt)


def write_float(val: float | None, param: int, sql_type: int,
                stmt: ParameterStatement) -> None:
    _write('set_float', val, param, sql_type, stmt)


def write_double(val: float | None, param: int, sql_type: int,
                 stmt: ParameterStatement) -> None:
    _write('set_double', val, param, sql_type, stmt)


def write_boolean(val: bool | None, param: int, sql_type: int,
                  stmt: ParameterStatement) -> None:
    _write('set_boolean', val, param, sql_type, stmt)


def write_string(val: str | None, param: int, sql_type: int,
                 stmt: ParameterStatement) -> None:
    _write('set_string', val, param, sql_type, stmt)


def write_time(val: datetime.time | None, param: int, sql_type: int,
               stmt: ParameterStatement) -> None:
    _write('set_time', val, param, sql_type, stmt)


def write_timestamp(val: datetime.datetime | None, param: int, sql_type: int,
                    stmt: ParameterStatement) -> None:
    _write('set_timestamp', val, param, sql_type, stmt)


def write_date(val: datetime.date | None, param: int, sql_type: int,
               stmt: ParameterStatement) -> None:
    _write('set_date', val, param, sql_type, stmt)


def write_decimal(val: decimal.Decimal | None, param: int, sql_type: int,
                  stmt: ParameterStatement) -> None:
    _write('set_decimal', val, param, sql_type, stmt)
