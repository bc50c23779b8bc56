"""
Outbound statement adapter over PEP-249 (DB-API 2.0) cursors.

`BoundStatement` collects positional parameters through typed setters and
executes them with a qmark/format-style DB-API cursor. Typed NULLs are
bound as None and their SQL type code is kept in `null_types`.
"""
import datetime
import decimal
import logging
import sqlite3
import time
from typing import Any

import numpy as np

from rowbridge.exceptions import StatementStateError

logger = logging.getLogger(__name__)

__all__ = ['BoundStatement', 'register_sqlite_adapters']


def adapt_date_iso(val: datetime.date) -> str:
    """Convert date to ISO 8601 format string.

    >>> adapt_date_iso(datetime.date(2023, 5, 15))
    '2023-05-15'
    """
    return val.isoformat()


def adapt_datetime_iso(val: datetime.datetime) -> str:
    """Convert datetime to ISO 8601 format string.

    >>> adapt_datetime_iso(datetime.datetime(2023, 5, 15, 14, 30, 45))
    '2023-05-15T14:30:45'
    """
    return val.isoformat()


def adapt_time_iso(val: datetime.time) -> str:
    """Convert time to ISO 8601 format string.

    >>> adapt_time_iso(datetime.time(14, 30, 45, 120000))
    '14:30:45.120000'
    """
    return val.isoformat()


def adapt_decimal(val: decimal.Decimal) -> str:
    """Keep decimals exact by storing their text form."""
    return str(val)


def register_sqlite_adapters() -> None:
    """Register sqlite3 adapters for temporal and decimal parameters.

    Note:
        sqlite3 adapters are process-global, not per-connection.
    """
    sqlite3.register_adapter(datetime.date, adapt_date_iso)
    sqlite3.register_adapter(datetime.datetime, adapt_datetime_iso)
    sqlite3.register_adapter(datetime.time, adapt_time_iso)
    sqlite3.register_adapter(decimal.Decimal, adapt_decimal)


class BoundStatement:
    """Parameterized statement with 1-based positional binding slots."""

    def __init__(self, sql: str) -> None:
        self.sql = sql
        self._params: dict[int, Any] = {}
        self.null_types: dict[int, int] = {}

    def _bind(self, param: int, val: Any) -> None:
        if param < 1:
            raise StatementStateError(f'Parameter positions are 1-based, got {param}')
        self._params[param] = val
        self.null_types.pop(param, None)

    def set_null(self, param: int, sql_type: int) -> None:
        self._bind(param, None)
        self.null_types[param] = int(sql_type)

    def set_int(self, param: int, val: int) -> None:
        self._bind(param, int(val))

    set_long = set_int

    def set_float(self, param: int, val: float) -> None:
        self._bind(param, float(np.float32(val)))

    def set_double(self, param: int, val: float) -> None:
        self._bind(param, float(val))

    def set_boolean(self, param: int, val: bool) -> None:
        self._bind(param, bool(val))

    def set_string(self, param: int, val: str) -> None:
        self._bind(param, val)

    def set_time(self, param: int, val: datetime.time) -> None:
        self._bind(param, val)

    def set_timestamp(self, param: int, val: datetime.datetime) -> None:
        self._bind(param, val)

    def set_date(self, param: int, val: datetime.date) -> None:
        self._bind(param, val)

    def set_decimal(self, param: int, val: decimal.Decimal) -> None:
        self._bind(param, val)

    def clear_parameters(self) -> None:
        self._params.clear()
        self.null_types.clear()

    def parameters(self) -> tuple:
        """Bound values ordered by position.

        Raises StatementStateError if any position up to the highest bound
        one is missing.
        """
        count = max(self._params, default=0)
        missing = [i for i in range(1, count + 1) if i not in self._params]
        if missing:
            raise StatementStateError(f'Parameters not bound: {missing}')
        return tuple(self._params[i] for i in range(1, count + 1))

    def execute(self, cursor: Any) -> Any:
        """Execute on a DB-API cursor and return its result."""
        params = self.parameters()
        start = time.time()
        logger.debug(f'SQL:\n{self.sql}\nparams: {len(params)}')
        try:
            return cursor.execute(self.sql, params)
        except Exception:
            logger.error(f'Error with statement:\nSQL:\n{self.sql}\nnull types: {self.null_types}')
            raise
        finally:
            logger.debug(f'Statement time: {time.time() - start:.4f}s')
