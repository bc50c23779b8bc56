"""
Result cursor adapter over PEP-249 (DB-API 2.0) cursors.

`RowCursor` gives a plain DB-API cursor the positioned accessor interface
the readers expect: 1-based column access on the current row plus a null
indicator for the most recent access. Like a JDBC result set, the numeric
and boolean accessors return a zero default for NULL and only `was_null`
tells the two apart.
"""
import datetime
import decimal
import logging
from typing import Any

import dateutil.parser
import numpy as np

from rowbridge.exceptions import CursorStateError

logger = logging.getLogger(__name__)

__all__ = ['RowCursor', 'InlineLob']

BINARY_TYPES = (bytes, bytearray, memoryview)


class InlineLob:
    """In-memory large object handle with 1-based range reads.

    >>> lob = InlineLob(b'abcdef')
    >>> lob.size()
    6
    >>> lob.read(2, 3)
    b'bcd'
    """

    def __init__(self, value: bytes | str) -> None:
        self._value = value

    def size(self) -> int:
        return len(self._value)

    def read(self, offset: int = 1, amount: int | None = None) -> bytes | str:
        if offset < 1:
            raise ValueError(f'LOB offsets are 1-based, got {offset}')
        start = offset - 1
        if amount is None:
            return self._value[start:]
        return self._value[start:start + amount]


class RowCursor:
    """Positioned cursor over a DB-API cursor.

    Call `next()` to advance; accessors then read the current row.
    """

    def __init__(self, cursor: Any) -> None:
        """Initialize cursor wrapper.

        Args:
            cursor: The underlying DB-API cursor, already executed
        """
        self.dbapi_cursor = cursor
        self._row: tuple | None = None
        self._was_null = False

    def next(self) -> bool:
        """Advance to the next row. Returns False when exhausted."""
        self._row = self.dbapi_cursor.fetchone()
        self._was_null = False
        return self._row is not None

    def close(self) -> None:
        """Close cursor."""
        self._row = None
        self.dbapi_cursor.close()

    def was_null(self) -> bool:
        return self._was_null

    def _get(self, col: int) -> Any:
        if self._row is None:
            raise CursorStateError('Cursor is not positioned on a row')
        if not 1 <= col <= len(self._row):
            raise CursorStateError(
                f'Column {col} out of range, row has {len(self._row)} columns')
        val = self._row[col - 1]
        self._was_null = val is None
        return val

    def _convert(self, col: int, val: Any, kind: str, func: Any) -> Any:
        if isinstance(val, BINARY_TYPES):
            raise self._mismatch(col, val, kind)
        try:
            return func(val)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise self._mismatch(col, val, kind) from e

    def _mismatch(self, col: int, val: Any, kind: str) -> CursorStateError:
        return CursorStateError(f'Column {col}: cannot read {val!r} as {kind}')

    def get_int(self, col: int) -> int:
        val = self._get(col)
        return 0 if val is None else self._convert(col, val, 'int', int)

    get_long = get_int

    def get_float(self, col: int) -> float:
        """Single precision, narrowed through float32.

        A finite value outside the float32 range raises instead of
        becoming infinity.
        """
        val = self._get(col)
        if val is None:
            return 0.0
        source = self._convert(col, val, 'float', float)
        with np.errstate(over='ignore'):
            narrowed = np.float32(source)
        if np.isfinite(source) and not np.isfinite(narrowed):
            raise CursorStateError(f'Column {col}: {val!r} overflows single precision')
        return float(narrowed)

    def get_double(self, col: int) -> float:
        val = self._get(col)
        return 0.0 if val is None else self._convert(col, val, 'double', float)

    def get_boolean(self, col: int) -> bool:
        val = self._get(col)
        if val is None:
            return False
        if not isinstance(val, bool | int):
            raise self._mismatch(col, val, 'boolean')
        return bool(val)

    def get_string(self, col: int) -> str | None:
        val = self._get(col)
        if val is None or isinstance(val, str):
            return val
        raise self._mismatch(col, val, 'string')

    def get_time(self, col: int) -> datetime.time | None:
        val = self._get(col)
        if val is None or isinstance(val, datetime.time):
            return val
        if isinstance(val, datetime.datetime):
            return val.timetz()
        if not isinstance(val, str):
            raise self._mismatch(col, val, 'time')
        return self._convert(col, val, 'time', dateutil.parser.isoparser().parse_isotime)

    def get_timestamp(self, col: int) -> datetime.datetime | None:
        val = self._get(col)
        if val is None or isinstance(val, datetime.datetime):
            return val
        if isinstance(val, datetime.date):
            return datetime.datetime.combine(val, datetime.time())
        if not isinstance(val, str):
            raise self._mismatch(col, val, 'timestamp')
        logger.debug(f'Parsing timestamp text for column {col}: {val!r}')
        return self._convert(col, val, 'timestamp', dateutil.parser.isoparse)

    def get_date(self, col: int) -> datetime.date | None:
        val = self._get(col)
        if val is None:
            return None
        if isinstance(val, datetime.datetime):
            return val.date()
        if isinstance(val, datetime.date):
            return val
        if not isinstance(val, str):
            raise self._mismatch(col, val, 'date')
        return self._convert(col, val, 'date', dateutil.parser.isoparse).date()

    def get_decimal(self, col: int) -> decimal.Decimal | None:
        val = self._get(col)
        if val is None or isinstance(val, decimal.Decimal):
            return val
        if not isinstance(val, int | float | str) or isinstance(val, bool):
            raise self._mismatch(col, val, 'decimal')
        return self._convert(col, val, 'decimal', lambda v: decimal.Decimal(str(v)))

    def get_blob(self, col: int) -> InlineLob | None:
        val = self._get(col)
        if val is None:
            return None
        if not isinstance(val, BINARY_TYPES):
            raise self._mismatch(col, val, 'blob')
        return InlineLob(bytes(val))

    def get_clob(self, col: int) -> InlineLob | None:
        val = self._get(col)
        if val is None:
            return None
        if not isinstance(val, str):
            raise self._mismatch(col, val, 'clob')
        return InlineLob(val)
