"""
Bridge-specific exception classes.
"""
import sqlite3

import psycopg


class BridgeError(Exception):
    """Base class for all bridge errors.
    """


class ObjectTooLargeError(BridgeError):
    """Large object declared length exceeds the materialization ceiling.
    """

    def __init__(self, kind: str, ceiling: int, length: int) -> None:
        self.kind = kind
        self.ceiling = ceiling
        self.length = length
        super().__init__(f'{kind} size exceeds max: {ceiling} (length {length})')


class UnsupportedOperationError(BridgeError):
    """Operation the bridge does not implement, e.g. exporting LOB data.
    """


class CursorStateError(BridgeError):
    """Cursor has no current row or the column position is out of range.
    """


class StatementStateError(BridgeError):
    """Statement parameters are incomplete or the position is invalid.
    """


DataAccessError = (
    psycopg.Error,         # Postgres driver errors
    sqlite3.Error,         # SQLite driver errors
    CursorStateError,      # Our cursor adapter
    StatementStateError,   # Our statement adapter
)
