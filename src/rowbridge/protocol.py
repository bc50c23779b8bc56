"""Collaborator protocols.

The bridge only calls into these; it never creates or owns them. Any object
with matching methods works, whether a `RowCursor` over a PEP-249 driver or
a driver-native result set.
"""
import datetime
import decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class LobHandle(Protocol):
    """Large object locator with 1-based range reads."""

    def size(self) -> int:
        """Declared length in bytes (binary) or characters (character)."""
        ...

    def read(self, offset: int = 1, amount: int | None = None) -> bytes | str:
        """Read `amount` units starting at 1-based `offset`."""
        ...


@runtime_checkable
class ResultCursor(Protocol):
    """Positioned result cursor with per-type accessors.

    `was_null` reports on the most recent accessor call.
    """

    def was_null(self) -> bool: ...

    def get_int(self, col: int) -> int: ...

    def get_long(self, col: int) -> int: ...

    def get_float(self, col: int) -> float: ...

    def get_double(self, col: int) -> float: ...

    def get_boolean(self, col: int) -> bool: ...

    def get_string(self, col: int) -> str | None: ...

    def get_time(self, col: int) -> datetime.time | None: ...

    def get_timestamp(self, col: int) -> datetime.datetime | None: ...

    def get_date(self, col: int) -> datetime.date | None: ...

    def get_decimal(self, col: int) -> decimal.Decimal | None: ...

    def get_blob(self, col: int) -> LobHandle | None: ...

    def get_clob(self, col: int) -> LobHandle | None: ...


@runtime_checkable
class ParameterStatement(Protocol):
    """Prepared statement with positional setters and a typed NULL binder."""

    def set_null(self, param: int, sql_type: int) -> None: ...

    def set_int(self, param: int, value: int) -> None: ...

    def set_long(self, param: int, value: int) -> None: ...

    def set_float(self, param: int, value: float) -> None: ...

    def set_double(self, param: int, value: float) -> None: ...

    def set_boolean(self, param: int, value: bool) -> None: ...

    def set_string(self, param: int, value: str) -> None: ...

    def set_time(self, param: int, value: datetime.time) -> None: ...

    def set_timestamp(self, param: int, value: datetime.datetime) -> None: ...

    def set_date(self, param: int, value: datetime.date) -> None: ...

    def set_decimal(self, param: int, value: decimal.Decimal) -> None: ...
