"""
Typed value kinds, SQL type codes and owned large-object buffers.

SQL type codes follow the JDBC/ODBC numbering (4 = INTEGER, -5 = BIGINT,
...). They are passed through to the statement untouched, so any integer a
driver understands may be used in place of a `SqlType` member.
"""
import datetime
import decimal
from dataclasses import dataclass, field
from enum import Enum, IntEnum

__all__ = [
    'SqlType',
    'ValueKind',
    'BlobRef',
    'ClobRef',
    'DEFAULT_SQL_TYPES',
    'PYTHON_TYPES',
    'LOB_KINDS',
]


class SqlType(IntEnum):
    """Integer SQL type codes."""
    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    NULL = 0
    OTHER = 1111
    BLOB = 2004
    CLOB = 2005
    BOOLEAN = 16


class ValueKind(Enum):
    """Variants of a typed column value. Absent is represented by None."""
    INTEGER = 'integer'
    LONG = 'long'
    FLOAT = 'float'
    DOUBLE = 'double'
    BOOLEAN = 'boolean'
    STRING = 'string'
    TIME = 'time'
    TIMESTAMP = 'timestamp'
    DATE = 'date'
    DECIMAL = 'decimal'
    BLOB = 'blob'
    CLOB = 'clob'


@dataclass(frozen=True)
class BlobRef:
    """Fully materialized binary large object.

    >>> ref = BlobRef(b'abc')
    >>> ref.length, len(ref)
    (3, 3)
    """
    data: bytes
    length: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'data', bytes(self.data))
        object.__setattr__(self, 'length', len(self.data))

    def __len__(self) -> int:
        return self.length


@dataclass(frozen=True)
class ClobRef:
    """Fully materialized character large object.

    >>> str(ClobRef('hello'))
    'hello'
    """
    data: str
    length: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'length', len(self.data))

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.data


LOB_KINDS = frozenset({ValueKind.BLOB, ValueKind.CLOB})

DEFAULT_SQL_TYPES: dict[ValueKind, SqlType] = {
    ValueKind.INTEGER: SqlType.INTEGER,
    ValueKind.LONG: SqlType.BIGINT,
    ValueKind.FLOAT: SqlType.REAL,
    ValueKind.DOUBLE: SqlType.DOUBLE,
    ValueKind.BOOLEAN: SqlType.BOOLEAN,
    ValueKind.STRING: SqlType.VARCHAR,
    ValueKind.TIME: SqlType.TIME,
    ValueKind.TIMESTAMP: SqlType.TIMESTAMP,
    ValueKind.DATE: SqlType.DATE,
    ValueKind.DECIMAL: SqlType.DECIMAL,
    ValueKind.BLOB: SqlType.BLOB,
    ValueKind.CLOB: SqlType.CLOB,
}

PYTHON_TYPES: dict[ValueKind, type] = {
    ValueKind.INTEGER: int,
    ValueKind.LONG: int,
    ValueKind.FLOAT: float,
    ValueKind.DOUBLE: float,
    ValueKind.BOOLEAN: bool,
    ValueKind.STRING: str,
    ValueKind.TIME: datetime.time,
    ValueKind.TIMESTAMP: datetime.datetime,
    ValueKind.DATE: datetime.date,
    ValueKind.DECIMAL: decimal.Decimal,
    ValueKind.BLOB: BlobRef,
    ValueKind.CLOB: ClobRef,
}
