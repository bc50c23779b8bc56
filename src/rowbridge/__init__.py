"""
Null-safe type bridge between relational columns and typed Python values.

Readers turn a positioned cursor column into `T | None`, writers bind
`T | None` into a statement slot (None as a typed SQL NULL), and the LOB
bridge materializes BLOB/CLOB columns up to a fixed ceiling.

All functions are stateless:
- Module functions: rowbridge.read_integer(col, cursor)
- Kind dispatch: rowbridge.read_value(ValueKind.INTEGER, col, cursor)
"""
__version__ = '0.1.0'

from rowbridge.cursor import InlineLob, RowCursor
from rowbridge.dispatch import READERS, WRITERS, read_columns, read_value
from rowbridge.dispatch import write_parameters, write_value
from rowbridge.exceptions import BridgeError, CursorStateError, DataAccessError
from rowbridge.exceptions import ObjectTooLargeError, StatementStateError
from rowbridge.exceptions import UnsupportedOperationError
from rowbridge.lob import read_blob_ref, read_clob_ref, write_blob_ref
from rowbridge.lob import write_clob_ref
from rowbridge.options import DEFAULT_MAX_LOB_LENGTH, BridgeOptions, get_options
from rowbridge.reader import read_boolean, read_date, read_decimal, read_double
from rowbridge.reader import read_float, read_integer, read_long, read_string
from rowbridge.reader import read_time, read_timestamp
from rowbridge.statement import BoundStatement, register_sqlite_adapters
from rowbridge.types import DEFAULT_SQL_TYPES, BlobRef, ClobRef, SqlType
from rowbridge.types import ValueKind
from rowbridge.writer import write_boolean, write_date, write_decimal
from rowbridge.writer import write_double, write_float, write_integer
from rowbridge.writer import write_long, write_string, write_time
from rowbridge.writer import write_timestamp

__all__ = [
    # Readers
    'read_integer', 'read_long', 'read_float', 'read_double',
    'read_boolean', 'read_string', 'read_time', 'read_timestamp',
    'read_date', 'read_decimal',
    # Writers
    'write_integer', 'write_long', 'write_float', 'write_double',
    'write_boolean', 'write_string', 'write_time', 'write_timestamp',
    'write_date', 'write_decimal',
    # Large objects
    'read_blob_ref', 'read_clob_ref', 'write_blob_ref', 'write_clob_ref',
    # Dispatch
    'READERS', 'WRITERS', 'read_value', 'write_value',
    'read_columns', 'write_parameters',
    # Types
    'SqlType', 'ValueKind', 'BlobRef', 'ClobRef', 'DEFAULT_SQL_TYPES',
    # Options
    'BridgeOptions', 'DEFAULT_MAX_LOB_LENGTH', 'get_options',
    # Collaborator adapters
    'RowCursor', 'InlineLob', 'BoundStatement', 'register_sqlite_adapters',
    # Exceptions
    'BridgeError', 'ObjectTooLargeError', 'UnsupportedOperationError',
    'CursorStateError', 'StatementStateError', 'DataAccessError',
]
