"""
Large object (BLOB/CLOB) materialization.

A LOB column is read through its handle: the declared length is checked
against the ceiling first, then the whole object is read in one call from
offset 1. Oversize objects raise instead of being truncated. Nothing of the
handle survives the call; the returned ref owns its buffer.

Writing LOBs back to a statement is not supported and always raises.
"""
import logging
from typing import Any

from rowbridge.exceptions import ObjectTooLargeError, UnsupportedOperationError
from rowbridge.options import BridgeOptions
from rowbridge.protocol import LobHandle, ParameterStatement, ResultCursor
from rowbridge.types import BlobRef, ClobRef

logger = logging.getLogger(__name__)

__all__ = [
    'read_blob_ref',
    'read_clob_ref',
    'write_blob_ref',
    'write_clob_ref',
]

DEFAULT_OPTIONS = BridgeOptions()


def _materialize(kind: str, handle: LobHandle, ceiling: int) -> Any:
    length = handle.size()
    if length > ceiling:
        # TODO: spill oversize objects to external storage instead of failing
        logger.error(f'{kind} of length {length} rejected, ceiling is {ceiling}')
        raise ObjectTooLargeError(kind, ceiling, length)
    logger.debug(f'Materializing {kind} of length {length}')
    return handle.read(1, length)


def read_blob_ref(col: int, cursor: ResultCursor,
                  options: BridgeOptions | None = None) -> BlobRef | None:
    """Read a BLOB column into an owned byte buffer.

    Args:
        col: 1-based column position
        cursor: Positioned result cursor
        options: Bridge options supplying `max_blob_length`

    Returns
        BlobRef, or None for a NULL column

    Raises
        ObjectTooLargeError: declared length exceeds `max_blob_length`
    """
    if options is None:
        options = DEFAULT_OPTIONS
    handle = cursor.get_blob(col)
    if handle is None:
        return None
    return BlobRef(_materialize('BLOB', handle, options.max_blob_length))


def read_clob_ref(col: int, cursor: ResultCursor,
                  options: BridgeOptions | None = None) -> ClobRef | None:
    """Read a CLOB column into an owned string.

    Same policy as `read_blob_ref`, with the length counted in characters
    and checked against `max_clob_length`.
    """
    if options is None:
        options = DEFAULT_OPTIONS
    handle = cursor.get_clob(col)
    if handle is None:
        return None
    return ClobRef(_materialize('CLOB', handle, options.max_clob_length))


def write_blob_ref(val: BlobRef | None, param: int, sql_type: int,
                   stmt: ParameterStatement) -> None:
    raise UnsupportedOperationError('Unsupported: Cannot export BLOB data')


def write_clob_ref(val: ClobRef | None, param: int, sql_type: int,
                   stmt: ParameterStatement) -> None:
    raise UnsupportedOperationError('Unsupported: Cannot export CLOB data')
