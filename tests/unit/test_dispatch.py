"""
Tests for kind-keyed dispatch and row-level helpers.
"""
from unittest.mock import Mock, call

import pytest
from rowbridge.dispatch import READERS, WRITERS, read_columns, read_value
from rowbridge.dispatch import write_parameters, write_value
from rowbridge.exceptions import ObjectTooLargeError, UnsupportedOperationError
from rowbridge.options import BridgeOptions
from rowbridge.types import BlobRef, SqlType, ValueKind


def test_tables_cover_every_kind():
    assert set(READERS) == set(ValueKind)
    assert set(WRITERS) == set(ValueKind)


def test_read_value_scalar(scripted_cursor):
    cursor = scripted_cursor([(0, True), (5, False)])
    assert read_value(ValueKind.INTEGER, 1, cursor) is None
    assert read_value(ValueKind.LONG, 2, cursor) == 5


def test_read_value_lob_uses_options(scripted_cursor, fake_lob):
    cursor = scripted_cursor([(fake_lob(3), False)])
    with pytest.raises(ObjectTooLargeError):
        read_value(ValueKind.BLOB, 1, cursor, BridgeOptions(max_blob_length=2))
    assert read_value(ValueKind.BLOB, 1, cursor) == BlobRef(b'xxx')


def test_write_value_default_type_code():
    """Without an explicit code the kind's default is used for NULL"""
    stmt = Mock()
    write_value(ValueKind.TIMESTAMP, None, 1, stmt)
    stmt.set_null.assert_called_once_with(1, SqlType.TIMESTAMP)


def test_write_value_explicit_type_code():
    stmt = Mock()
    write_value(ValueKind.STRING, None, 1, stmt, SqlType.LONGVARCHAR)
    stmt.set_null.assert_called_once_with(1, SqlType.LONGVARCHAR)


def test_write_value_lob_unsupported():
    with pytest.raises(UnsupportedOperationError):
        write_value(ValueKind.CLOB, None, 1, Mock())


def test_read_columns_in_order(scripted_cursor):
    """Columns are read 1..n, one accessor call each"""
    cursor = scripted_cursor([(0, True), ('hello', False), (42, False)])

    row = read_columns([ValueKind.INTEGER, ValueKind.STRING, ValueKind.LONG], cursor)

    assert row == (None, 'hello', 42)
    accessors = [c for c in cursor.calls if c[0] != 'was_null']
    assert accessors == [('get_int', 1), ('get_string', 2), ('get_long', 3)]


def test_write_parameters_in_order():
    stmt = Mock()
    write_parameters(
        [ValueKind.INTEGER, ValueKind.STRING, ValueKind.DOUBLE],
        [None, 'hello', 2.5],
        stmt,
        [SqlType.SMALLINT, None, None],
    )

    assert stmt.mock_calls == [
        call.set_null(1, SqlType.SMALLINT),
        call.set_string(2, 'hello'),
        call.set_double(3, 2.5),
    ]


def test_write_parameters_length_mismatch():
    with pytest.raises(ValueError):
        write_parameters([ValueKind.INTEGER], [1, 2], Mock())
    with pytest.raises(ValueError):
        write_parameters([ValueKind.INTEGER], [1], Mock(), [4, 4])


@pytest.mark.parametrize(('kind', 'value'), [
    (ValueKind.INTEGER, '1'),
    (ValueKind.DOUBLE, '2.5'),
    (ValueKind.DECIMAL, 2.5),
    (ValueKind.STRING, b'bytes'),
    (ValueKind.DATE, '2023-05-15'),
])
def test_write_value_rejects_wrong_python_type(kind, value):
    """No coercion: a value of another type never reaches the statement"""
    stmt = Mock()
    with pytest.raises(TypeError, match=kind.name):
        write_value(kind, value, 1, stmt)
    assert stmt.mock_calls == []


def test_write_value_lob_unsupported_before_type_check():
    """LOB kinds fail as unsupported whatever the value"""
    with pytest.raises(UnsupportedOperationError):
        write_value(ValueKind.BLOB, 'not a ref', 1, Mock())
