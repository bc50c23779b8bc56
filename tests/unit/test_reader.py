"""
Tests for column readers: null indicator handling and present values.
"""
import datetime
import decimal

import pytest
import rowbridge
from rowbridge.reader import read_boolean, read_date, read_decimal
from rowbridge.reader import read_double, read_float, read_integer
from rowbridge.reader import read_long, read_string, read_time
from rowbridge.reader import read_timestamp

SCALAR_READERS = [
    (read_integer, 'get_int', 0),
    (read_long, 'get_long', 0),
    (read_float, 'get_float', 0.0),
    (read_double, 'get_double', 0.0),
    (read_boolean, 'get_boolean', False),
    (read_string, 'get_string', ''),
    (read_time, 'get_time', datetime.time(0, 0)),
    (read_timestamp, 'get_timestamp', datetime.datetime(1970, 1, 1)),
    (read_date, 'get_date', datetime.date(1970, 1, 1)),
    (read_decimal, 'get_decimal', decimal.Decimal('0')),
]


@pytest.mark.parametrize(('reader', 'accessor', 'raw'), SCALAR_READERS)
def test_null_indicator_wins_over_raw_value(scripted_cursor, reader, accessor, raw):
    """A set null indicator yields None whatever the accessor returned"""
    cursor = scripted_cursor([(raw, True)])
    assert reader(1, cursor) is None
    assert cursor.calls == [(accessor, 1), ('was_null', None)]


@pytest.mark.parametrize(('reader', 'accessor', 'raw'), SCALAR_READERS)
def test_native_null_normalized(scripted_cursor, reader, accessor, raw):
    """An accessor returning None is absent even if the indicator is clear"""
    cursor = scripted_cursor([(None, False)])
    assert reader(1, cursor) is None


@pytest.mark.parametrize(('reader', 'accessor', 'raw'), SCALAR_READERS)
def test_zero_like_values_are_present(scripted_cursor, reader, accessor, raw):
    """Zero, False and empty string are values, not NULL"""
    cursor = scripted_cursor([(raw, False)])
    result = reader(1, cursor)
    assert result is not None
    assert result == raw


def test_present_values(scripted_cursor):
    """Present values are returned unchanged"""
    ts = datetime.datetime(2023, 5, 15, 14, 30, 45)
    cursor = scripted_cursor([
        (7, False),
        (2**40, False),
        (1.5, False),
        (3.14159, False),
        (True, False),
        ('text', False),
        (datetime.time(14, 30), False),
        (ts, False),
        (datetime.date(2023, 5, 15), False),
        (decimal.Decimal('123.45'), False),
    ])

    assert read_integer(1, cursor) == 7
    assert read_long(2, cursor) == 2**40
    assert read_float(3, cursor) == 1.5
    assert read_double(4, cursor) == 3.14159
    assert read_boolean(5, cursor) is True
    assert read_string(6, cursor) == 'text'
    assert read_time(7, cursor) == datetime.time(14, 30)
    assert read_timestamp(8, cursor) == ts
    assert read_date(9, cursor) == datetime.date(2023, 5, 15)
    assert read_decimal(10, cursor) == decimal.Decimal('123.45')


def test_mixed_row_scenario(scripted_cursor):
    """Row [NULL, 'hello', 42] reads as (None, 'hello', 42)"""
    cursor = scripted_cursor([(0, True), ('hello', False), (42, False)])

    result = (
        rowbridge.read_integer(1, cursor),
        rowbridge.read_string(2, cursor),
        rowbridge.read_long(3, cursor),
    )

    assert result == (None, 'hello', 42)


def test_cursor_errors_propagate():
    """Errors from the cursor are not caught"""
    class BrokenCursor:
        def get_int(self, col):
            raise rowbridge.CursorStateError('closed')

        def was_null(self):
            return False

    with pytest.raises(rowbridge.CursorStateError, match='closed'):
        read_integer(1, BrokenCursor())
