from datetime import datetime, timezone

import pytest

from nullable.driver.null import SqlNull
from nullable.exception import DriverScanError
from nullable.types import Int64, String


@pytest.mark.parametrize(
    ['type_', 'src', 'expected'],
    [
        (int, 123, 123),
        (int, '123', 123),
        (str, b'abc', 'abc'),
        (float, 2, 2.0),
        (bool, 1, True),
        (bytes, 'abc', b'abc'),
        (datetime, '2017-11-24T00:00:00Z', datetime(2017, 11, 24, tzinfo=timezone.utc)),
        (list, [1, 2], [1, 2]),
    ]
)
def test_scan(type_, src, expected) -> None:
    box = SqlNull[type_]()
    box.scan(src)
    assert box.valid is True
    assert box.v == expected
    assert box.value() == expected


def test_scan_null() -> None:
    box = SqlNull[int](5, valid=True)
    box.scan(None)
    assert box.v == 0
    assert box.valid is False
    assert box.value() is None


def test_scan_into_scanner_type() -> None:
    box = SqlNull[Int64]()
    box.scan(b'12')
    assert box.v == Int64(12, valid=True)
    # the payload is handed out as is, it is up to the caller to ask it for a driver value
    assert box.value() == Int64(12, valid=True)


def test_scan_invalid_leaves_box_unchanged() -> None:
    box = SqlNull[String](String('x', valid=True), valid=True)
    with pytest.raises(DriverScanError):
        box.scan([1])  # type: ignore[arg-type]
    assert box.v == String('x', valid=True)
    assert box.valid is True


def test_repr() -> None:
    assert repr(SqlNull[int](1, valid=True)) == 'SqlNull[int](v=1, valid=True)'
