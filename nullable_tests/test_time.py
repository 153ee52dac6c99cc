from datetime import datetime, timedelta, timezone

import pytest

from nullable import DecodeError, DriverScanError, Time, make_time
from nullable.encoding.time import ZERO_TIME

UTC = timezone.utc


@pytest.mark.parametrize(
    ['source', 'expected'],
    [
        (b'null', Time()),
        (b'"2017-11-24T00:00:00Z"', Time(datetime(2017, 11, 24, tzinfo=UTC), valid=True)),
        (b'"2017-11-24T00:00:00.5Z"', Time(datetime(2017, 11, 24, 0, 0, 0, 500000, tzinfo=UTC), valid=True)),
        (
            b'"2017-11-24T10:00:00+02:00"',
            Time(datetime(2017, 11, 24, 10, tzinfo=timezone(timedelta(hours=2))), valid=True),
        ),
    ]
)
def test_unmarshal_json(source: bytes, expected: Time) -> None:
    t = Time()
    t.unmarshal_json(source)
    assert t == expected


@pytest.mark.parametrize(
    'source',
    [b'{"key":"value"}', b'', b'"2017-11-24"', b'"2017-11-24T00:00:00"', b'"not a time"', b'1511481600'],
)
def test_unmarshal_json_invalid(source: bytes) -> None:
    t = Time()
    with pytest.raises(DecodeError):
        t.unmarshal_json(source)
    assert t == Time()


def test_timestamp_scenario() -> None:
    t = Time.from_json(b'"2017-11-24T00:00:00Z"')
    assert t.valid is True
    assert t.v == datetime(2017, 11, 24, tzinfo=UTC)
    assert t.marshal_json() == b'"2017-11-24T00:00:00Z"'


@pytest.mark.parametrize(
    ['t', 'expected'],
    [
        (Time(datetime(2017, 1, 1, tzinfo=UTC), valid=True), b'"2017-01-01T00:00:00Z"'),
        (Time(datetime(2017, 1, 1, 12, 30, 1, 123000, tzinfo=UTC), valid=True), b'"2017-01-01T12:30:01.123Z"'),
        (
            Time(datetime(2017, 1, 1, tzinfo=timezone(timedelta(hours=-3, minutes=-30))), valid=True),
            b'"2017-01-01T00:00:00-03:30"',
        ),
        # naive datetimes are taken to be UTC
        (Time(datetime(2017, 1, 1), valid=True), b'"2017-01-01T00:00:00Z"'),
        (Time(valid=True), b'"0001-01-01T00:00:00Z"'),
        (Time(datetime(2017, 1, 1, tzinfo=UTC), valid=False), b'null'),
    ]
)
def test_marshal_json(t: Time, expected: bytes) -> None:
    assert t.marshal_json() == expected


@pytest.mark.parametrize(
    'value',
    [
        datetime(2017, 11, 24, tzinfo=UTC),
        datetime(1999, 12, 31, 23, 59, 59, 999999, tzinfo=UTC),
        datetime(2024, 2, 29, 8, 15, tzinfo=timezone(timedelta(hours=5, minutes=45))),
    ]
)
def test_json_round_trip(value: datetime) -> None:
    t = Time(value, valid=True)
    assert Time.from_json(t.marshal_json()) == t


@pytest.mark.parametrize(
    ['src', 'expected'],
    [
        (datetime(2017, 1, 1, tzinfo=UTC), Time(datetime(2017, 1, 1, tzinfo=UTC), valid=True)),
        ('2017-01-01T00:00:00Z', Time(datetime(2017, 1, 1, tzinfo=UTC), valid=True)),
        (b'2017-01-01T00:00:00Z', Time(datetime(2017, 1, 1, tzinfo=UTC), valid=True)),
        (None, Time()),
    ]
)
def test_scan(src, expected: Time) -> None:
    t = Time(datetime(2000, 1, 1, tzinfo=UTC), valid=True)
    t.scan(src)
    assert t == expected


@pytest.mark.parametrize('src', [123, 1.5, True, 'yesterday'])
def test_scan_invalid(src) -> None:
    t = Time()
    with pytest.raises(DriverScanError):
        t.scan(src)


def test_value() -> None:
    value = datetime(2017, 1, 1, tzinfo=UTC)
    assert Time(value, valid=True).value() == value
    assert Time(value, valid=False).value() is None


def test_make_time() -> None:
    value = datetime(2017, 1, 1, tzinfo=UTC)
    assert make_time(value) == Time(value, valid=True)
    assert make_time(None) == Time()
    # the zero instant is a value like any other
    assert make_time(ZERO_TIME) == Time(ZERO_TIME, valid=True)
    assert make_time(datetime(1, 1, 1, tzinfo=UTC)).valid is True
