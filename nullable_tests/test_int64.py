import pytest
from structlog.testing import capture_logs

from nullable import DecodeError, DriverScanError, Int64, make_int64
from nullable.encoding.int import INT64_MAX, INT64_MIN


@pytest.mark.parametrize(
    ['source', 'expected'],
    [
        (b'null', Int64()),
        (b'123', Int64(123, valid=True)),
        (b'-1', Int64(-1, valid=True)),
        (b'0', Int64(0, valid=True)),
        (b'9223372036854775807', Int64(INT64_MAX, valid=True)),
        (b'-9223372036854775808', Int64(INT64_MIN, valid=True)),
    ]
)
def test_unmarshal_json(source: bytes, expected: Int64) -> None:
    n = Int64(5, valid=True)
    n.unmarshal_json(source)
    assert n == expected


@pytest.mark.parametrize(
    'source',
    [b'{"key":"value"}', b'', b'"123"', b'123.5', b'123.0', b'1e3', b'true', b'9223372036854775808'],
)
def test_unmarshal_json_invalid(source: bytes) -> None:
    n = Int64(5, valid=True)
    with pytest.raises(DecodeError):
        n.unmarshal_json(source)
    assert n == Int64(5, valid=True)


@pytest.mark.parametrize(
    ['n', 'expected'],
    [
        (Int64(123, valid=True), b'123'),
        (Int64(valid=True), b'0'),
        (Int64(-42, valid=True), b'-42'),
        (Int64(123, valid=False), b'null'),
    ]
)
def test_marshal_json(n: Int64, expected: bytes) -> None:
    assert n.marshal_json() == expected


def test_integer_scenario() -> None:
    n = Int64.from_json(b'123')
    assert n == Int64(123, valid=True)
    assert n.marshal_json() == b'123'
    assert n.value() == 123


@pytest.mark.parametrize(
    ['src', 'expected'],
    [
        (123, Int64(123, valid=True)),
        (123.0, Int64(123, valid=True)),
        ('-7', Int64(-7, valid=True)),
        (b'42', Int64(42, valid=True)),
        (None, Int64()),
    ]
)
def test_scan(src, expected: Int64) -> None:
    n = Int64(1, valid=True)
    n.scan(src)
    assert n == expected


@pytest.mark.parametrize('src', [True, 1.5, '1.5', 'abc', '', 2**63, '9223372036854775808'])
def test_scan_invalid(src) -> None:
    n = Int64(1, valid=True)
    with pytest.raises(DriverScanError):
        n.scan(src)
    assert n == Int64(1, valid=True)


def test_value() -> None:
    assert Int64(123, valid=True).value() == 123
    assert Int64(123, valid=False).value() is None


def test_scan_value_fixed_point_when_absent() -> None:
    n = Int64(9, valid=False)
    n.scan(n.value())
    assert n == Int64()


def test_make_int64() -> None:
    assert make_int64(0) == Int64(0, valid=True)
    assert make_int64(123) == Int64(123, valid=True)
    assert make_int64(None) == Int64()


def test_scan_failure_is_logged() -> None:
    n = Int64()
    with capture_logs() as logs:
        with pytest.raises(DriverScanError):
            n.scan('abc')
    assert len(logs) == 1
    assert logs[0]['event'] == 'scan failed'
    assert logs[0]['log_level'] == 'debug'
    assert logs[0]['type'] == 'Int64'
