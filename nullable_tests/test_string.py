import pytest

from nullable import DecodeError, DriverScanError, String, make_string
from nullable_tests.utils import patch_settings


@pytest.mark.parametrize(
    ['source', 'expected'],
    [
        (b'null', String()),
        # a quoted "null" is a string like any other
        (b'"null"', String('null', valid=True)),
        (b'"hello"', String('hello', valid=True)),
        (b'""', String('', valid=True)),
        (b'"\\u00e1\\n"', String('á\n', valid=True)),
    ]
)
def test_unmarshal_json(source: bytes, expected: String) -> None:
    s = String()
    s.unmarshal_json(source)
    assert s == expected


@pytest.mark.parametrize('source', [b'{"key":"value"}', b'', b'123', b'true', b'NULL', b'"unterminated'])
def test_unmarshal_json_invalid(source: bytes) -> None:
    s = String('previous', valid=True)
    with pytest.raises(DecodeError):
        s.unmarshal_json(source)
    # a failed decode leaves the receiver unchanged
    assert s == String('previous', valid=True)


def test_unmarshal_null_resets_payload() -> None:
    s = String('hello', valid=True)
    s.unmarshal_json(b'null')
    assert s.valid is False
    assert s.v == ''


@pytest.mark.parametrize(
    ['s', 'expected'],
    [
        (String('hello', valid=True), b'"hello"'),
        (String('', valid=False), b'null'),
        (String('', valid=True), b'""'),
        # absent is always null, no matter the payload
        (String('hello', valid=False), b'null'),
        (String('a"b\\c', valid=True), b'"a\\"b\\\\c"'),
        (String('<&>', valid=True), b'"<&>"'),
        (String('ü', valid=True), '"ü"'.encode('utf-8')),
    ]
)
def test_marshal_json(s: String, expected: bytes) -> None:
    assert s.marshal_json() == expected


def test_marshal_json_ensure_ascii() -> None:
    with patch_settings(TEXT_ENSURE_ASCII=True):
        assert String('ü', valid=True).marshal_json() == b'"\\u00fc"'


@pytest.mark.parametrize('value', ['hello', '', 'null', 'café', '\U0001f600'])
def test_json_round_trip(value: str) -> None:
    s = String(value, valid=True)
    assert String.from_json(s.marshal_json()) == s


@pytest.mark.parametrize(
    ['s', 'expected'],
    [
        (String('hello', valid=True), 'hello'),
        (String('', valid=True), ''),
        (String('hello', valid=False), None),
    ]
)
def test_value(s: String, expected: str | None) -> None:
    assert s.value() == expected


@pytest.mark.parametrize(
    ['src', 'expected'],
    [
        ('', String('', valid=True)),
        ('hello', String('hello', valid=True)),
        (b'bytes', String('bytes', valid=True)),
        (123, String('123', valid=True)),
        (1.5, String('1.5', valid=True)),
        (True, String('true', valid=True)),
        (None, String()),
    ]
)
def test_scan(src, expected: String) -> None:
    s = String('previous', valid=True)
    s.scan(src)
    assert s == expected


def test_scan_invalid() -> None:
    s = String()
    with pytest.raises(DriverScanError):
        s.scan(b'\xff\xfe')
    with pytest.raises(DriverScanError):
        s.scan([1, 2])  # type: ignore[arg-type]
    assert s == String()


def test_scan_value_fixed_point_when_absent() -> None:
    s = String('hello', valid=False)
    s.scan(s.value())
    assert s == String()


def test_make_string() -> None:
    assert make_string('hello') == String('hello', valid=True)
    assert make_string('') == String('', valid=True)
    assert make_string(None) == String()


def test_lone_surrogate_escape_is_replaced() -> None:
    s = String.from_json(b'"a\\ud800b"')
    assert s == String('a�b', valid=True)
    assert s.marshal_json() == '"a�b"'.encode('utf-8')


def test_marshal_json_lone_surrogate() -> None:
    # text built directly may still hold one, it is escaped instead of failing
    assert String('\ud800', valid=True).marshal_json() == b'"\\ud800"'
