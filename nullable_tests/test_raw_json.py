import pytest

from nullable import DecodeError, RawJSON, make_raw_json


@pytest.mark.parametrize(
    ['r', 'expected'],
    [
        (RawJSON(b'[1,2,3]', valid=True), b'[1,2,3]'),
        (RawJSON(b'{"a": 1}', valid=True), b'{"a": 1}'),
        # empty bytes are absent, even when valid
        (RawJSON(b'', valid=True), b'null'),
        (RawJSON(b'[1,2,3]', valid=False), b'null'),
    ]
)
def test_marshal_json(r: RawJSON, expected: bytes) -> None:
    assert r.marshal_json() == expected


@pytest.mark.parametrize(
    ['source', 'expected'],
    [
        (b'null', RawJSON()),
        (b'[1, 2, 3]', RawJSON(b'[1, 2, 3]', valid=True)),
        (b' {"a":"b"} ', RawJSON(b' {"a":"b"} ', valid=True)),
        (b'"null"', RawJSON(b'"null"', valid=True)),
    ]
)
def test_unmarshal_json(source: bytes, expected: RawJSON) -> None:
    r = RawJSON()
    r.unmarshal_json(source)
    assert r == expected


@pytest.mark.parametrize('source', [b'', b'[1, 2', b'{"a"}', b'NaN'])
def test_unmarshal_json_invalid(source: bytes) -> None:
    r = RawJSON()
    with pytest.raises(DecodeError):
        r.unmarshal_json(source)
    assert r == RawJSON()


def test_json_round_trip() -> None:
    r = RawJSON(b'{"nested":[true,null,1.5]}', valid=True)
    assert RawJSON.from_json(r.marshal_json()) == r


def test_scan_and_value() -> None:
    r = RawJSON()
    r.scan('{"a":1}')
    assert r == RawJSON(b'{"a":1}', valid=True)
    assert r.value() == '{"a":1}'

    r.scan(b'[1]')
    assert r == RawJSON(b'[1]', valid=True)

    r.scan(None)
    assert r == RawJSON()
    assert r.value() is None


def test_value_empty_is_empty_text() -> None:
    assert RawJSON(b'', valid=True).value() == ''


def test_value_keeps_bytes_that_are_not_utf8() -> None:
    r = RawJSON(b'"\xff"', valid=True)
    text = r.value()
    assert isinstance(text, str)
    r2 = RawJSON()
    r2.scan(text)
    assert r2 == r


def test_unmarshal_deeply_nested() -> None:
    r = RawJSON()
    with pytest.raises(DecodeError):
        r.unmarshal_json(b'[' * 100000)
    assert r == RawJSON()


def test_make_raw_json() -> None:
    assert make_raw_json(b'[1]') == RawJSON(b'[1]', valid=True)
    assert make_raw_json(None) == RawJSON()
