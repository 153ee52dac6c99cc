import pytest

from nullable import Bool, DecodeError, DriverScanError, make_bool


@pytest.mark.parametrize(
    ['source', 'expected'],
    [
        (b'null', Bool()),
        (b'false', Bool(False, valid=True)),
        (b'true', Bool(True, valid=True)),
        (b' true\n', Bool(True, valid=True)),
    ]
)
def test_unmarshal_json(source: bytes, expected: Bool) -> None:
    b = Bool(True, valid=True)
    b.unmarshal_json(source)
    assert b == expected


@pytest.mark.parametrize('source', [b'{"key":"value"}', b'', b'1', b'"true"', b'True', b'nul'])
def test_unmarshal_json_invalid(source: bytes) -> None:
    b = Bool()
    with pytest.raises(DecodeError):
        b.unmarshal_json(source)
    assert b.valid is False


@pytest.mark.parametrize(
    ['b', 'expected'],
    [
        (Bool(valid=True), b'false'),
        (Bool(True, valid=True), b'true'),
        (Bool(valid=False), b'null'),
        (Bool(True, valid=False), b'null'),
    ]
)
def test_marshal_json(b: Bool, expected: bytes) -> None:
    assert b.marshal_json() == expected


@pytest.mark.parametrize('value', [True, False])
def test_json_round_trip(value: bool) -> None:
    b = Bool(value, valid=True)
    assert Bool.from_json(b.marshal_json()) == b


def test_value() -> None:
    assert Bool(True, valid=True).value() is True
    assert Bool(False, valid=True).value() is False
    assert Bool(True, valid=False).value() is None


@pytest.mark.parametrize(
    ['src', 'expected'],
    [
        (True, Bool(True, valid=True)),
        (False, Bool(False, valid=True)),
        (1, Bool(True, valid=True)),
        (0, Bool(False, valid=True)),
        ('t', Bool(True, valid=True)),
        ('FALSE', Bool(False, valid=True)),
        (b'true', Bool(True, valid=True)),
        (None, Bool()),
    ]
)
def test_scan(src, expected: Bool) -> None:
    b = Bool(True, valid=True)
    b.scan(src)
    assert b == expected


@pytest.mark.parametrize('src', [2, -1, 'yes', 'tRuE', 1.0, b''])
def test_scan_invalid(src) -> None:
    b = Bool()
    with pytest.raises(DriverScanError):
        b.scan(src)


def test_make_bool() -> None:
    assert make_bool(True) == Bool(True, valid=True)
    assert make_bool(False) == Bool(False, valid=True)
    assert make_bool(None) == Bool()
