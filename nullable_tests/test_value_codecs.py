from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import pytest

from nullable.generic import ValueCodec, has_text_codec, zero_value
from nullable.types import Int64, String


@dataclass
class Inner:
    flag: bool


@dataclass
class Outer:
    id: int
    inner: Inner
    tags: list[str] = field(default_factory=list)
    note: Optional[str] = field(default=None, metadata={'json': 'Note'})
    score: float = 1.0
    raw: bytes = b''


def test_from_type_is_cached() -> None:
    assert ValueCodec.from_type(list[int]) is ValueCodec.from_type(list[int])


@pytest.mark.parametrize(
    ['type_', 'expected'],
    [
        (bool, False),
        (int, 0),
        (float, 0.0),
        (str, ''),
        (bytes, b''),
        (datetime, datetime(1, 1, 1, tzinfo=timezone.utc)),
        (list[int], []),
        (tuple[int, ...], ()),
        (dict[str, int], {}),
        (Optional[int], None),
        (int | None, None),
        (Int64, Int64()),
        (Outer, Outer(0, Inner(False), [], None, 1.0, b'')),
    ]
)
def test_zero_value(type_, expected) -> None:
    assert zero_value(type_) == expected


def test_zero_value_falls_back_to_constructor() -> None:
    class Custom:
        def __eq__(self, other: object) -> bool:
            return isinstance(other, Custom)

    assert zero_value(Custom) == Custom()


@pytest.mark.parametrize('type_', [set[int], dict[int, str], int | str, tuple[int, str], complex])
def test_unsupported_types(type_) -> None:
    with pytest.raises(TypeError):
        ValueCodec.from_type(type_)


def test_has_text_codec() -> None:
    assert has_text_codec(Int64)
    assert has_text_codec(String)
    assert not has_text_codec(int)
    assert not has_text_codec(list[Int64])
    assert not has_text_codec(Outer)


def test_dataclass_codec() -> None:
    codec = ValueCodec.from_type(Outer)
    value = Outer(1, Inner(True), ['a'], 'n', 2.5, b'\xff')
    json_value = codec.value_to_json(value)
    assert json_value == {
        'id': 1,
        'inner': {'flag': True},
        'tags': ['a'],
        'Note': 'n',
        'score': 2.5,
        'raw': '/w==',
    }
    assert codec.json_to_value(json_value) == value


def test_dataclass_codec_missing_members() -> None:
    codec = ValueCodec.from_type(Outer)
    assert codec.json_to_value({'id': 3, 'extra': 'ignored'}) == Outer(3, Inner(False))


@pytest.mark.parametrize(
    ['type_', 'json_value'],
    [
        (bool, 1),
        (int, True),
        (int, 1.5),
        (int, 2**63),
        (float, '1.5'),
        (float, False),
        (str, 1),
        (bytes, 'not base64!'),
        (bytes, 1),
        (datetime, '2017-11-24'),
        (list[int], {}),
        (list[int], ['a']),
        (dict[str, int], []),
        (Outer, []),
        (Outer, {'id': 'x'}),
    ]
)
def test_invalid_json_values(type_, json_value) -> None:
    codec = ValueCodec.from_type(type_)
    with pytest.raises(ValueError):
        codec.json_to_value(json_value)


def test_text_codec_adapter() -> None:
    codec = ValueCodec.from_type(list[String])
    value = codec.json_to_value(['a', None])
    assert value == [String('a', valid=True), String()]
    assert codec.value_to_json(value) == ['a', None]
