# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Value codecs used by `Null[T]` for types that don't define their own JSON encoding.

A codec models how values of one type are represented as JSON values (what comes out of `json.loads` and goes into
`json.dumps`) and what the type's zero value is. Codecs are built from a type signature, compound types (lists,
dicts, optionals, dataclasses) get codecs for their arguments recursively:

>>> codec = ValueCodec.from_type(list[int])
>>> codec.zero()
[]
>>> codec.json_to_value([1, 2, 3])
[1, 2, 3]

>>> from dataclasses import dataclass
>>> @dataclass
... class Point:
...     x: int
...     y: int
>>> codec = ValueCodec.from_type(Point)
>>> codec.zero()
Point(x=0, y=0)
>>> codec.value_to_json(Point(1, 2))
{'x': 1, 'y': 2}
>>> codec.json_to_value({'y': 5, 'z': 'ignored'})
Point(x=0, y=5)

Types that define their own `marshal_json`/`unmarshal_json` are used through those methods:

>>> from nullable.types import Int64
>>> codec = ValueCodec.from_type(dict[str, Int64])
>>> codec.json_to_value({'a': 1, 'b': None})
{'a': Int64(v=1, valid=True), 'b': Int64(v=0, valid=False)}
"""

from __future__ import annotations

import base64
import binascii
import dataclasses
from abc import ABC, abstractmethod
from datetime import datetime
from functools import lru_cache
from types import NoneType, UnionType
from typing import Any, Generic, TypeVar, Union, final, get_args, get_origin, get_type_hints

from typing_extensions import override

from nullable.encoding import Json, dumps_json, json_kind, loads_json, replace_surrogates
from nullable.encoding.int import is_int64
from nullable.encoding.time import ZERO_TIME, format_rfc3339, parse_rfc3339
from nullable.utils.typing import pretty_type

T = TypeVar('T')


def has_text_codec(type_: Any) -> bool:
    """ Whether instances of `type_` encode and decode themselves as JSON.
    """
    return (
        isinstance(type_, type)
        and callable(getattr(type_, 'marshal_json', None))
        and callable(getattr(type_, 'unmarshal_json', None))
    )


def zero_value(type_: Any) -> Any:
    """ The zero value of a type.

    Types that have no codec must be constructible without arguments.

    >>> zero_value(int), zero_value(str), zero_value(bool), zero_value(float | None)
    (0, '', False, None)
    """
    try:
        codec = ValueCodec.from_type(type_)
    except TypeError:
        return type_()
    return codec.zero()


class ValueCodec(ABC, Generic[T]):
    """ Models the JSON representation and the zero value of one type.
    """

    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: Any, /) -> ValueCodec:
        """ Build (or reuse) the codec for a type signature, raises TypeError when the type is not supported.
        """
        return _codec_for_type(type_)

    @abstractmethod
    def zero(self) -> T:
        raise NotImplementedError

    @final
    def json_to_value(self, json_value: Json, /) -> T:
        """ Convert a value that comes out from `json.loads`, raises ValueError when it is not compatible.
        """
        # XXX: subclasses must implement ValueCodec._json_to_value, not ValueCodec.json_to_value
        return self._json_to_value(json_value)

    @final
    def value_to_json(self, value: T, /) -> Json:
        """ Convert a value to an object compatible with `json.dumps`.
        """
        # XXX: subclasses must implement ValueCodec._value_to_json, not ValueCodec.value_to_json
        return self._value_to_json(value)

    @abstractmethod
    def _json_to_value(self, json_value: Json, /) -> T:
        raise NotImplementedError

    @abstractmethod
    def _value_to_json(self, value: T, /) -> Json:
        raise NotImplementedError


class BoolCodec(ValueCodec[bool]):
    @override
    def zero(self) -> bool:
        return False

    @override
    def _json_to_value(self, json_value: Json, /) -> bool:
        if not isinstance(json_value, bool):
            raise ValueError(f'expected bool, got {json_kind(json_value)}')
        return json_value

    @override
    def _value_to_json(self, value: bool, /) -> Json:
        return value


class IntCodec(ValueCodec[int]):
    @override
    def zero(self) -> int:
        return 0

    @override
    def _json_to_value(self, json_value: Json, /) -> int:
        if not isinstance(json_value, int) or isinstance(json_value, bool):
            raise ValueError(f'expected integer, got {json_kind(json_value)}')
        if not is_int64(json_value):
            raise ValueError(f'number {json_value} overflows int64')
        return json_value

    @override
    def _value_to_json(self, value: int, /) -> Json:
        return value


class FloatCodec(ValueCodec[float]):
    @override
    def zero(self) -> float:
        return 0.0

    @override
    def _json_to_value(self, json_value: Json, /) -> float:
        if not isinstance(json_value, (int, float)) or isinstance(json_value, bool):
            raise ValueError(f'expected number, got {json_kind(json_value)}')
        return float(json_value)

    @override
    def _value_to_json(self, value: float, /) -> Json:
        return value


class StrCodec(ValueCodec[str]):
    @override
    def zero(self) -> str:
        return ''

    @override
    def _json_to_value(self, json_value: Json, /) -> str:
        if not isinstance(json_value, str):
            raise ValueError(f'expected string, got {json_kind(json_value)}')
        return replace_surrogates(json_value)

    @override
    def _value_to_json(self, value: str, /) -> Json:
        return value


class BytesCodec(ValueCodec[bytes]):
    """ Bytes travel as base64 strings.
    """

    @override
    def zero(self) -> bytes:
        return b''

    @override
    def _json_to_value(self, json_value: Json, /) -> bytes:
        if not isinstance(json_value, str):
            raise ValueError(f'expected base64 string, got {json_kind(json_value)}')
        try:
            return base64.b64decode(json_value, validate=True)
        except binascii.Error as e:
            raise ValueError(f'invalid base64: {e}') from e

    @override
    def _value_to_json(self, value: bytes, /) -> Json:
        return base64.b64encode(value).decode('ascii')


class DateTimeCodec(ValueCodec[datetime]):
    """ Timestamps travel as RFC 3339 strings.
    """

    @override
    def zero(self) -> datetime:
        return ZERO_TIME

    @override
    def _json_to_value(self, json_value: Json, /) -> datetime:
        if not isinstance(json_value, str):
            raise ValueError(f'expected RFC 3339 string, got {json_kind(json_value)}')
        return parse_rfc3339(json_value)

    @override
    def _value_to_json(self, value: datetime, /) -> Json:
        return format_rfc3339(value)


class OptionalCodec(ValueCodec[Any]):
    """ Represents a type that is either `V` or `None`, the zero value is `None`.
    """

    __slots__ = ('_value',)

    def __init__(self, value: ValueCodec) -> None:
        self._value = value

    @override
    def zero(self) -> Any:
        return None

    @override
    def _json_to_value(self, json_value: Json, /) -> Any:
        if json_value is None:
            return None
        return self._value.json_to_value(json_value)

    @override
    def _value_to_json(self, value: Any, /) -> Json:
        if value is None:
            return None
        return self._value.value_to_json(value)


class SequenceCodec(ValueCodec[Any]):
    """ Represents `list[V]` and `tuple[V, ...]` as JSON arrays.
    """

    __slots__ = ('_item', '_container')

    def __init__(self, item: ValueCodec, container: type) -> None:
        self._item = item
        self._container = container

    @override
    def zero(self) -> Any:
        return self._container()

    @override
    def _json_to_value(self, json_value: Json, /) -> Any:
        if not isinstance(json_value, list):
            raise ValueError(f'expected array, got {json_kind(json_value)}')
        return self._container(self._item.json_to_value(item) for item in json_value)

    @override
    def _value_to_json(self, value: Any, /) -> Json:
        return [self._item.value_to_json(item) for item in value]


class MappingCodec(ValueCodec[dict]):
    """ Represents `dict[str, V]` as JSON objects.
    """

    __slots__ = ('_value',)

    def __init__(self, value: ValueCodec) -> None:
        self._value = value

    @override
    def zero(self) -> dict:
        return {}

    @override
    def _json_to_value(self, json_value: Json, /) -> dict:
        if not isinstance(json_value, dict):
            raise ValueError(f'expected object, got {json_kind(json_value)}')
        return {replace_surrogates(key): self._value.json_to_value(item) for key, item in json_value.items()}

    @override
    def _value_to_json(self, value: dict, /) -> Json:
        return {str(key): self._value.value_to_json(item) for key, item in value.items()}


class TextCodecAdapter(ValueCodec[Any]):
    """ Adapts a type that defines its own `marshal_json`/`unmarshal_json`, its zero value is `type_()`.
    """

    __slots__ = ('_class',)

    def __init__(self, class_: type) -> None:
        self._class = class_

    @override
    def zero(self) -> Any:
        return self._class()

    @override
    def _json_to_value(self, json_value: Json, /) -> Any:
        value = self._class()
        value.unmarshal_json(dumps_json(json_value))
        return value

    @override
    def _value_to_json(self, value: Any, /) -> Json:
        data = value.marshal_json()
        # a `None` result means "no text", it is absent
        if data is None:
            return None
        return loads_json(data)


class DataclassCodec(ValueCodec[Any]):
    """ Represents a dataclass as a JSON object keyed by field name.

    The key can be renamed with `field(metadata={'json': 'Name'})`. Unknown keys are ignored when decoding, missing
    keys get the field's default, or its type's zero value when it has no default.
    """

    __slots__ = ('_class', '_fields')

    def __init__(self, class_: type, fields_: list[tuple[dataclasses.Field, str, ValueCodec]]) -> None:
        self._class = class_
        self._fields = fields_

    @classmethod
    def from_class(cls, class_: type) -> DataclassCodec:
        type_hints = get_type_hints(class_)
        fields_ = [
            (field, field.metadata.get('json', field.name), ValueCodec.from_type(type_hints[field.name]))
            for field in dataclasses.fields(class_)
            if field.init
        ]
        return cls(class_, fields_)

    def _field_zero(self, field: dataclasses.Field, codec: ValueCodec) -> Any:
        if field.default is not dataclasses.MISSING:
            return field.default
        if field.default_factory is not dataclasses.MISSING:
            return field.default_factory()
        return codec.zero()

    @override
    def zero(self) -> Any:
        return self._class(**{field.name: self._field_zero(field, codec) for field, _, codec in self._fields})

    @override
    def _json_to_value(self, json_value: Json, /) -> Any:
        if not isinstance(json_value, dict):
            raise ValueError(f'expected object, got {json_kind(json_value)}')
        kwargs: dict[str, Any] = {}
        for field, key, codec in self._fields:
            if key in json_value:
                kwargs[field.name] = codec.json_to_value(json_value[key])
            else:
                kwargs[field.name] = self._field_zero(field, codec)
        return self._class(**kwargs)

    @override
    def _value_to_json(self, value: Any, /) -> Json:
        return {key: codec.value_to_json(getattr(value, field.name)) for field, key, codec in self._fields}


_SCALAR_CODECS: dict[type, type[ValueCodec]] = {
    bool: BoolCodec,
    int: IntCodec,
    float: FloatCodec,
    str: StrCodec,
    bytes: BytesCodec,
    datetime: DateTimeCodec,
}


@lru_cache(maxsize=None)
def _codec_for_type(type_: Any) -> ValueCodec:
    origin = get_origin(type_) or type_
    args = get_args(type_)

    if origin is Union or origin is UnionType:
        if len(args) != 2 or NoneType not in args:
            raise TypeError('type must be either `None | T` or `T | None`')
        not_none_type, = tuple(arg for arg in args if arg is not NoneType)
        return OptionalCodec(_codec_for_type(not_none_type))

    if has_text_codec(type_):
        return TextCodecAdapter(type_)

    if isinstance(type_, type) and dataclasses.is_dataclass(type_):
        return DataclassCodec.from_class(type_)

    if origin is list and len(args) == 1:
        return SequenceCodec(_codec_for_type(args[0]), list)

    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return SequenceCodec(_codec_for_type(args[0]), tuple)

    if origin is dict and len(args) == 2:
        key_type, value_type = args
        if key_type is not str:
            raise TypeError('only `str` keys can be represented in JSON')
        return MappingCodec(_codec_for_type(value_type))

    codec_class = _SCALAR_CODECS.get(type_)
    if codec_class is None:
        raise TypeError(f'{pretty_type(type_)} has no JSON representation')
    return codec_class()
