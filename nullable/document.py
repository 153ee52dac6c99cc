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
Structural encoding of dataclasses whose fields render themselves as JSON.

Nullable values only know how to render a single literal, this module embeds them as members of a JSON object:

>>> from dataclasses import dataclass, field
>>> from nullable.generic import Null
>>> from nullable.types import Int64, String
>>> @dataclass
... class Row:
...     id: Int64
...     name: String = field(default_factory=String, metadata={'json': 'Name'})
...     tags: Null[list[str]] = field(default_factory=Null[list[str]])

>>> dumps_document(Row(Int64(1, valid=True)))
b'{"id":1,"Name":null,"tags":null}'
>>> dumps_document(Row(Int64(1, valid=True)), omit_absent=True)
b'{"id":1,"Name":null}'
>>> loads_document(Row, b'{"id": 7, "Name": "x"}')
Row(id=Int64(v=7, valid=True), name=String(v='x', valid=True), tags=Null[list[str]](v=[], valid=False))
"""

import dataclasses
import json
from typing import Any, Optional, TypeVar, get_type_hints

from structlog import get_logger

from nullable.conf.get_settings import get_global_settings
from nullable.encoding import Json, dumps_json, json_kind, loads_json
from nullable.exception import DecodeError
from nullable.generic.codecs import ValueCodec, has_text_codec, zero_value

logger = get_logger()

T = TypeVar('T')

_WHITESPACE = ' \t\n\r'


def _member_name(field: dataclasses.Field) -> str:
    return field.metadata.get('json', field.name)


def _check_dataclass_type(cls: Any) -> None:
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f'expected a dataclass, got {cls!r}')


def dumps_document(obj: Any, *, omit_absent: Optional[bool] = None) -> bytes:
    """ Render a dataclass instance as a compact JSON object.

    Fields that have a `marshal_json` render themselves, a `None` result is rendered as `null` or, when `omit_absent`
    is set, the member is left out. The concrete nullable types render their own `null`, they are never left out.
    When `omit_absent` is not given the `DOCUMENT_OMIT_ABSENT` setting is used.
    """
    _check_dataclass_type(type(obj))
    if omit_absent is None:
        omit_absent = get_global_settings().DOCUMENT_OMIT_ABSENT
    members: list[bytes] = []
    for field in dataclasses.fields(obj):
        data = _dumps_member(getattr(obj, field.name), omit_absent=omit_absent)
        if data is None:
            continue
        members.append(dumps_json(_member_name(field)) + b':' + data)
    return b'{' + b','.join(members) + b'}'


def _dumps_member(value: Any, *, omit_absent: bool) -> Optional[bytes]:
    marshal_json = getattr(value, 'marshal_json', None)
    if callable(marshal_json):
        data = marshal_json()
        if data is None:
            return None if omit_absent else b'null'
        return data
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dumps_document(value, omit_absent=omit_absent)
    if value is None:
        return None if omit_absent else b'null'
    try:
        codec = ValueCodec.from_type(type(value))
    except TypeError:
        return dumps_json(value)
    return dumps_json(codec.value_to_json(value))


def loads_document(cls: type[T], data: bytes) -> T:
    """ Parse a JSON object into an instance of the dataclass `cls`.

    Each member's raw text is handed to the field type's `unmarshal_json` when it has one, nested dataclasses are
    parsed recursively and other fields are decoded from the parsed JSON value. Members that are not present keep the
    field's default (or its type's zero value), unknown members are ignored.

    Raises DecodeError when the text is not a JSON object or a member cannot be decoded.
    """
    _check_dataclass_type(cls)
    parsed = loads_json(data)
    if not isinstance(parsed, dict):
        raise DecodeError(f'cannot decode {json_kind(parsed)} into {cls.__name__}')
    data = bytes(data)
    # same detection json.loads applies, so UTF-16 and UTF-32 bodies are read as well
    spans = _member_spans(data.decode(json.detect_encoding(data), 'surrogatepass'))

    type_hints = get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for field in dataclasses.fields(cls):
        if not field.init:
            continue
        name = _member_name(field)
        field_type = type_hints[field.name]
        if name not in spans:
            kwargs[field.name] = _field_default(field, field_type)
            continue
        try:
            kwargs[field.name] = _loads_member(field_type, spans[name])
        except (ValueError, TypeError) as e:
            logger.debug('member decode failed', cls=cls.__name__, member=name, error=str(e))
            raise DecodeError(f'{cls.__name__}.{name}: {e}') from e
    return cls(**kwargs)


def _field_default(field: dataclasses.Field, field_type: Any) -> Any:
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory()
    return zero_value(field_type)


def _loads_member(field_type: Any, data: bytes) -> Any:
    if has_text_codec(field_type):
        value = zero_value(field_type)
        value.unmarshal_json(data)
        return value
    if isinstance(field_type, type) and dataclasses.is_dataclass(field_type):
        return loads_document(field_type, data)
    json_value: Json = loads_json(data)
    try:
        codec = ValueCodec.from_type(field_type)
    except TypeError:
        return json_value
    return codec.json_to_value(json_value)


def _skip_whitespace(text: str, idx: int) -> int:
    while idx < len(text) and text[idx] in _WHITESPACE:
        idx += 1
    return idx


def _char_at(text: str, idx: int, expected: str) -> str:
    char = text[idx] if idx < len(text) else ''
    if not char or char not in expected:
        raise DecodeError(f'invalid character {char!r} at offset {idx} looking for one of {expected!r}')
    return char


def _raw_decode(decoder: json.JSONDecoder, text: str, idx: int) -> tuple[Any, int]:
    try:
        return decoder.raw_decode(text, idx)
    except ValueError as e:
        raise DecodeError(f'invalid JSON: {e}') from e


def _member_spans(text: str) -> dict[str, bytes]:
    """ Map each member name of a JSON object to its raw value text, the last duplicate wins.

    >>> _member_spans('{"a": [1, 2], "b" : "x"}')
    {'a': b'[1, 2]', 'b': b'"x"'}
    >>> try:
    ...     _member_spans('[1]')
    ... except DecodeError as e:
    ...     print(*e.args)
    invalid character '[' at offset 0 looking for one of '{'
    """
    decoder = json.JSONDecoder()
    spans: dict[str, bytes] = {}
    idx = _skip_whitespace(text, 0)
    _char_at(text, idx, '{')
    idx = _skip_whitespace(text, idx + 1)
    if _char_at(text, idx, '"}') == '}':
        return spans
    while True:
        _char_at(text, idx, '"')
        key, idx = _raw_decode(decoder, text, idx)
        idx = _skip_whitespace(text, idx)
        _char_at(text, idx, ':')
        start = _skip_whitespace(text, idx + 1)
        _, end = _raw_decode(decoder, text, start)
        spans[key] = text[start:end].encode('utf-8', 'surrogatepass')
        idx = _skip_whitespace(text, end)
        if _char_at(text, idx, ',}') == '}':
            return spans
        idx = _skip_whitespace(text, idx + 1)
