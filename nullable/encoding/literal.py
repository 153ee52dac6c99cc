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
Whole-document JSON helpers shared by the literal codecs.
"""

import json
import re
from typing import NoReturn, TypeAlias

from nullable.exception import DecodeError

# These are all the values that can be observed when parsing a JSON with the builtin json module
# See: https://docs.python.org/3/library/json.html#encoders-and-decoders
Json: TypeAlias = dict | list | str | int | float | bool | None

NULL_LITERAL = b'null'

_LONE_SURROGATE = re.compile('[\ud800-\udfff]')


def is_null_literal(data: bytes, *, case_sensitive: bool = True) -> bool:
    """ Whether `data` is exactly the 4-byte literal `null`, no surrounding whitespace allowed.
    """
    if case_sensitive:
        return data == NULL_LITERAL
    return bytes(data).lower() == NULL_LITERAL


def _reject_constant(name: str) -> NoReturn:
    # the json module accepts NaN/Infinity/-Infinity, which are not valid JSON
    raise ValueError(f'invalid character {name!r} looking for beginning of value')


def loads_json(data: bytes) -> Json:
    """ Parse a complete JSON document, raising DecodeError for empty or malformed input.
    """
    if not data:
        raise DecodeError('unexpected end of JSON input')
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except ValueError as e:
        raise DecodeError(f'invalid JSON: {e}') from e
    except RecursionError as e:
        raise DecodeError('invalid JSON: exceeded max depth') from e


def replace_surrogates(text: str) -> str:
    r""" Replace the lone surrogates a `\ud800` style escape can produce with U+FFFD.

    >>> replace_surrogates('a\ud800b')
    'a�b'
    """
    return _LONE_SURROGATE.sub('\ufffd', text)


def dumps_json(value: Json, *, ensure_ascii: bool = False) -> bytes:
    r""" Render a JSON compatible value in its most compact form, as UTF-8 bytes.

    Text holding lone surrogates is not valid UTF-8, it is rendered with escapes instead:

    >>> dumps_json('\ud800')
    b'"\\ud800"'
    """
    text = json.dumps(value, ensure_ascii=ensure_ascii, separators=(',', ':'), allow_nan=False)
    try:
        return text.encode('utf-8')
    except UnicodeEncodeError:
        return json.dumps(value, ensure_ascii=True, separators=(',', ':'), allow_nan=False).encode('ascii')


def json_kind(json_value: Json) -> str:
    """ Name the kind of a parsed JSON value, used in error messages.

    >>> json_kind(True), json_kind(1), json_kind(1.5), json_kind('a'), json_kind([]), json_kind({}), json_kind(None)
    ('bool', 'number', 'number', 'string', 'array', 'object', 'null')
    """
    match json_value:
        case None:
            return 'null'
        case bool():
            return 'bool'
        case int() | float():
            return 'number'
        case str():
            return 'string'
        case list():
            return 'array'
        case dict():
            return 'object'
        case _:
            raise TypeError(f'not a JSON value: {json_value!r}')
