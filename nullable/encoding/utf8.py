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

r"""
This module implements encoding a string as a quoted and escaped JSON string.

>>> encode_utf8('hello')
b'"hello"'
>>> encode_utf8('say "hi"\n')
b'"say \\"hi\\"\\n"'
>>> encode_utf8('ü')
b'"\xc3\xbc"'
>>> encode_utf8('ü', ensure_ascii=True)
b'"\\u00fc"'

A string whose content is the word null is just a string:

>>> decode_utf8(b'"null"')
'null'
>>> try:
...     decode_utf8(b'{"key":"value"}')
... except DecodeError as e:
...     print(*e.args)
cannot decode object into string
"""

from nullable.encoding.literal import dumps_json, json_kind, loads_json, replace_surrogates
from nullable.exception import DecodeError


def encode_utf8(value: str, *, ensure_ascii: bool = False) -> bytes:
    """ Encodes a string as a JSON string literal.
    """
    assert isinstance(value, str)
    return dumps_json(value, ensure_ascii=ensure_ascii)


def decode_utf8(data: bytes) -> str:
    r""" Decodes a JSON string literal, lone surrogate escapes become U+FFFD.

    >>> decode_utf8(b'"\\ud800x"')
    '�x'
    """
    json_value = loads_json(data)
    if not isinstance(json_value, str):
        raise DecodeError(f'cannot decode {json_kind(json_value)} into string')
    return replace_surrogates(json_value)
