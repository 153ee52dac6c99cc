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
This module implements encoding a boolean value as a bare JSON literal.

>>> encode_bool(True)
b'true'
>>> encode_bool(False)
b'false'
>>> decode_bool(b'false')
False
>>> decode_bool(b' true ')
True

>>> try:
...     decode_bool(b'1')
... except DecodeError as e:
...     print(*e.args)
cannot decode number into bool
"""

from nullable.encoding.literal import json_kind, loads_json
from nullable.exception import DecodeError


def encode_bool(value: bool) -> bytes:
    """ Encodes a boolean value as `true` or `false`.
    """
    assert isinstance(value, bool)
    return b'true' if value else b'false'


def decode_bool(data: bytes) -> bool:
    """ Decodes a `true` or `false` literal.
    """
    json_value = loads_json(data)
    if not isinstance(json_value, bool):
        raise DecodeError(f'cannot decode {json_kind(json_value)} into bool')
    return json_value
