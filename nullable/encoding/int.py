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
This module implements encoding a signed 64-bit integer as a bare decimal JSON number.

Only integral literals are accepted when decoding, a fraction or an exponent makes it a float even if the value
happens to be integral:

>>> encode_int(-123)
b'-123'
>>> decode_int(b'123')
123

>>> for data in [b'123.0', b'1e3', b'true', b'"123"', b'9223372036854775808']:
...     try:
...         decode_int(data)
...     except DecodeError as e:
...         print(*e.args)
cannot decode number 123.0 into int64
cannot decode number 1000.0 into int64
cannot decode bool into int64
cannot decode string into int64
number 9223372036854775808 overflows int64
"""

from nullable.encoding.literal import json_kind, loads_json
from nullable.exception import DecodeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def encode_int(value: int) -> bytes:
    """ Encodes an integer in decimal.
    """
    assert isinstance(value, int) and not isinstance(value, bool)
    return str(value).encode('ascii')


def decode_int(data: bytes) -> int:
    """ Decodes an integral JSON number that fits in a signed 64-bit integer.
    """
    json_value = loads_json(data)
    if isinstance(json_value, float):
        raise DecodeError(f'cannot decode number {json_value!r} into int64')
    if not isinstance(json_value, int) or isinstance(json_value, bool):
        raise DecodeError(f'cannot decode {json_kind(json_value)} into int64')
    if not is_int64(json_value):
        raise DecodeError(f'number {json_value} overflows int64')
    return json_value
