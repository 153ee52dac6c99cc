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
This module implements encoding a 64-bit float as a bare JSON number.

The shortest decimal that round-trips is used, in plain notation for magnitudes in `[1e-6, 1e21)` and in exponent
notation otherwise. Integral values have no fraction:

>>> encode_float(123.123)
b'123.123'
>>> encode_float(0.0)
b'0'
>>> encode_float(-0.0)
b'-0'
>>> encode_float(1e16)
b'10000000000000000'
>>> encode_float(0.00001)
b'0.00001'
>>> encode_float(1e21)
b'1e+21'
>>> encode_float(1.5e-7)
b'1.5e-7'

Non-finite values have no JSON representation:

>>> try:
...     encode_float(float('nan'))
... except ValueError as e:
...     print(*e.args)
unsupported float value: nan

Integral literals are accepted when decoding:

>>> decode_float(b'123')
123.0
>>> decode_float(b'1e-7')
1e-07
>>> try:
...     decode_float(b'1e400')
... except DecodeError as e:
...     print(*e.args)
number 1e400 overflows float64
"""

import math
import re
from decimal import Decimal

from nullable.encoding.literal import json_kind, loads_json
from nullable.exception import DecodeError

_EXPONENT_PADDING = re.compile(r'e([+-])0(\d)$')


def format_float(value: float) -> str:
    """ Format a finite float the way JavaScript would, raises ValueError for non-finite values.
    """
    if not math.isfinite(value):
        raise ValueError(f'unsupported float value: {value!r}')
    abs_value = abs(value)
    if abs_value != 0 and (abs_value < 1e-6 or abs_value >= 1e21):
        # repr pads the exponent to 2 digits: 1e-07
        return _EXPONENT_PADDING.sub(r'e\1\2', repr(value))
    # repr is the shortest round-tripping representation, Decimal only removes its exponent
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def encode_float(value: float) -> bytes:
    """ Encodes a finite float as a JSON number.
    """
    assert isinstance(value, float)
    return format_float(value).encode('ascii')


def decode_float(data: bytes) -> float:
    """ Decodes any JSON number whose value is finite as a 64-bit float.
    """
    json_value = loads_json(data)
    if not isinstance(json_value, (int, float)) or isinstance(json_value, bool):
        raise DecodeError(f'cannot decode {json_kind(json_value)} into float64')
    try:
        value = float(json_value)
    except OverflowError as e:
        raise DecodeError(f'number {json_value} overflows float64') from e
    if not math.isfinite(value):
        raise DecodeError(f'number {data.decode("utf-8").strip()} overflows float64')
    return value
