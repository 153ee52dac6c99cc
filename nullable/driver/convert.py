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
Conversion rules from driver values into native types.

These are the rules any scan goes through, they are deliberately close to what relational drivers hand out: text
columns may hold numbers, integer columns may come back as floats, booleans may come back as integers.

>>> convert_to_int('123'), convert_to_int(123.0), convert_to_int(b'-7')
(123, 123, -7)
>>> convert_to_str(b'hello'), convert_to_str(12), convert_to_str(1.5), convert_to_str(True)
('hello', '12', '1.5', 'true')
>>> convert_to_bool(1), convert_to_bool('f'), convert_to_bool(b'TRUE')
(True, False, True)
>>> convert_to_float('1e3'), convert_to_float(2)
(1000.0, 2.0)

>>> try:
...     convert_to_int('12a')
... except DriverScanError as e:
...     print(*e.args)
converting driver value type str ('12a') to int64: invalid syntax

>>> try:
...     convert_to_int(True)
... except DriverScanError as e:
...     print(*e.args)
converting driver value type bool (True) to int64: invalid syntax

>>> try:
...     convert_assign(dict, 'x')
... except DriverScanError as e:
...     print(*e.args)
unsupported scan, storing driver value type str into type dict
"""

import math
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

from nullable.driver import DriverValue
from nullable.encoding.int import is_int64
from nullable.encoding.time import format_rfc3339, parse_rfc3339
from nullable.exception import DriverScanError
from nullable.utils.typing import pretty_type

_INT_LITERAL = re.compile(r'[+-]?[0-9]+')
_FLOAT_LITERAL = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)',
    re.IGNORECASE,
)
_TRUE_LITERALS = frozenset({'1', 't', 'T', 'TRUE', 'true', 'True'})
_FALSE_LITERALS = frozenset({'0', 'f', 'F', 'FALSE', 'false', 'False'})


def _conversion_error(src: DriverValue, target: str, reason: str) -> DriverScanError:
    return DriverScanError(f'converting driver value type {type(src).__name__} ({src!r}) to {target}: {reason}')


def _unsupported(src: DriverValue, target: str) -> DriverScanError:
    return DriverScanError(f'unsupported scan, storing driver value type {type(src).__name__} into type {target}')


def _bytes_to_text(src: bytes | bytearray | memoryview, target: str) -> str:
    try:
        return bytes(src).decode('utf-8')
    except UnicodeDecodeError as e:
        raise _conversion_error(src, target, 'invalid utf-8') from e


def format_float_text(value: float) -> str:
    """ Shortest round-tripping text of a finite float, in exponent form below 1e-4 or from 1e6 on.

    >>> format_float_text(1e6), format_float_text(123456.0), format_float_text(1234567.0)
    ('1e+06', '123456', '1.234567e+06')
    >>> format_float_text(0.0001), format_float_text(0.00001), format_float_text(-0.0)
    ('0.0001', '1e-05', '-0')
    """
    number = Decimal(repr(value)).normalize()
    sign, digits, _ = number.as_tuple()
    exponent = number.adjusted()
    prefix = '-' if sign else ''
    if exponent < -4 or exponent >= 6:
        mantissa = ''.join(map(str, digits))
        if len(mantissa) > 1:
            mantissa = f'{mantissa[0]}.{mantissa[1:]}'
        return f'{prefix}{mantissa}e{"-" if exponent < 0 else "+"}{abs(exponent):02d}'
    return prefix + format(number.copy_abs(), 'f')


def convert_to_str(src: DriverValue) -> str:
    """ Anything that has a text form converts to text.
    """
    match src:
        case str():
            return src
        case bytes() | bytearray() | memoryview():
            return _bytes_to_text(src, 'string')
        case bool():
            return 'true' if src else 'false'
        case int():
            return str(src)
        case float():
            if math.isnan(src):
                return 'NaN'
            if math.isinf(src):
                return '+Inf' if src > 0 else '-Inf'
            return format_float_text(src)
        case datetime():
            return format_rfc3339(src)
        case _:
            raise _unsupported(src, 'string')


def convert_to_bytes(src: DriverValue) -> bytes:
    if isinstance(src, (bytes, bytearray, memoryview)):
        return bytes(src)
    text = convert_to_str(src)
    try:
        # text produced from undecodable bytes carries them as surrogate escapes
        return text.encode('utf-8', errors='surrogateescape')
    except UnicodeEncodeError as e:
        raise _conversion_error(src, 'bytes', 'invalid utf-8') from e


def convert_to_int(src: DriverValue) -> int:
    """ Integers, integral floats and decimal integer text, all within the signed 64-bit range.
    """
    value: int
    match src:
        case bool():
            raise _conversion_error(src, 'int64', 'invalid syntax')
        case int():
            value = src
        case float():
            if not src.is_integer():
                raise _conversion_error(src, 'int64', 'invalid syntax')
            value = int(src)
        case str() | bytes() | bytearray() | memoryview():
            text = src if isinstance(src, str) else _bytes_to_text(src, 'int64')
            if not _INT_LITERAL.fullmatch(text):
                raise _conversion_error(src, 'int64', 'invalid syntax')
            value = int(text)
        case _:
            raise _unsupported(src, 'int64')
    if not is_int64(value):
        raise _conversion_error(src, 'int64', 'value out of range')
    return value


def convert_to_float(src: DriverValue) -> float:
    """ Floats, integers and decimal float text.
    """
    match src:
        case bool():
            raise _conversion_error(src, 'float64', 'invalid syntax')
        case float():
            return src
        case int():
            try:
                return float(src)
            except OverflowError as e:
                raise _conversion_error(src, 'float64', 'value out of range') from e
        case str() | bytes() | bytearray() | memoryview():
            text = src if isinstance(src, str) else _bytes_to_text(src, 'float64')
            if not _FLOAT_LITERAL.fullmatch(text):
                raise _conversion_error(src, 'float64', 'invalid syntax')
            value = float(text)
            if math.isinf(value) and 'inf' not in text.lower():
                raise _conversion_error(src, 'float64', 'value out of range')
            return value
        case _:
            raise _unsupported(src, 'float64')


def convert_to_bool(src: DriverValue) -> bool:
    """ Booleans, the integers 0 and 1, and the usual boolean spellings.
    """
    match src:
        case bool():
            return src
        case int():
            if src == 1:
                return True
            if src == 0:
                return False
            raise _conversion_error(src, 'bool', 'value out of range')
        case str() | bytes() | bytearray() | memoryview():
            text = src if isinstance(src, str) else _bytes_to_text(src, 'bool')
            if text in _TRUE_LITERALS:
                return True
            if text in _FALSE_LITERALS:
                return False
            raise _conversion_error(src, 'bool', 'invalid syntax')
        case _:
            raise _unsupported(src, 'bool')


def convert_to_datetime(src: DriverValue) -> datetime:
    """ Datetimes, and RFC 3339 text for drivers that have no native timestamp type.
    """
    match src:
        case datetime():
            return src
        case str() | bytes() | bytearray() | memoryview():
            text = src if isinstance(src, str) else _bytes_to_text(src, 'time')
            try:
                return parse_rfc3339(text)
            except ValueError as e:
                raise _conversion_error(src, 'time', 'invalid syntax') from e
        case _:
            raise _unsupported(src, 'time')


_CONVERTERS: dict[type, Callable[[DriverValue], Any]] = {
    str: convert_to_str,
    bytes: convert_to_bytes,
    int: convert_to_int,
    float: convert_to_float,
    bool: convert_to_bool,
    datetime: convert_to_datetime,
}


def convert_assign(type_: Any, src: DriverValue) -> Any:
    """ Convert a non-null driver value into an instance of `type_`.

    Native types go through the rules above, any other type only accepts a source that is already an instance.
    """
    converter = _CONVERTERS.get(type_)
    if converter is not None:
        return converter(src)
    if isinstance(type_, type) and isinstance(src, type_):
        return src
    raise _unsupported(src, pretty_type(type_))
