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
This module implements encoding a timestamp as a quoted RFC 3339 JSON string.

The offset is mandatory when decoding, `Z` is written for a zero offset when encoding, and the fraction of a second
only has as many digits as it needs. Naive datetimes are taken to be UTC:

>>> from datetime import datetime, timezone, timedelta
>>> encode_time(datetime(2017, 11, 24, tzinfo=timezone.utc))
b'"2017-11-24T00:00:00Z"'
>>> encode_time(datetime(2017, 11, 24, 10, 30, 0, 500000, tzinfo=timezone(timedelta(hours=-3))))
b'"2017-11-24T10:30:00.5-03:00"'
>>> encode_time(ZERO_TIME)
b'"0001-01-01T00:00:00Z"'

>>> decode_time(b'"2017-11-24T00:00:00Z"')
datetime.datetime(2017, 11, 24, 0, 0, tzinfo=datetime.timezone.utc)
>>> decode_time(b'"2017-11-24T10:30:00.123456789+01:00"')
datetime.datetime(2017, 11, 24, 10, 30, 0, 123456, tzinfo=datetime.timezone(datetime.timedelta(seconds=3600)))

>>> for data in [b'"2017-11-24"', b'"2017-11-24T00:00:00"', b'"2017-13-24T00:00:00Z"', b'1511481600']:
...     try:
...         decode_time(data)
...     except DecodeError as e:
...         print(*e.args)
cannot parse '2017-11-24' as RFC 3339
cannot parse '2017-11-24T00:00:00' as RFC 3339
cannot parse '2017-13-24T00:00:00Z' as RFC 3339: month must be in 1..12
cannot decode number into time
"""

import re
from datetime import datetime, timedelta, timezone

from nullable.encoding.literal import json_kind, loads_json
from nullable.exception import DecodeError

# zero value for timestamps, the earliest representable instant in UTC
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r'([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt]([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?'
    r'(?:([Zz])|([+-])([0-9]{2}):([0-9]{2}))'
)


def parse_rfc3339(text: str) -> datetime:
    """ Parse an RFC 3339 timestamp into an aware datetime, raises ValueError when it isn't one.

    Fractional digits beyond microseconds are truncated.
    """
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f'cannot parse {text!r} as RFC 3339')
    year, month, day, hour, minute, second = (int(group) for group in match.group(1, 2, 3, 4, 5, 6))
    fraction = match.group(7) or ''
    microsecond = int(fraction[:6].ljust(6, '0'))
    tz: timezone
    if match.group(8):
        tz = timezone.utc
    else:
        offset_hours, offset_minutes = int(match.group(10)), int(match.group(11))
        if offset_hours > 23 or offset_minutes > 59:
            raise ValueError(f'cannot parse {text!r} as RFC 3339: offset out of range')
        offset = timedelta(hours=offset_hours, minutes=offset_minutes)
        tz = timezone(-offset if match.group(9) == '-' else offset)
    try:
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)
    except ValueError as e:
        raise ValueError(f'cannot parse {text!r} as RFC 3339: {e}') from e


def format_rfc3339(value: datetime) -> str:
    """ Format a datetime as RFC 3339 with a trimmed fraction of second.
    """
    offset = value.utcoffset()
    text = (
        f'{value.year:04d}-{value.month:02d}-{value.day:02d}'
        f'T{value.hour:02d}:{value.minute:02d}:{value.second:02d}'
    )
    if value.microsecond:
        text += f'.{value.microsecond:06d}'.rstrip('0')
    if not offset:
        return text + 'Z'
    # RFC 3339 offsets have no seconds
    minutes = int(offset.total_seconds()) // 60
    sign = '-' if minutes < 0 else '+'
    hours, minutes = divmod(abs(minutes), 60)
    return text + f'{sign}{hours:02d}:{minutes:02d}'


def encode_time(value: datetime) -> bytes:
    """ Encodes a datetime as a quoted RFC 3339 string.
    """
    assert isinstance(value, datetime)
    return b'"' + format_rfc3339(value).encode('ascii') + b'"'


def decode_time(data: bytes) -> datetime:
    """ Decodes a quoted RFC 3339 string with a mandatory offset.
    """
    json_value = loads_json(data)
    if not isinstance(json_value, str):
        raise DecodeError(f'cannot decode {json_kind(json_value)} into time')
    try:
        return parse_rfc3339(json_value)
    except ValueError as e:
        raise DecodeError(*e.args) from e
