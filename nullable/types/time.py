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

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from typing_extensions import override

from nullable.driver import DriverValue
from nullable.driver.convert import convert_to_datetime
from nullable.encoding.time import ZERO_TIME, decode_time, encode_time
from nullable.types.scalar import NullableScalar


@dataclass(slots=True)
class Time(NullableScalar[datetime]):
    """ A timestamp that may be absent.

    Timestamps travel as RFC 3339 strings in JSON, decoded values are always timezone aware.
    """

    v: datetime = ZERO_TIME
    valid: bool = False

    @override
    @classmethod
    def _zero(cls) -> datetime:
        return ZERO_TIME

    @override
    def _decode(self, data: bytes, /) -> datetime:
        return decode_time(data)

    @override
    def _encode(self, value: datetime, /) -> bytes:
        return encode_time(value)

    @override
    def _convert(self, src: DriverValue, /) -> datetime:
        return convert_to_datetime(src)


def make_time(value: Optional[datetime]) -> Time:
    """ Build a valid Time holding `value`, or an absent one when `value` is None.
    """
    if value is None:
        return Time()
    return Time(value, valid=True)
