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
from typing import Optional

from typing_extensions import override

from nullable.driver import DriverValue
from nullable.driver.convert import convert_to_int
from nullable.encoding.int import decode_int, encode_int
from nullable.types.scalar import NullableScalar


@dataclass(slots=True)
class Int64(NullableScalar[int]):
    """ A signed 64-bit integer that may be absent.
    """

    v: int = 0
    valid: bool = False

    @override
    @classmethod
    def _zero(cls) -> int:
        return 0

    @override
    def _decode(self, data: bytes, /) -> int:
        return decode_int(data)

    @override
    def _encode(self, value: int, /) -> bytes:
        return encode_int(value)

    @override
    def _convert(self, src: DriverValue, /) -> int:
        return convert_to_int(src)


def make_int64(value: Optional[int]) -> Int64:
    if value is None:
        return Int64()
    return Int64(value, valid=True)
