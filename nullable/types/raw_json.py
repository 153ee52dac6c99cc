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
from nullable.driver.convert import convert_to_bytes
from nullable.encoding.raw_json import decode_raw_json, encode_raw_json
from nullable.types.scalar import NullableScalar


@dataclass(slots=True)
class RawJSON(NullableScalar[bytes]):
    """ A pre-encoded JSON document that may be absent.

    The bytes are kept exactly as they were given. They are only checked when decoded from JSON, whatever a driver
    hands out is stored as is. Empty bytes count as absent when encoding JSON even if `valid` is set, drivers still
    get the (empty) text. Bytes that are not UTF-8 reach drivers as surrogate escapes and scan back unchanged.
    """

    v: bytes = b''
    valid: bool = False

    @override
    @classmethod
    def _zero(cls) -> bytes:
        return b''

    @override
    def _decode(self, data: bytes, /) -> bytes:
        return decode_raw_json(data)

    @override
    def _encode(self, value: bytes, /) -> bytes:
        return encode_raw_json(value)

    @override
    def _convert(self, src: DriverValue, /) -> bytes:
        return convert_to_bytes(src)

    @override
    def _to_driver(self, value: bytes, /) -> DriverValue:
        return value.decode('utf-8', errors='surrogateescape')


def make_raw_json(value: Optional[bytes]) -> RawJSON:
    if value is None:
        return RawJSON()
    return RawJSON(bytes(value), valid=True)
