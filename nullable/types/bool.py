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
from nullable.driver.convert import convert_to_bool
from nullable.encoding.bool import decode_bool, encode_bool
from nullable.types.scalar import NullableScalar


@dataclass(slots=True)
class Bool(NullableScalar[bool]):
    """ A boolean that may be absent.
    """

    v: bool = False
    valid: bool = False

    @override
    @classmethod
    def _zero(cls) -> bool:
        return False

    @override
    def _decode(self, data: bytes, /) -> bool:
        return decode_bool(data)

    @override
    def _encode(self, value: bool, /) -> bytes:
        return encode_bool(value)

    @override
    def _convert(self, src: DriverValue, /) -> bool:
        return convert_to_bool(src)


def make_bool(value: Optional[bool]) -> Bool:
    if value is None:
        return Bool()
    return Bool(value, valid=True)
