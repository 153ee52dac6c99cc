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

from nullable.conf.get_settings import get_global_settings
from nullable.driver import DriverValue
from nullable.driver.convert import convert_to_str
from nullable.encoding.utf8 import decode_utf8, encode_utf8
from nullable.types.scalar import NullableScalar


@dataclass(slots=True)
class String(NullableScalar[str]):
    """ A text value that may be absent.

    Scanning accepts anything that has a text form (numbers, booleans, timestamps, bytes), which is looser than what
    the other types accept.
    """

    v: str = ''
    valid: bool = False

    @override
    @classmethod
    def _zero(cls) -> str:
        return ''

    @override
    def _decode(self, data: bytes, /) -> str:
        return decode_utf8(data)

    @override
    def _encode(self, value: str, /) -> bytes:
        return encode_utf8(value, ensure_ascii=get_global_settings().TEXT_ENSURE_ASCII)

    @override
    def _convert(self, src: DriverValue, /) -> str:
        return convert_to_str(src)


def make_string(value: Optional[str]) -> String:
    """ Build a valid String holding `value`, or an absent one when `value` is None.
    """
    if value is None:
        return String()
    return String(value, valid=True)
