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

import math
from dataclasses import dataclass
from typing import Optional

from structlog import get_logger
from typing_extensions import override

from nullable.driver import DriverValue
from nullable.driver.convert import convert_to_float
from nullable.encoding import NULL_LITERAL
from nullable.encoding.float import decode_float, encode_float
from nullable.types.scalar import NullableScalar

logger = get_logger()


@dataclass(slots=True)
class Float64(NullableScalar[float]):
    """ A 64-bit float that may be absent.

    NaN and infinities cannot be written as JSON, they are rendered as `null`.
    """

    v: float = 0.0
    valid: bool = False

    @override
    @classmethod
    def _zero(cls) -> float:
        return 0.0

    @override
    def _decode(self, data: bytes, /) -> float:
        return decode_float(data)

    @override
    def _encode(self, value: float, /) -> bytes:
        if not math.isfinite(value):
            logger.warning('non-finite float rendered as null', value=repr(value))
            return NULL_LITERAL
        return encode_float(float(value))

    @override
    def _convert(self, src: DriverValue, /) -> float:
        return convert_to_float(src)


def make_float64(value: Optional[float]) -> Float64:
    if value is None:
        return Float64()
    return Float64(float(value), valid=True)
