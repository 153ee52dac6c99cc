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

from nullable.types.bool import Bool, make_bool
from nullable.types.float64 import Float64, make_float64
from nullable.types.int64 import Int64, make_int64
from nullable.types.raw_json import RawJSON, make_raw_json
from nullable.types.scalar import NullableScalar
from nullable.types.string import String, make_string
from nullable.types.time import Time, make_time

# all the concrete nullable types
NULLABLE_SCALAR_TYPES: tuple[type[NullableScalar], ...] = (String, Bool, Int64, Float64, Time, RawJSON)

__all__ = [
    'NULLABLE_SCALAR_TYPES',
    'Bool',
    'Float64',
    'Int64',
    'NullableScalar',
    'RawJSON',
    'String',
    'Time',
    'make_bool',
    'make_float64',
    'make_int64',
    'make_raw_json',
    'make_string',
    'make_time',
]
