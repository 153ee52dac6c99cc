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

# XXX: the generic box must be imported before anything else, `nullable.driver.null` depends on its value codecs
from nullable.generic import Null
from nullable.document import dumps_document, loads_document
from nullable.exception import DecodeError, DriverScanError, NullableError
from nullable.types import (
    Bool,
    Float64,
    Int64,
    RawJSON,
    String,
    Time,
    make_bool,
    make_float64,
    make_int64,
    make_raw_json,
    make_string,
    make_time,
)
from nullable.version import __version__

__all__ = [
    '__version__',
    'Bool',
    'DecodeError',
    'DriverScanError',
    'Float64',
    'Int64',
    'Null',
    'NullableError',
    'RawJSON',
    'String',
    'Time',
    'dumps_document',
    'loads_document',
    'make_bool',
    'make_float64',
    'make_int64',
    'make_raw_json',
    'make_string',
    'make_time',
]
