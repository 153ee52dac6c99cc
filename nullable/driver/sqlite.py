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

"""
Binding of nullable values as sqlite3 query parameters.

sqlite3 only binds a handful of native types, other objects must be registered with an adapter. Once registered,
nullable values can be passed directly as parameters and absent values are stored as NULL:

>>> import sqlite3
>>> from nullable.types import Int64, String
>>> register_sqlite_adapters()
>>> conn = sqlite3.connect(':memory:')
>>> conn.execute('SELECT ?, ?', (Int64(5, valid=True), String('x'))).fetchone()
(5, None)
"""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any

from nullable.driver import DriverValue
from nullable.encoding.time import format_rfc3339


def adapt_driver_value(value: DriverValue) -> Any:
    """ Turn a driver value into something sqlite3 binds natively.

    >>> from datetime import timezone
    >>> adapt_driver_value(datetime(2017, 11, 24, tzinfo=timezone.utc))
    '2017-11-24T00:00:00Z'
    >>> adapt_driver_value(None) is None
    True
    """
    if isinstance(value, datetime):
        return format_rfc3339(value)
    return value


def register_sqlite_adapters(*types: type) -> None:
    """ Register sqlite3 adapters for Valuer types, all the concrete nullable types when none are given.
    """
    if not types:
        from nullable.types import NULLABLE_SCALAR_TYPES
        types = NULLABLE_SCALAR_TYPES
    for type_ in types:
        sqlite3.register_adapter(type_, _adapt_valuer)


def _adapt_valuer(obj: Any) -> Any:
    return adapt_driver_value(obj.value())
