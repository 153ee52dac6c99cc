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
The driver boundary: the narrow capability pair used by relational access layers.

A Scanner populates itself from a driver value, a Valuer produces one. Driver values are restricted to the types
in `DriverValue`, with `None` standing for a NULL column.
"""

from datetime import datetime
from typing import Any, Protocol, TypeAlias, runtime_checkable

DriverValue: TypeAlias = None | str | bytes | int | float | bool | datetime


@runtime_checkable
class Scanner(Protocol):
    def scan(self, src: DriverValue, /) -> None:
        """Populate self from a driver value, raises DriverScanError when it cannot be converted."""
        ...


@runtime_checkable
class Valuer(Protocol):
    def value(self) -> DriverValue:
        """Produce a driver value, never fails."""
        ...


def is_valuer(obj: Any) -> bool:
    """ Whether `obj` knows how to represent itself to a driver.

    XXX: runtime protocols only check that the attribute exists, enum members have a `value` attribute too
    """
    return isinstance(obj, Valuer) and callable(getattr(obj, 'value', None))


def is_scanner_type(type_: Any) -> bool:
    """ Whether instances of `type_` know how to populate themselves from a driver value.
    """
    return isinstance(type_, type) and callable(getattr(type_, 'scan', None))


__all__ = [
    'DriverValue',
    'Scanner',
    'Valuer',
    'is_scanner_type',
    'is_valuer',
]
