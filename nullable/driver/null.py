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

from typing import Any, TypeVar

from nullable.driver import DriverValue, is_scanner_type
from nullable.driver.convert import convert_assign
from nullable.generic.codecs import zero_value
from nullable.utils.typing import InnerTypeMixin, pretty_type

T = TypeVar('T')


class SqlNull(InnerTypeMixin[T]):
    """ Driver-native nullable box, the payload is converted with the driver conversion rules.

    >>> box = SqlNull[int]()
    >>> box.scan('42')
    >>> box.v, box.valid, box.value()
    (42, True, 42)
    >>> box.scan(None)
    >>> box.v, box.valid, box.value()
    (0, False, None)
    """

    __slots__ = ('v', 'valid')

    v: T
    valid: bool

    def __init__(self, v: Any = None, valid: bool = False) -> None:
        self.v = zero_value(self.__inner_type__) if v is None else v
        self.valid = valid

    def scan(self, src: DriverValue, /) -> None:
        """ Populate from a driver value, `None` makes it absent with the zero value.

        Raises DriverScanError when the value cannot be converted, the box is left unchanged in that case.
        """
        if src is None:
            self.v = zero_value(self.__inner_type__)
            self.valid = False
            return
        inner_type = self.__inner_type__
        value: Any
        if is_scanner_type(inner_type):
            value = zero_value(inner_type)
            value.scan(src)
        else:
            value = convert_assign(inner_type, src)
        self.v = value
        self.valid = True

    def value(self) -> DriverValue:
        """ The payload as is, `None` when absent.
        """
        if not self.valid:
            return None
        return self.v  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f'SqlNull[{pretty_type(self.__inner_type__)}](v={self.v!r}, valid={self.valid!r})'
