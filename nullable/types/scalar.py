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

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from structlog import get_logger
from typing_extensions import Self

from nullable.driver import DriverValue
from nullable.encoding import NULL_LITERAL, is_null_literal
from nullable.exception import DriverScanError

logger = get_logger()

T = TypeVar('T')


class NullableScalar(ABC, Generic[T]):
    """ Base class for the concrete nullable types, a scalar payload `v` paired with a validity flag `valid`.

    The payload always holds a well-defined value of its type, when `valid` is false it is the type's zero value and
    absence is signaled exclusively through the flag. The four conversions are implemented here once, subclasses only
    provide the per-kind hooks: how a literal is decoded and encoded, and how a driver value is converted.

    Subclasses are expected to be dataclasses declaring `v` (with the zero value as default) and `valid` (defaulting
    to `False`), so they compare by value and `Subclass()` is the absent instance.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    v: T
    valid: bool

    @classmethod
    def from_json(cls, data: bytes, /) -> Self:
        """ Shortcut to build an instance from a JSON literal.
        """
        instance = cls()
        instance.unmarshal_json(data)
        return instance

    @final
    def unmarshal_json(self, data: bytes, /) -> None:
        """ Populate from a JSON literal, the exact literal `null` makes it absent.

        Raises DecodeError when `data` is empty or not a legal literal of this type, the instance is left unchanged in
        that case.
        """
        # XXX: only the exact 4 bytes, a quoted "null" is a string and `NULL` is not JSON
        if is_null_literal(data):
            self._reset()
            return
        value = self._decode(data)
        self.v = value
        self.valid = True

    @final
    def marshal_json(self) -> bytes:
        """ Render as a JSON literal, an absent value is always `null` no matter what the payload holds.
        """
        if not self.valid:
            return NULL_LITERAL
        return self._encode(self.v)

    @final
    def scan(self, src: DriverValue, /) -> None:
        """ Populate from a driver value, `None` makes it absent.

        Raises DriverScanError when the value cannot be converted.
        """
        if src is None:
            self._reset()
            return
        try:
            value = self._convert(src)
        except DriverScanError as e:
            logger.debug('scan failed', type=type(self).__name__, error=str(e))
            raise
        self.v = value
        self.valid = True

    @final
    def value(self) -> DriverValue:
        """ Produce a driver value, `None` when absent.
        """
        if not self.valid:
            return None
        return self._to_driver(self.v)

    def _reset(self) -> None:
        self.v = self._zero()
        self.valid = False

    @classmethod
    @abstractmethod
    def _zero(cls) -> T:
        """ The zero value of the payload."""
        raise NotImplementedError

    @abstractmethod
    def _decode(self, data: bytes, /) -> T:
        """ Inner implementation of `unmarshal_json`, never receives the literal `null`."""
        raise NotImplementedError

    @abstractmethod
    def _encode(self, value: T, /) -> bytes:
        """ Inner implementation of `marshal_json`, only called for valid values."""
        raise NotImplementedError

    @abstractmethod
    def _convert(self, src: DriverValue, /) -> T:
        """ Inner implementation of `scan`, never receives `None`."""
        raise NotImplementedError

    def _to_driver(self, value: T, /) -> DriverValue:
        """ Inner implementation of `value`, only called for valid values."""
        return value  # type: ignore[return-value]
