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
`Null[T]` boxes any type, including compound ones, and gives it the nullable JSON and driver behavior.

>>> box = Null[int]()
>>> box.unmarshal_json(b'123')
>>> box
Null[int](v=123, valid=True)
>>> box.marshal_json()
b'123'

>>> box.unmarshal_json(b'NULL')
>>> box.valid, box.marshal_json()
(False, None)

>>> box = Null[list[str]].from_optional(['a', 'b'])
>>> box.marshal_json()
b'["a","b"]'
>>> box.value()
['a', 'b']
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from structlog import get_logger
from typing_extensions import Self

from nullable.conf.get_settings import get_global_settings
from nullable.driver import DriverValue, is_valuer
from nullable.driver.null import SqlNull
from nullable.encoding import dumps_json, is_null_literal, loads_json
from nullable.exception import DecodeError
from nullable.generic.codecs import ValueCodec, has_text_codec, zero_value
from nullable.utils.typing import InnerTypeMixin, pretty_type

logger = get_logger()

T = TypeVar('T')


class Null(InnerTypeMixin[T]):
    """ A value of any type `T` paired with a validity flag.

    JSON text is delegated to `T`: to its own `marshal_json`/`unmarshal_json` when it has them, otherwise to the
    value codec for its type signature. Driver values are delegated to `SqlNull[T]`.
    """

    __slots__ = ('v', 'valid')

    v: T
    valid: bool

    def __init__(self, v: Any = None, valid: bool = False) -> None:
        self.v = zero_value(self.__inner_type__) if v is None else v
        self.valid = valid

    @classmethod
    def from_optional(cls, value: Optional[T]) -> Self:
        if value is None:
            return cls()
        return cls(value, valid=True)

    def unmarshal_json(self, data: bytes, /) -> None:
        """ Populate from JSON text, `null` in any casing makes it absent and leaves `v` alone.

        Raises DecodeError when `T` cannot decode the text, `valid` is false afterwards.
        """
        settings = get_global_settings()
        if is_null_literal(data, case_sensitive=not settings.NULL_BOX_CASE_INSENSITIVE):
            self.valid = False
            return
        try:
            self.v = self._decode(data)
        except (ValueError, TypeError, RecursionError) as e:
            self.valid = False
            logger.debug('delegate decode failed', type=pretty_type(self.__inner_type__), error=str(e))
            if isinstance(e, DecodeError):
                raise
            raise DecodeError(f'cannot decode into {pretty_type(self.__inner_type__)}: {e}') from e
        self.valid = True

    def marshal_json(self) -> bytes | None:
        """ Render as JSON text, `None` ("no text") when absent so the enclosing encoder decides how to render it.
        """
        if not self.valid:
            return None
        inner_type = self.__inner_type__
        if has_text_codec(inner_type):
            return self.v.marshal_json()  # type: ignore[attr-defined]
        codec = ValueCodec.from_type(inner_type)
        settings = get_global_settings()
        return dumps_json(codec.value_to_json(self.v), ensure_ascii=settings.TEXT_ENSURE_ASCII)

    def scan(self, src: DriverValue, /) -> None:
        """ Populate from a driver value through `SqlNull[T]`.

        Raises DriverScanError when the value cannot be converted, the box is left unchanged in that case.
        """
        delegate = SqlNull[self.__inner_type__]()  # type: ignore[name-defined]
        delegate.scan(src)
        self.v = delegate.v
        self.valid = delegate.valid

    def value(self) -> DriverValue:
        """ Produce a driver value.

        XXX: a payload that produces its own driver values is asked for one even when absent, so a box of a Valuer
             type never yields `None` unless the payload does
        """
        if is_valuer(self.v):
            return self.v.value()  # type: ignore[attr-defined]
        return SqlNull[self.__inner_type__](self.v, self.valid).value()  # type: ignore[name-defined]

    def _decode(self, data: bytes) -> T:
        inner_type = self.__inner_type__
        if has_text_codec(inner_type):
            value = zero_value(inner_type)
            value.unmarshal_json(data)
            return value
        codec = ValueCodec.from_type(inner_type)
        return codec.json_to_value(loads_json(data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Null):
            return NotImplemented
        return (
            type(self).__inner_type__ == type(other).__inner_type__
            and self.valid == other.valid
            and self.v == other.v
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Null[{pretty_type(self.__inner_type__)}](v={self.v!r}, valid={self.valid!r})'
