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

from types import NoneType, UnionType
from typing import Any, Generic, TypeVar
from weakref import WeakValueDictionary

T = TypeVar('T')


class InnerTypeMixin(Generic[T]):
    """
    Mixin class that keeps its single type argument at runtime as `cls.__inner_type__`.

    Subscribing creates (and caches) a subclass that remembers the type argument, so `C[int] is C[int]`. Only
    subscribed classes can be instantiated, the unsubscripted class has no idea of what it holds.

    >>> class Box(InnerTypeMixin[T]):
    ...     pass

    >>> Box[int] is Box[int]
    True
    >>> Box[int].__inner_type__ is int
    True
    >>> Box[int].__name__
    'Box'

    >>> try:
    ...     Box()
    ... except TypeError as e:
    ...     print(e)
    Box[...] requires exactly one type argument, got none

    >>> try:
    ...     Box[int, str]
    ... except TypeError as e:
    ...     print(e)
    Box[...] expects exactly one type argument; got 2

    >>> U = TypeVar('U')
    >>> try:
    ...     Box[U]()
    ... except TypeError as e:
    ...     print(e)
    Box[...] requires a concrete type argument, got ~U
    """

    # maps (origin, inner_type) -> subclass, without keeping unreferenced subclasses alive
    __type_cache: WeakValueDictionary[tuple[type, Any], type] = WeakValueDictionary()

    __inner_type__: Any

    @classmethod
    def __class_getitem__(cls, params):
        # parameterizing the mixin itself delegates to Generic
        if cls is InnerTypeMixin:
            return super().__class_getitem__(params)

        args = params if isinstance(params, tuple) else (params,)
        if len(args) != 1:
            raise TypeError(f'{cls.__name__}[...] expects exactly one type argument; got {len(args)}')
        inner_type, = args

        cache = InnerTypeMixin.__type_cache
        key = (cls, inner_type)
        sub = cache.get(key)
        if sub is None:
            # subclass keeps the same name for clean repr
            sub = type(cls.__name__, (cls,), {
                '__inner_type__': inner_type,
                '__origin__': cls,
                '__args__': (inner_type,),
                '__module__': cls.__module__,
                '__qualname__': cls.__qualname__,
            })
            cache[key] = sub
        return sub

    def __new__(cls, *args, **kwargs):
        if not hasattr(cls, '__inner_type__'):
            raise TypeError(f'{cls.__name__}[...] requires exactly one type argument, got none')
        inner_type = cls.__inner_type__
        if isinstance(inner_type, TypeVar):
            raise TypeError(f'{cls.__name__}[...] requires a concrete type argument, got {inner_type!r}')
        return super().__new__(cls)


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(None)
    'None'
    >>> pretty_type(list[int])
    'list[int]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif isinstance(type_, UnionType) or (hasattr(type_, '__args__') and not isinstance(type_, type)):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))
