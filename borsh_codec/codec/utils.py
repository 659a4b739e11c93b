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

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from operator import or_
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, ForwardRef, NamedTuple, Optional, TypeAlias, Union, get_args, get_origin

from structlog import get_logger

from borsh_codec.serialization.exceptions import UnsupportedTypeError
from borsh_codec.utils.typing import is_subclass, unwrap_newtype

if TYPE_CHECKING:
    from borsh_codec.codec.codec import Codec


logger = get_logger()

TypeAliasMap: TypeAlias = Mapping[Any, Any]
TypeToCodecMap: TypeAlias = Mapping[Any, type['Codec']]


def is_union(origin_type: Any) -> bool:
    """ Both `A | B` and `typing.Union[A, B]` are unions, their origins differ depending on how they were built.

    >>> is_union(get_origin(int | str))
    True
    >>> is_union(get_origin(Optional[int]))
    True
    >>> is_union(get_origin(list[int]))
    False
    """
    return origin_type is UnionType or origin_type is Union


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(None)
    'None'
    >>> pretty_type(int)
    'int'
    >>> pretty_type(list[int])
    'list[int]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


def get_runtime_class(type_: Any) -> type:
    """ The class that values of the given annotation are instances of, used to tell union variants apart.

    >>> from borsh_codec.types import U8, Box
    >>> get_runtime_class(U8)
    <class 'int'>
    >>> get_runtime_class(Box[int])
    <class 'borsh_codec.types.Box'>
    >>> get_runtime_class(None)
    <class 'NoneType'>
    """
    if type_ is None:
        return NoneType
    origin = unwrap_newtype(get_origin(type_) or type_)
    if not isinstance(origin, type):
        raise UnsupportedTypeError(f'{pretty_type(type_)} cannot be a union variant')
    return origin


# XXX: _verbose argument is used to help with doctest
def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias including the type's arguments.

    For example, `bytearray` is mapped to `bytes` and `typing.Union` to `types.UnionType` in the default alias map:

    >>> from borsh_codec.codec import DEFAULT_TYPE_ALIAS_MAP as alias_map
    >>> get_aliased_type(tuple[str, list[bytearray]], alias_map, _verbose=False)
    tuple[str, list[bytes]]
    >>> get_aliased_type(Union[int, bytearray], alias_map, _verbose=False)
    int | bytes
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    origin_type = get_origin(type_) or type_
    replaced = False

    if is_union(origin_type):
        aliased_origin = UnionType
    elif _is_key(origin_type, alias_map):
        aliased_origin = alias_map[origin_type]
        replaced = True
    else:
        aliased_origin = origin_type

    if not getattr(type_, '__args__', None):
        # no type arguments, or empty ones like tuple[()] which are kept as they are
        return (aliased_origin if replaced else type_), replaced

    type_args = get_args(type_)
    # use _get_aliased_type for recursion so we don't log multiple times when a replacement happens
    aliased_args_replaced = [_get_aliased_type(arg, alias_map) for arg in type_args]
    aliased_args = tuple(arg for arg, _ in aliased_args_replaced)
    replaced |= any(arg_replaced for _, arg_replaced in aliased_args_replaced)

    if not replaced:
        return type_, False

    # XXX: special case, UnionType can't be instantiated directly, this is the simplest way to do it
    if aliased_origin is UnionType:
        return reduce(or_, aliased_args), replaced

    assert hasattr(aliased_origin, '__class_getitem__'), 'we must have an indexable class at this point'
    return aliased_origin[aliased_args], replaced


def _is_key(type_: Any, mapping: Mapping[Any, Any]) -> bool:
    try:
        return type_ in mapping
    except TypeError:
        # unhashable annotations are never keys
        return False


def get_usable_origin_type(type_: Any, /, *, type_map: Codec.TypeMap, _verbose: bool = True) -> Any:
    """ The purpose of this function is to map a given type into a key that is usable in a Codec.TypeMap

    It takes into account type-aliasing according to Codec.TypeMap.alias_map. If the given type cannot be used in the
    given type_map, an UnsupportedTypeError exception will be raised.

    The returned key is such that it is guaranteed to exist in `type_map.codecs_map`. Most keys are origin types, a
    few shapes are keyed by what they are rather than by their class:

    - `T | None` is keyed by `Optional`, any other union by `UnionType`
    - dataclasses are keyed by `dataclass`
    - named tuples are keyed by `NamedTuple`
    - enums are keyed by `Enum`

    >>> from borsh_codec.codec import make_type_map
    >>> type_map = make_type_map()
    >>> get_usable_origin_type(list[int], type_map=type_map, _verbose=False)
    <class 'list'>
    >>> get_usable_origin_type(int | None, type_map=type_map, _verbose=False) is Optional
    True
    >>> get_usable_origin_type(int | str | None, type_map=type_map, _verbose=False) is UnionType
    True
    """
    if isinstance(type_, (str, ForwardRef)):
        raise UnsupportedTypeError(f'unresolved forward reference {type_!r}')

    aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=_verbose)
    origin_aliased_type = get_origin(aliased_type) or aliased_type
    codecs_map = type_map.codecs_map

    if is_union(origin_aliased_type):
        args = get_args(aliased_type)
        if len(args) == 2 and NoneType in args:
            origin_aliased_type = Optional
        else:
            origin_aliased_type = UnionType

    if _is_key(origin_aliased_type, codecs_map):
        return origin_aliased_type

    if dataclass in codecs_map and isinstance(origin_aliased_type, type) and hasattr(
        origin_aliased_type, '__dataclass_fields__'
    ):
        return dataclass

    if NamedTuple in codecs_map and NamedTuple in getattr(origin_aliased_type, '__orig_bases__', tuple()):
        return NamedTuple

    if Enum in codecs_map and is_subclass(origin_aliased_type, Enum):
        return Enum

    raise UnsupportedTypeError(f'type {pretty_type(type_)} is not supported by any Codec class')
