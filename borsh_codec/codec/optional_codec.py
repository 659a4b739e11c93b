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

from types import NoneType
from typing import TYPE_CHECKING, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.codec.utils import is_union
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.compound_encoding.optional import decode_optional, encode_optional, free_optional
from borsh_codec.serialization.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

V = TypeVar('V')


class OptionalCodec(Codec[V | None]):
    """ Represents a codec that is either `V` or `None`.
    """

    __slots__ = ('_value',)

    _value: Codec[V]

    def __init__(self, codec: Codec[V]) -> None:
        self._value = codec

    @override
    @classmethod
    def _from_type(cls, type_: type[V | None], /, *, type_map: Codec.TypeMap) -> Self:
        if not is_union(get_origin(type_)):
            raise UnsupportedTypeError('expected type union')
        args = get_args(type_)
        assert args, 'union always has args'
        if len(args) != 2 or NoneType not in args:
            raise UnsupportedTypeError('type must be either `None | T` or `T | None`')
        not_none_type, = tuple(arg for arg in args if arg is not NoneType)  # get the type that is not None
        return cls(Codec.from_type(not_none_type, type_map=type_map))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: V | None, /) -> None:
        encode_optional(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> V | None:
        return decode_optional(deserializer, allocator, self._value.deserialize)

    @override
    def _free(self, value: V | None, allocator: Allocator, /) -> None:
        free_optional(value, allocator, self._value.free)
