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

from typing import TYPE_CHECKING, TypeVar, get_args

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.compound_encoding.box import decode_box, encode_box, free_box
from borsh_codec.serialization.exceptions import UnsupportedTypeError
from borsh_codec.types import Box

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

V = TypeVar('V')


class BoxCodec(Codec[Box[V]]):
    """ Represents `Box[V]`, transparent on the wire, the box itself comes from the allocator when decoding.
    """

    __slots__ = ('_value',)

    _value: Codec[V]

    def __init__(self, codec: Codec[V]) -> None:
        self._value = codec

    @override
    @classmethod
    def _from_type(cls, type_: type[Box[V]], /, *, type_map: Codec.TypeMap) -> Self:
        args = get_args(type_)
        if len(args) != 1:
            raise UnsupportedTypeError('expected Box[<type>]')
        value_type, = args
        return cls(Codec.from_type(value_type, type_map=type_map))

    @override
    def _check_value(self, value: Box[V], /, *, deep: bool) -> None:
        if not isinstance(value, Box):
            raise TypeError('expected Box')
        if deep:
            self._value._check_value(value.value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Box[V], /) -> None:
        encode_box(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> Box[V]:
        return decode_box(deserializer, allocator, self._value.deserialize)

    @override
    def _free(self, value: Box[V], allocator: Allocator, /) -> None:
        free_box(value, allocator, self._value.free)
