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

from typing import TYPE_CHECKING, Any, TypeVar, get_args

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.codec.null_codec import NullCodec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.compound_encoding.tagged_union import decode_tagged_union, encode_tagged_union
from borsh_codec.serialization.exceptions import UnsupportedTypeError
from borsh_codec.types import Option, OptionTag

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

V = TypeVar('V')


class OptionCodec(Codec[Option[V]]):
    """ Represents `Option[V]` as a two-variant tagged union, `none` without payload and `some` with a `V`.

    `Option.TAG_TYPE` declares a 32-bit tag but the discriminant on the wire is a single byte, like for any other
    tagged union.
    """

    __slots__ = ('_variants',)

    _variants: tuple[Codec[None], Codec[V]]

    def __init__(self, codec: Codec[V]) -> None:
        self._variants = (NullCodec(), codec)

    @override
    @classmethod
    def _from_type(cls, type_: type[Option[V]], /, *, type_map: Codec.TypeMap) -> Self:
        args = get_args(type_)
        if len(args) != 1:
            raise UnsupportedTypeError('expected Option[<type>]')
        value_type, = args
        return cls(Codec.from_type(value_type, type_map=type_map))

    @property
    def _value(self) -> Codec[V]:
        return self._variants[OptionTag.SOME]

    @override
    def _check_value(self, value: Option[V], /, *, deep: bool) -> None:
        if not isinstance(value, Option):
            raise TypeError('expected Option')
        if deep and value.is_some():
            self._value._check_value(value.unwrap(), deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Option[V], /) -> None:
        variant: Codec[Any] = self._variants[value.tag]
        encode_tagged_union(serializer, value.tag, value.into(), variant.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> Option[V]:
        tag, payload = decode_tagged_union(deserializer, allocator, tuple(v.deserialize for v in self._variants))
        return Option(OptionTag(tag), payload)

    @override
    def _free(self, value: Option[V], allocator: Allocator, /) -> None:
        if value.is_some():
            self._value.free(value.unwrap(), allocator)
