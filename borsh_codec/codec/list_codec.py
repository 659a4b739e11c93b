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

from typing import TYPE_CHECKING, Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.compound_encoding.collection import decode_collection, encode_collection, free_collection
from borsh_codec.serialization.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

T = TypeVar('T')


class ListCodec(Codec[list[T]]):
    """ Represents `list[T]`, a u32 length prefix followed by each element.
    """

    __slots__ = ('_item',)

    _item: Codec[T]

    def __init__(self, item_codec: Codec[T], /) -> None:
        self._item = item_codec

    @override
    @classmethod
    def _from_type(cls, type_: type[list[T]], /, *, type_map: Codec.TypeMap) -> Self:
        origin_type: Any = get_origin(type_) or type_
        if not (isinstance(origin_type, type) and issubclass(origin_type, list)):
            raise UnsupportedTypeError('expected list type')
        args = get_args(type_)
        if not args or len(args) != 1:
            raise UnsupportedTypeError('expected list[<type>]')
        return cls(Codec.from_type(args[0], type_map=type_map))

    @override
    def _check_value(self, value: list[T], /, *, deep: bool) -> None:
        if not isinstance(value, (list, tuple)):
            raise TypeError('expected list')
        if deep:
            for i in value:
                self._item._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: list[T], /) -> None:
        encode_collection(serializer, value, self._item.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> list[T]:
        return decode_collection(deserializer, allocator, self._item.deserialize, list)

    @override
    def _free(self, value: list[T], allocator: Allocator, /) -> None:
        free_collection(value, allocator, self._item.free)
