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

from typing import TYPE_CHECKING, Any, get_args, get_origin

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.compound_encoding.collection import decode_collection, encode_collection, free_collection
from borsh_codec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple, free_tuple
from borsh_codec.serialization.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


# XXX: we can't usefully describe the tuple type
class TupleCodec(Codec[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    `tuple[A, B]` is a fixed aggregate (members back to back), `tuple[T, ...]` is a sequence with a u32 length prefix
    and `tuple[()]` takes no bytes.
    """

    __slots__ = ('_varsize', '_args')

    _varsize: bool
    _args: tuple[Codec, ...]

    def __init__(self, args: tuple[Codec, ...], *, varsize: bool) -> None:
        assert not varsize or len(args) == 1
        self._varsize = varsize
        self._args = args

    @override
    @classmethod
    def _from_type(cls, type_: type[tuple], /, *, type_map: Codec.TypeMap) -> Self:
        origin_type: Any = get_origin(type_) or type_
        if not (isinstance(origin_type, type) and issubclass(origin_type, tuple)):
            raise UnsupportedTypeError('expected tuple type')
        if not hasattr(type_, '__args__'):
            raise UnsupportedTypeError('expected tuple[<args...>]')
        args = list(get_args(type_))
        if args and args[-1] is Ellipsis:
            if len(args) != 2:
                raise UnsupportedTypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls((Codec.from_type(arg, type_map=type_map),), varsize=True)
        else:
            return cls(tuple(Codec.from_type(arg, type_map=type_map) for arg in args), varsize=False)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, list)):
            raise TypeError('expected tuple-like')
        if not self._varsize and len(value) != len(self._args):
            raise TypeError('wrong tuple size')
        if deep:
            if self._varsize:
                arg_codec, = self._args
                for i in value:
                    arg_codec._check_value(i, deep=True)
            else:
                for i, arg_codec in zip(value, self._args):
                    arg_codec._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> None:
        if self._varsize:
            encode_collection(serializer, value, self._args[0].serialize)
        else:
            encode_tuple(serializer, tuple(value), tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> tuple:
        if self._varsize:
            return decode_collection(deserializer, allocator, self._args[0].deserialize, tuple)
        else:
            return decode_tuple(deserializer, allocator, tuple(i.deserialize for i in self._args))

    @override
    def _free(self, value: tuple, allocator: Allocator, /) -> None:
        if self._varsize:
            free_collection(value, allocator, self._args[0].free)
        else:
            free_tuple(tuple(value), allocator, tuple(i.free for i in self._args))
