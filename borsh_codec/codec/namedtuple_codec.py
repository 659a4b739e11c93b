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

from typing import TYPE_CHECKING, NamedTuple, TypeVar, get_type_hints

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple, free_tuple
from borsh_codec.serialization.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

N = TypeVar('N', bound=tuple)


# XXX: we can't usefully describe the tuple type
class NamedTupleCodec(Codec[N]):
    __slots__ = ('_args', '_actual_type')

    _args: tuple[Codec, ...]
    _actual_type: type[N]

    def __init__(self, namedtuple: type[N], args: tuple[Codec, ...] = ()) -> None:
        self._actual_type = namedtuple
        self._args = args

    @override
    @classmethod
    def _from_type(cls, type_: type[N], /, *, type_map: Codec.TypeMap) -> Self:
        if not isinstance(type_, type) or NamedTuple not in getattr(type_, '__orig_bases__', tuple()):
            raise UnsupportedTypeError('expected NamedTuple type')
        try:
            hints = get_type_hints(type_)
        except NameError as e:
            raise UnsupportedTypeError(f'cannot resolve the annotations of {type_.__name__}: {e}') from e
        codec = cls(type_)
        type_map.in_progress[type_] = codec
        field_names = type_._fields  # type: ignore[attr-defined]
        codec._args = tuple(Codec.from_type(hints[field_name], type_map=type_map) for field_name in field_names)
        return codec

    @override
    def _check_value(self, value: N, /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, self._actual_type)):
            raise TypeError('expected tuple or namedtuple')
        if len(value) != len(self._args):
            raise TypeError('wrong number of arguments')
        if deep:
            for i, arg_codec in zip(value, self._args):
                arg_codec._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: N, /) -> None:
        encode_tuple(serializer, value, tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> N:
        return self._actual_type(*decode_tuple(deserializer, allocator, tuple(i.deserialize for i in self._args)))

    @override
    def _free(self, value: N, allocator: Allocator, /) -> None:
        free_tuple(value, allocator, tuple(i.free for i in self._args))
