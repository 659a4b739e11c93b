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

from typing import TYPE_CHECKING, ClassVar

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.encoding.int import decode_int, encode_int
from borsh_codec.serialization.exceptions import UnsupportedTypeError, ValueOutOfRangeError
from borsh_codec.utils.typing import is_subclass

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


class _SizedIntCodec(Codec[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.
    """

    __slots__ = ()

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: type[int], /, *, type_map: Codec.TypeMap) -> Self:
        if not is_subclass(type_, int):
            raise UnsupportedTypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if not isinstance(value, int):
            raise TypeError('expected integer')
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        if value > self._upper_bound_value():
            raise ValueOutOfRangeError(f'{value} is above the upper bound of {type(self).__name__}')
        if value < self._lower_bound_value():
            raise ValueOutOfRangeError(f'{value} is below the lower bound of {type(self).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


class U8Codec(_SizedIntCodec):
    _signed = False
    _byte_size = 1


class U16Codec(_SizedIntCodec):
    _signed = False
    _byte_size = 2


class U32Codec(_SizedIntCodec):
    _signed = False
    _byte_size = 4


class U64Codec(_SizedIntCodec):
    _signed = False
    _byte_size = 8


class U128Codec(_SizedIntCodec):
    _signed = False
    _byte_size = 16


class I8Codec(_SizedIntCodec):
    _signed = True
    _byte_size = 1


class I16Codec(_SizedIntCodec):
    _signed = True
    _byte_size = 2


class I32Codec(_SizedIntCodec):
    _signed = True
    _byte_size = 4


class I64Codec(_SizedIntCodec):
    _signed = True
    _byte_size = 8


class I128Codec(_SizedIntCodec):
    _signed = True
    _byte_size = 16
