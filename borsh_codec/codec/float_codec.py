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
from borsh_codec.serialization.encoding.float import decode_float, encode_float
from borsh_codec.serialization.exceptions import UnsupportedTypeError, ValueOutOfRangeError
from borsh_codec.utils.typing import is_subclass

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


class _FloatCodec(Codec[float]):
    """ Base class for IEEE-754 floats, NaN is refused in both directions.

    Plain `int` values are accepted when encoding and are converted to `float`.
    """

    __slots__ = ()

    # XXX: subclass must define this value:
    _byte_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: type[float], /, *, type_map: Codec.TypeMap) -> Self:
        if not is_subclass(type_, float):
            raise UnsupportedTypeError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError('expected float')

    @override
    def _serialize(self, serializer: Serializer, value: float, /) -> None:
        try:
            number = float(value)
        except OverflowError:
            raise ValueOutOfRangeError(f'{value} does not fit in a float')
        encode_float(serializer, number, length=self._byte_size)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> float:
        return decode_float(deserializer, length=self._byte_size)


class F32Codec(_FloatCodec):
    _byte_size = 4


class F64Codec(_FloatCodec):
    _byte_size = 8
