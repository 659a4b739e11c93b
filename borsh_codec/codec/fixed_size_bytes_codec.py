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
from borsh_codec.serialization.exceptions import UnsupportedTypeError
from borsh_codec.utils.typing import is_subclass

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


class _FixedSizeBytesCodec(Codec[bytes]):
    """ Byte arrays of a fixed size, written raw without a length prefix. Decoding allocates nothing.
    """

    __slots__ = ()

    _size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: type[bytes], /, *, type_map: Codec.TypeMap) -> Self:
        if not is_subclass(type_, bytes):
            raise UnsupportedTypeError('expected bytes-like type')
        return cls()

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f'expected bytes type, not {type(value).__name__}')
        if len(value) != self._size:
            raise TypeError(f'value has {len(value)} bytes, expected exactly {self._size} bytes')

    @override
    def _serialize(self, serializer: Serializer, value: bytes, /) -> None:
        data = bytes(value)
        assert len(data) == self._size  # XXX: double check
        serializer.write_bytes(data)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> bytes:
        return bytes(deserializer.read_bytes(self._size))


class Bytes32Codec(_FixedSizeBytesCodec):
    _size = 32


class Bytes64Codec(_FixedSizeBytesCodec):
    _size = 64
