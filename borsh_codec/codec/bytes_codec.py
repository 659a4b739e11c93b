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

from typing import TYPE_CHECKING

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.encoding.bytes import decode_bytes, encode_bytes
from borsh_codec.serialization.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


class BytesCodec(Codec[bytes]):
    """ Represents `bytes` values, a u32 length prefix followed by the raw bytes.
    """

    __slots__ = ()

    @override
    @classmethod
    def _from_type(cls, type_: type[bytes], /, *, type_map: Codec.TypeMap) -> Self:
        if type_ is not bytes:
            raise UnsupportedTypeError('expected bytes type')
        return cls()

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError('expected bytes type')

    @override
    def _serialize(self, serializer: Serializer, value: bytes, /) -> None:
        encode_bytes(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> bytes:
        return decode_bytes(deserializer, allocator)

    @override
    def _free(self, value: bytes, allocator: Allocator, /) -> None:
        allocator.free_bytes(len(value))
