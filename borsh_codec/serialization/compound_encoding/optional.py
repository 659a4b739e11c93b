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


r"""
An optional type is encoded the same way as a `Union[T, None]`, a presence byte followed by the value when present.

Layout:

    [0x00] when None
    [0x01][value] when not None

>>> from borsh_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 'foobar', encode_utf8)
>>> bytes(se.finalize()).hex()
'0106000000666f6f626172'

>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, None, encode_utf8)
>>> bytes(se.finalize()).hex()
'00'

>>> from borsh_codec.allocator import DefaultAllocator
>>> allocator = DefaultAllocator(max_items=16, max_bytes=16)
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0106000000666f6f626172'))
>>> decode_optional(de, allocator, decode_utf8)
'foobar'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00'))
>>> str(decode_optional(de, allocator, decode_utf8))
'None'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02'))
>>> try:
...     decode_optional(de, allocator, decode_utf8)
... except InvalidOptionalTagError as e:
...     print(*e.args)
b'\x02' is not a valid optional tag
"""

from typing import TYPE_CHECKING, Optional, TypeVar

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.consts import OPTIONAL_ABSENT, OPTIONAL_PRESENT
from borsh_codec.serialization.exceptions import InvalidOptionalTagError

from . import Decoder, Encoder, Freer

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

T = TypeVar('T')


def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T]) -> None:
    if value is None:
        serializer.write_byte(OPTIONAL_ABSENT)
    else:
        serializer.write_byte(OPTIONAL_PRESENT)
        encoder(serializer, value)


def decode_optional(deserializer: Deserializer, allocator: 'Allocator', decoder: Decoder[T]) -> Optional[T]:
    tag = deserializer.read_byte()
    if tag == OPTIONAL_ABSENT:
        return None
    elif tag == OPTIONAL_PRESENT:
        return decoder(deserializer, allocator)
    else:
        raw = bytes([tag])
        raise InvalidOptionalTagError(f'{raw!r} is not a valid optional tag')


def free_optional(value: Optional[T], allocator: 'Allocator', freer: Freer[T]) -> None:
    if value is not None:
        freer(value, allocator)
