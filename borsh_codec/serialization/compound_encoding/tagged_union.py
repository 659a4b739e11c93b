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
A tagged union is a discriminant byte that selects one of a fixed list of variants, followed by the payload of that
variant. Variants without payload (for instance `None`) contribute no bytes after the discriminant.

Layout: [discriminant: 1 byte][payload of the selected variant]

>>> from borsh_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from borsh_codec.serialization.encoding.bytes import decode_bytes, encode_bytes
>>> se = Serializer.build_bytes_serializer()
>>> encode_tagged_union(se, 1, b'ab', encode_bytes)
>>> bytes(se.finalize()).hex()
'01020000006162'

>>> from borsh_codec.allocator import DefaultAllocator
>>> allocator = DefaultAllocator(max_items=16, max_bytes=16)
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('01020000006162'))
>>> decode_tagged_union(de, allocator, (decode_utf8, decode_bytes))
(1, b'ab')
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02'))
>>> try:
...     decode_tagged_union(de, allocator, (decode_utf8, decode_bytes))
... except UnknownDiscriminantError as e:
...     print(*e.args)
unknown discriminant 2, there are 2 variants
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.encoding.discriminant import decode_discriminant, encode_discriminant
from borsh_codec.serialization.exceptions import UnknownDiscriminantError

from . import Decoder, Encoder

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

T = TypeVar('T')


def encode_tagged_union(serializer: Serializer, discriminant: int, value: T, encoder: Encoder[T]) -> None:
    encode_discriminant(serializer, discriminant)
    encoder(serializer, value)


def decode_tagged_union(
    deserializer: Deserializer,
    allocator: 'Allocator',
    decoders: Sequence[Decoder[Any]],
) -> tuple[int, Any]:
    discriminant = decode_discriminant(deserializer)
    if discriminant >= len(decoders):
        raise UnknownDiscriminantError(f'unknown discriminant {discriminant}, there are {len(decoders)} variants')
    return discriminant, decoders[discriminant](deserializer, allocator)
