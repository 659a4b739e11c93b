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


"""
A box is an owned reference, it's transparent on the wire: the encoding of `Box[T]` is exactly the encoding of `T`.

Decoding asks the allocator for the box first and destroys it again if the inner value fails to decode.

>>> from borsh_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from borsh_codec.types import Box
>>> se = Serializer.build_bytes_serializer()
>>> encode_box(se, Box('hi'), encode_utf8)
>>> bytes(se.finalize()).hex()
'020000006869'

>>> from borsh_codec.allocator import DefaultAllocator, TrackingAllocator
>>> allocator = TrackingAllocator(DefaultAllocator(max_items=16, max_bytes=16))
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0200000068'))
>>> try:
...     decode_box(de, allocator, decode_utf8)
... except ValueError as e:
...     print(*e.args)
not enough bytes to read
>>> allocator.assert_no_leaks()
"""

from typing import TYPE_CHECKING, TypeVar

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.types import Box

from . import Decoder, Encoder, Freer

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

T = TypeVar('T')


def encode_box(serializer: Serializer, box: Box[T], encoder: Encoder[T]) -> None:
    encoder(serializer, box.value)


def decode_box(deserializer: Deserializer, allocator: 'Allocator', decoder: Decoder[T]) -> Box[T]:
    box = allocator.create()
    try:
        box.value = decoder(deserializer, allocator)
    except Exception:
        allocator.destroy(box)
        raise
    return box


def free_box(box: Box[T], allocator: 'Allocator', freer: Freer[T]) -> None:
    freer(box.value, allocator)
    allocator.destroy(box)
