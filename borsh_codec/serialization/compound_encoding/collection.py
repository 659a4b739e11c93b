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
A collection is basically any value that has a known size and is iterable.

Layout: [N: u32 little-endian][value_0]...[value_N-1]

>>> from borsh_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> value = ['a', 'π', 'test']
>>> encode_collection(se, value, encode_utf8)
>>> bytes(se.finalize()).hex()
'03000000010000006102000000cf800400000074657374'

Breakdown of the result:

    03000000: 3 as u32, the total length
    0100000061: 'a' (with length prefix)
    02000000cf80: 'π' (with length prefix)
    0400000074657374: 'test' (with length prefix)

When decoding, the storage for exactly N elements is requested from the allocator up front. The builder can be any
compatible collection, in the previous example a `list` was encoded, but when decoding a `tuple` could be used, it
only matters that the collection can be initialized with an `Iterable[T]`.

>>> from borsh_codec.allocator import DefaultAllocator, TrackingAllocator
>>> allocator = TrackingAllocator(DefaultAllocator(max_items=16, max_bytes=16))
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('03000000010000006102000000cf800400000074657374'))
>>> decoded = decode_collection(de, allocator, decode_utf8, tuple)
>>> decoded
('a', 'π', 'test')
>>> de.finalize()

Releasing walks the elements and then the storage itself:

>>> free_collection(decoded, allocator, lambda value, allocator: allocator.free_bytes(len(value.encode())))
>>> allocator.assert_no_leaks()
"""

from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING, Callable, TypeVar

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.encoding.length import decode_length, encode_length

from . import Decoder, Encoder, Freer

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_length(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    allocator: 'Allocator',
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    length = decode_length(deserializer)
    storage = allocator.alloc(length)
    try:
        for i in range(length):
            storage[i] = decoder(deserializer, allocator)
    except Exception:
        # elements decoded so far are not released, only the storage
        allocator.free(storage)
        raise
    return builder(storage)


def free_collection(values: Collection[T], allocator: 'Allocator', freer: Freer[T]) -> None:
    for value in values:
        freer(value, allocator)
    allocator.free(values)
