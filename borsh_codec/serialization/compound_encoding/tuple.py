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
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module only implements encoding of the first case, the second case can be encoded using the collection encoder.

There actually isn't a "format" per-se, the encoding of `tuple[A, B, C]` is just the encoding of A concatenated with B
concatenated with C, with no padding. Dataclasses and named tuples are laid out the same way, field by field in
declaration order.

>>> from borsh_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from borsh_codec.serialization.encoding.bytes import decode_bytes, encode_bytes
>>> se = Serializer.build_bytes_serializer()
>>> values = ('foo', b'test')
>>> encode_tuple(se, values, (encode_utf8, encode_bytes))
>>> bytes(se.finalize()).hex()
'03000000666f6f0400000074657374'

Breakdown of the result:

    03000000666f6f: 'foo'
    0400000074657374: b'test'

>>> from borsh_codec.allocator import DefaultAllocator
>>> allocator = DefaultAllocator(max_items=16, max_bytes=16)
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('03000000666f6f0400000074657374'))
>>> decode_tuple(de, allocator, (decode_utf8, decode_bytes))
('foo', b'test')
>>> de.finalize()
"""

from typing import TYPE_CHECKING, Any

from typing_extensions import TypeVarTuple, Unpack

from borsh_codec.serialization import Deserializer, Serializer

from . import Decoder, Encoder, Freer

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

Ts = TypeVarTuple('Ts')


def encode_tuple(serializer: Serializer, values: tuple[Unpack[Ts]], encoders: tuple[Encoder[Any], ...]) -> None:
    assert len(values) == len(encoders)
    for value, encoder in zip(values, encoders):  # type: ignore
        encoder(serializer, value)


def decode_tuple(
    deserializer: Deserializer,
    allocator: 'Allocator',
    decoders: tuple[Decoder[Any], ...],
) -> tuple[Unpack[Ts]]:
    # a failure aborts the whole tuple, members decoded before it are not released
    return tuple(decoder(deserializer, allocator) for decoder in decoders)


def free_tuple(values: tuple[Unpack[Ts]], allocator: 'Allocator', freers: tuple[Freer[Any], ...]) -> None:
    assert len(values) == len(freers)
    for value, freer in zip(values, freers):  # type: ignore
        freer(value, allocator)
