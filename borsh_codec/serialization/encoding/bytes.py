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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a u32
little-endian integer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\x04\x00\x00\x00' before writing b'test'
>>> bytes(se.finalize()).hex()
'0400000074657374'

The decoder asks the allocator for the storage of the payload:

>>> from borsh_codec.allocator import DefaultAllocator
>>> allocator = DefaultAllocator(max_items=16, max_bytes=16)
>>> de = Deserializer.build_bytes_deserializer(b'\x04\x00\x00\x00test')
>>> decode_bytes(de, allocator)
b'test'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x04\x00\x00\x00testfoo')
>>> _ = decode_bytes(de, allocator)
>>> try:
...     de.finalize()
... except ValueError as e:
...     print(*e.args)
trailing data

>>> de = Deserializer.build_bytes_deserializer(b'\x05\x00\x00\x00test')
>>> try:
...     decode_bytes(de, allocator)
... except ValueError as e:
...     print(*e.args)
not enough bytes to read
"""

from typing import TYPE_CHECKING

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.encoding.length import decode_length, encode_length

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, (bytes, bytearray))
    encode_length(serializer, len(data))
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer, allocator: 'Allocator') -> bytes:
    """ Decodes a byte-sequence with a length prefix, the buffer is released if the payload is incomplete.

    This modules's docstring has more details and examples.
    """
    size = decode_length(deserializer)
    buffer = allocator.alloc_bytes(size)
    try:
        buffer[:] = deserializer.read_bytes(size)
    except Exception:
        allocator.free_bytes(size)
        raise
    return bytes(buffer)
