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
Module-level entry points, each one takes the annotation of the value and builds (or reuses) its codec.

>>> from borsh_codec.types import U32
>>> to_bytes(U32, 300).hex()
'2c010000'
>>> to_bytes(str, 'hi').hex()
'020000006869'
>>> size_of(list[U32], [1, 2, 3])
16

>>> from borsh_codec.allocator import DefaultAllocator
>>> allocator = DefaultAllocator(max_items=16, max_bytes=16)
>>> read_from_slice(allocator, bool | None, b'\\x01\\x01')
True
>>> buffer = bytearray(8)
>>> bytes(write_to_slice(buffer, U32, 7))
b'\\x07\\x00\\x00\\x00'
"""

from typing import Any, BinaryIO, Optional, TypeVar

from borsh_codec.allocator import Allocator
from borsh_codec.codec import make_codec
from borsh_codec.conf.get_settings import get_global_settings
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import TrailingDataError
from borsh_codec.serialization.types import Buffer

T = TypeVar('T')

_UNSET: Any = object()


def write(serializer: Serializer, type_: type[T], value: T) -> None:
    """Encode `value` into `serializer`, bytes written before a failure are not retracted."""
    make_codec(type_).serialize(serializer, value)


def size_of(type_: type[T], value: T) -> int:
    """Number of bytes `write` would produce, it fails exactly when `write` would."""
    return make_codec(type_).size_of(value)


def write_alloc(allocator: Allocator, type_: type[T], value: T) -> bytearray:
    """Encode `value` into a buffer of the exact size, obtained from `allocator.alloc_bytes`.

    The buffer is released again if encoding fails, otherwise it belongs to the caller.
    """
    codec = make_codec(type_)
    size = codec.size_of(value)
    buffer = allocator.alloc_bytes(size)
    try:
        codec.serialize(Serializer.build_buffer_serializer(buffer), value)
    except Exception:
        allocator.free_bytes(size)
        raise
    return buffer


def write_to_slice(buffer: bytearray | memoryview, type_: type[T], value: T) -> memoryview:
    """Encode `value` into the start of a caller provided buffer and return the written part.

    Fails with `NoSpaceLeftError` when the buffer is too small.
    """
    serializer = Serializer.build_buffer_serializer(buffer)
    make_codec(type_).serialize(serializer, value)
    return serializer.finalize()


def write_to_stream(stream: BinaryIO, type_: type[T], value: T) -> int:
    """Encode `value` into a binary stream, returns how many bytes were written."""
    serializer = Serializer.build_stream_serializer(stream)
    make_codec(type_).serialize(serializer, value)
    serializer.flush()
    return serializer.cur_pos()


def to_bytes(type_: type[T], value: T) -> bytes:
    return make_codec(type_).to_bytes(value)


def read(allocator: Allocator, type_: type[T], deserializer: Deserializer) -> T:
    """Decode one value from `deserializer`, storage comes from `allocator` and is released with `read_free`."""
    return make_codec(type_).deserialize(deserializer, allocator)


def read_free(allocator: Allocator, type_: type[T], value: T) -> None:
    """Release a value returned by `read` (or any other decoding function) with the type it was decoded as."""
    make_codec(type_).free(value, allocator)


def read_from_slice(allocator: Allocator, type_: type[T], data: Buffer) -> T:
    """Decode a value that spans exactly `data`, trailing bytes fail with `TrailingDataError`."""
    codec = make_codec(type_)
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = codec.deserialize(deserializer, allocator)
    try:
        deserializer.finalize()
    except TrailingDataError:
        codec.free(value, allocator)
        raise
    return value


def from_bytes(type_: type[T], data: Buffer, *, allocator: Optional[Allocator] = None) -> T:
    return make_codec(type_).from_bytes(data, allocator=allocator)


def read_from_stream(
    allocator: Allocator,
    type_: type[T],
    stream: BinaryIO,
    *,
    max_bytes: Optional[int] = _UNSET,
) -> T:
    """Decode the next value from a binary stream, later values in the stream are left unread.

    At most `max_bytes` are consumed, it defaults to the `STREAM_MAX_BYTES` setting and `None` removes the limit.
    """
    if max_bytes is _UNSET:
        max_bytes = get_global_settings().STREAM_MAX_BYTES
    deserializer = Deserializer.build_stream_deserializer(stream).with_optional_max_bytes(max_bytes)
    return make_codec(type_).deserialize(deserializer, allocator)
