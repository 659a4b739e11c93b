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
Borsh binary codec: a canonical, deterministic byte encoding driven by type annotations.

>>> from borsh_codec import U16, to_bytes, from_bytes
>>> to_bytes(list[U16], [1, 2]).hex()
'0200000001000200'
>>> from_bytes(list[U16], bytes.fromhex('0200000001000200'))
[1, 2]
"""

from borsh_codec.allocator import Allocator, ArenaAllocator, DefaultAllocator, TrackingAllocator
from borsh_codec.api import (
    from_bytes,
    read,
    read_free,
    read_from_slice,
    read_from_stream,
    size_of,
    to_bytes,
    write,
    write_alloc,
    write_to_slice,
    write_to_stream,
)
from borsh_codec.codec import Codec, make_codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import (
    BorshError,
    DecodeError,
    EncodeError,
    OutOfMemoryError,
    SerializationError,
    UnsupportedTypeError,
)
from borsh_codec.types import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    Box,
    Bytes32,
    Bytes64,
    Option,
    OptionTag,
)
from borsh_codec.version import __version__

__all__ = [
    '__version__',
    # api
    'from_bytes',
    'read',
    'read_free',
    'read_from_slice',
    'read_from_stream',
    'size_of',
    'to_bytes',
    'write',
    'write_alloc',
    'write_to_slice',
    'write_to_stream',
    'make_codec',
    'Codec',
    'Serializer',
    'Deserializer',
    # allocators
    'Allocator',
    'ArenaAllocator',
    'DefaultAllocator',
    'TrackingAllocator',
    # errors
    'BorshError',
    'DecodeError',
    'EncodeError',
    'OutOfMemoryError',
    'SerializationError',
    'UnsupportedTypeError',
    # types
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'F32',
    'F64',
    'Bytes32',
    'Bytes64',
    'Box',
    'Option',
    'OptionTag',
]
