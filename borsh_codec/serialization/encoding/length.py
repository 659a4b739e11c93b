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
This module implements encoding of the u32 length prefix used by sequences, byte strings and text.

>>> se = Serializer.build_bytes_serializer()
>>> encode_length(se, 2)
>>> bytes(se.finalize()).hex()
'02000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02000000'))
>>> decode_length(de)
2

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_length(se, 2**32)
... except LengthTooLargeError as e:
...     print(*e.args)
length 4294967296 does not fit in a u32 prefix
"""

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.consts import LENGTH_PREFIX_SIZE, MAX_LENGTH
from borsh_codec.serialization.encoding.int import decode_int, encode_int
from borsh_codec.serialization.exceptions import LengthTooLargeError


def encode_length(serializer: Serializer, size: int) -> None:
    assert size >= 0
    if size > MAX_LENGTH:
        raise LengthTooLargeError(f'length {size} does not fit in a u32 prefix')
    encode_int(serializer, size, length=LENGTH_PREFIX_SIZE, signed=False)


def decode_length(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False)
