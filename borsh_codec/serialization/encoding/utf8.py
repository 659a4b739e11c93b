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
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'hi')  # writes 020000006869
>>> encode_utf8(se, 'ハトホル')  # writes 0c000000e3838fe38388e3839be383ab
>>> encode_utf8(se, '😎')  # writes 04000000f09f988e
>>> bytes(se.finalize()).hex()
'0200000068690c000000e3838fe38388e3839be383ab04000000f09f988e'

>>> from borsh_codec.allocator import DefaultAllocator
>>> allocator = DefaultAllocator(max_items=16, max_bytes=16)
>>> de = Deserializer.build_bytes_deserializer(
...     bytes.fromhex('0200000068690c000000e3838fe38388e3839be383ab04000000f09f988e')
... )
>>> decode_utf8(de, allocator)  # reads 020000006869
'hi'
>>> decode_utf8(de, allocator)  # reads 0c000000e3838fe38388e3839be383ab
'ハトホル'
>>> decode_utf8(de, allocator)  # reads 04000000f09f988e
'😎'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x01\x00\x00\x00\xff')
>>> try:
...     decode_utf8(de, allocator)
... except InvalidUtf8Error as e:
...     print(*e.args)
invalid utf-8 sequence
"""

from typing import TYPE_CHECKING

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import InvalidUtf8Error

from .bytes import decode_bytes, encode_bytes

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    data = value.encode('utf-8')
    encode_bytes(serializer, data)


def decode_utf8(deserializer: Deserializer, allocator: 'Allocator') -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    data = decode_bytes(deserializer, allocator)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        allocator.free_bytes(len(data))
        raise InvalidUtf8Error('invalid utf-8 sequence') from e
