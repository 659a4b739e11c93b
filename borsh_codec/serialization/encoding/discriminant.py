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
This module implements encoding of the single byte discriminant that selects an enum member or a union variant.

>>> se = Serializer.build_bytes_serializer()
>>> encode_discriminant(se, 2)
>>> bytes(se.finalize()).hex()
'02'

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_discriminant(se, 256)
... except DiscriminantTooLargeError as e:
...     print(*e.args)
discriminant 256 does not fit in one byte
"""

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.consts import MAX_DISCRIMINANT
from borsh_codec.serialization.exceptions import DiscriminantTooLargeError


def encode_discriminant(serializer: Serializer, discriminant: int) -> None:
    if not 0 <= discriminant <= MAX_DISCRIMINANT:
        raise DiscriminantTooLargeError(f'discriminant {discriminant} does not fit in one byte')
    serializer.write_byte(discriminant)


def decode_discriminant(deserializer: Deserializer) -> int:
    return deserializer.read_byte()
