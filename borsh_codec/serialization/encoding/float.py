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
This module implements IEEE-754 float encoding with 4 or 8 bytes, little-endian.

NaN has no canonical bit pattern, so it's refused both when encoding and when decoding. Infinities are allowed.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4)  # writes 0000c03f
>>> encode_float(se, -2.0, length=8)  # writes 00000000000000c0
>>> encode_float(se, float('inf'), length=4)  # writes 0000807f
>>> bytes(se.finalize()).hex()
'0000c03f00000000000000c00000807f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000c03f00000000000000c00000807f'))
>>> decode_float(de, length=4)
1.5
>>> decode_float(de, length=8)
-2.0
>>> decode_float(de, length=4)
inf
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_float(se, float('nan'), length=8)
... except NaNNotAllowedError as e:
...     print(*e.args)
NaN cannot be encoded

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000c07f'))
>>> try:
...     decode_float(de, length=4)
... except NaNNotAllowedError as e:
...     print(*e.args)
NaN cannot be decoded

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_float(se, 1e300, length=4)
... except ValueOutOfRangeError as e:
...     print(*e.args)
1e+300 does not fit in a 4 byte float
"""

import math

from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import NaNNotAllowedError, ValueOutOfRangeError

_STRUCT_FORMATS = {
    4: '<f',
    8: '<d',
}


def encode_float(serializer: Serializer, value: float, *, length: int) -> None:
    """ Encode a float as its raw IEEE-754 bits, `length` is either 4 or 8.
    """
    if math.isnan(value):
        raise NaNNotAllowedError('NaN cannot be encoded')
    try:
        serializer.write_struct((value,), _STRUCT_FORMATS[length])
    except OverflowError:
        raise ValueOutOfRangeError(f'{value} does not fit in a {length} byte float')


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    """ Decode a float from its raw IEEE-754 bits, `length` is either 4 or 8.
    """
    value, = deserializer.read_struct(_STRUCT_FORMATS[length])
    if math.isnan(value):
        raise NaNNotAllowedError('NaN cannot be decoded')
    return value
