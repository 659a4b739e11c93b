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
Byte sinks (`Serializer`) and byte sources (`Deserializer`) plus the low-level encoders that operate on them.

Codecs never care where bytes go to or come from, they only write and read exact amounts of bytes through these
interfaces, so any implementation (memory, fixed buffer, stream, byte counter) can be used interchangeably.
"""

from .deserializer import Deserializer
from .exceptions import (
    BorshError,
    DecodeError,
    DiscriminantTooLargeError,
    EncodeError,
    InvalidBooleanError,
    InvalidOptionalTagError,
    InvalidUtf8Error,
    LengthTooLargeError,
    MaxBytesExceededError,
    NaNNotAllowedError,
    NoSpaceLeftError,
    OutOfDataError,
    OutOfMemoryError,
    SerializationError,
    TrailingDataError,
    UnknownDiscriminantError,
    UnsupportedTypeError,
    ValueOutOfRangeError,
)
from .serializer import Serializer

__all__ = [
    'Serializer',
    'Deserializer',
    'BorshError',
    'DecodeError',
    'DiscriminantTooLargeError',
    'EncodeError',
    'InvalidBooleanError',
    'InvalidOptionalTagError',
    'InvalidUtf8Error',
    'LengthTooLargeError',
    'MaxBytesExceededError',
    'NaNNotAllowedError',
    'NoSpaceLeftError',
    'OutOfDataError',
    'OutOfMemoryError',
    'SerializationError',
    'TrailingDataError',
    'UnknownDiscriminantError',
    'UnsupportedTypeError',
    'ValueOutOfRangeError',
]
