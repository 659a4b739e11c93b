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
Errors raised while encoding and decoding.

There are three families of errors that callers are expected to tell apart:

- `EncodeError`: the value cannot be represented in the format (a capacity problem), the caller must restructure data;
- `DecodeError`: the input bytes are malformed, retrying will not help;
- `OutOfMemoryError`: the allocator refused to provide storage while decoding, the data itself might be fine.

`NaNNotAllowedError` belongs to both the encode and decode families, since NaN is rejected on both sides.
"""


class BorshError(Exception):
    """Base class for every error raised by this package."""


class SerializationError(BorshError, ValueError):
    """Base class for errors caused by values or bytes that do not fit the format."""


class EncodeError(SerializationError):
    """A value could not be encoded."""


class DecodeError(SerializationError):
    """A byte sequence could not be decoded."""


class DiscriminantTooLargeError(EncodeError):
    """The enum/union discriminant does not fit in a single byte."""


class LengthTooLargeError(EncodeError):
    """The length of a sequence does not fit in the 4-byte length prefix."""


class ValueOutOfRangeError(EncodeError):
    """A number is outside of the range representable by its declared width."""


class NoSpaceLeftError(EncodeError):
    """A fixed-size destination buffer is too small for the encoded value."""


class NaNNotAllowedError(EncodeError, DecodeError):
    """Floating point values must not be NaN, neither when encoding nor when decoding."""


class InvalidBooleanError(DecodeError):
    """A boolean byte was neither 0 nor 1."""


class InvalidOptionalTagError(DecodeError):
    """An optional presence byte was neither 0 nor 1."""


class UnknownDiscriminantError(DecodeError):
    """The discriminant does not match any enum constant or union variant."""


class InvalidUtf8Error(DecodeError):
    """A string payload is not valid UTF-8."""


class OutOfDataError(DecodeError):
    """The source ran out of bytes before the value was complete."""


class TrailingDataError(DecodeError):
    """There were bytes left in the source after the value was complete."""


class MaxBytesExceededError(SerializationError):
    """ This error is raised when an adapted serializer reached its maximum bytes write/read.

    After this exception is raised the adapted serializer cannot be used anymore. Handlers of this exception are
    expected to either: bubble up the exception (or an equivalent exception), or return an error. Handlers should not
    try to write again on the same serializer.

    It is possible that the inner serializer is still usable, but the point where the serializer stopped writing or
    reading might leave the rest of the data unusable, so for that reason it should be considered a failed
    (de)serialization overall, and not simply a failed "read/write" operation.
    """


class OutOfMemoryError(BorshError, MemoryError):
    """The allocator refused to provide storage."""


class UnsupportedTypeError(BorshError, TypeError):
    """The given type annotation cannot be mapped to any codec."""
