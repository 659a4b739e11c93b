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


from typing import BinaryIO

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError, TrailingDataError


class StreamDeserializer(Deserializer):
    """Deserializer that reads from a binary file-like object.

    A single byte of look-ahead is kept so `is_empty` can be answered without consuming data.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._lookahead = b''

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise TrailingDataError('trailing data')

    @override
    def is_empty(self) -> bool:
        if not self._lookahead:
            self._lookahead = self._stream.read(1) or b''
        return not self._lookahead

    def _read_upto(self, n: int) -> bytes:
        parts = [self._lookahead[:n]]
        self._lookahead = self._lookahead[n:]
        missing = n - len(parts[0])
        while missing > 0:
            chunk = self._stream.read(missing)
            if not chunk:
                break
            parts.append(chunk)
            missing -= len(chunk)
        return b''.join(parts)

    @override
    def read_byte(self) -> int:
        data = self._read_upto(1)
        if not data:
            raise OutOfDataError('not enough bytes to read')
        return data[0]

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        data = self._read_upto(n)
        if exact and len(data) < n:
            raise OutOfDataError('not enough bytes to read')
        return data

    @override
    def read_all(self) -> bytes:
        data = self._lookahead + self._stream.read()
        self._lookahead = b''
        return data
