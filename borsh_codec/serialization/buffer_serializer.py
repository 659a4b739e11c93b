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


from typing_extensions import override

from .exceptions import NoSpaceLeftError
from .serializer import Serializer
from .types import Buffer


class BufferSerializer(Serializer):
    """Serializer that writes into a fixed-size buffer provided by the caller.

    Writing past the end of the buffer raises `NoSpaceLeftError`, bytes written before that are kept in the buffer.

    >>> buf = bytearray(4)
    >>> se = BufferSerializer(buf)
    >>> se.write_bytes(b'abc')
    >>> bytes(se.finalize())
    b'abc'
    >>> buf
    bytearray(b'abc\\x00')
    """

    def __init__(self, buffer: bytearray | memoryview) -> None:
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError('buffer must be writable')
        self._view = view.cast('B')
        self._pos: int = 0

    @override
    def finalize(self) -> memoryview:
        """Get the portion of the buffer that was written."""
        result = self._view[:self._pos]
        del self._view
        return result

    @override
    def cur_pos(self) -> int:
        return self._pos

    def _reserve(self, size: int) -> int:
        start = self._pos
        if start + size > len(self._view):
            raise NoSpaceLeftError(f'no space left in buffer: {len(self._view) - start} < {size}')
        self._pos += size
        return start

    @override
    def write_byte(self, data: int) -> None:
        if not 0 <= data <= 0xff:
            raise OverflowError('byte must be in range(0, 256)')
        start = self._reserve(1)
        self._view[start] = data

    @override
    def write_bytes(self, data: Buffer) -> None:
        part = memoryview(data).cast('B')
        start = self._reserve(len(part))
        self._view[start:self._pos] = part
