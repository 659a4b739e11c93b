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

from .serializer import Serializer
from .types import Buffer


class CountingSerializer(Serializer):
    """A serializer that discards everything and only counts how many bytes were written.

    It is used to calculate the exact size of an encoded value without materializing it:

    >>> se = CountingSerializer()
    >>> se.write_byte(1)
    >>> se.write_bytes(b'test')
    >>> se.cur_pos()
    5
    """

    def __init__(self) -> None:
        self._pos: int = 0

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        if not 0 <= data <= 0xff:
            raise OverflowError('byte must be in range(0, 256)')
        self._pos += 1

    @override
    def write_bytes(self, data: Buffer) -> None:
        self._pos += memoryview(data).nbytes
