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

from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    """Serializer that writes directly to a binary file-like object.

    Nothing is buffered here, use a buffered stream if many small writes are a concern.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pos: int = 0

    def flush(self) -> None:
        self._stream.flush()

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self.write_bytes(int.to_bytes(data, length=1, byteorder='little'))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        self._pos += len(view)
        # raw streams are allowed to do partial writes
        while view:
            written = self._stream.write(view)
            if written is None:
                raise BlockingIOError('stream is not ready for writing')
            view = view[written:]
