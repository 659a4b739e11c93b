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
Byte budgets for serializers and deserializers.

Decoding untrusted input from a stream is the main use: a length prefix can claim up to 4GiB of data, wrapping the
source with a budget makes the read fail early instead.

>>> from borsh_codec.serialization import Deserializer
>>> de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03').with_max_bytes(2)
>>> de.read_byte()
1
>>> de.bytes_left
1
>>> try:
...     de.read_bytes(2)
... except MaxBytesExceededError as e:
...     print(*e.args)
read of 2 bytes exceeds the limit of 2 bytes
"""

from typing import TypeVar

from typing_extensions import override

from ..deserializer import Deserializer
from ..exceptions import MaxBytesExceededError
from ..serializer import Serializer
from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter, GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._max_bytes = max_bytes
        self._bytes_left = max_bytes

    @property
    def bytes_left(self) -> int:
        return max(self._bytes_left, 0)

    def _check_update_exceeds(self, write_size: int) -> None:
        self._bytes_left -= write_size
        if self._bytes_left < 0:
            raise MaxBytesExceededError(f'write of {write_size} bytes exceeds the limit of {self._max_bytes} bytes')

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(data_view.nbytes)
        super().write_bytes(data_view)


class MaxBytesDeserializer(GenericDeserializerAdapter[D]):
    def __init__(self, deserializer: D, max_bytes: int) -> None:
        super().__init__(deserializer)
        self._max_bytes = max_bytes
        self._bytes_left = max_bytes

    @property
    def bytes_left(self) -> int:
        return max(self._bytes_left, 0)

    def _check_update_exceeds(self, read_size: int) -> None:
        self._bytes_left -= read_size
        if self._bytes_left < 0:
            raise MaxBytesExceededError(f'read of {read_size} bytes exceeds the limit of {self._max_bytes} bytes')

    @override
    def read_byte(self) -> int:
        self._check_update_exceeds(1)
        return super().read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        self._check_update_exceeds(n)
        return super().read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        result = super().read_bytes(self._bytes_left, exact=False)
        self._bytes_left -= len(memoryview(result))
        if not self.is_empty():
            raise MaxBytesExceededError(f'more than {self._max_bytes} bytes available')
        return result
