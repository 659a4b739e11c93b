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


from collections.abc import Sized
from typing import Any, Optional

from structlog import get_logger
from typing_extensions import override

from borsh_codec.allocator.allocator import Allocator
from borsh_codec.conf.get_settings import get_global_settings
from borsh_codec.conf.settings import BorshSettings
from borsh_codec.serialization.exceptions import OutOfMemoryError
from borsh_codec.types import Box

logger = get_logger()


class DefaultAllocator(Allocator):
    """Allocator backed by plain Python objects, releasing is left to the garbage collector.

    Each single request is bounded by `max_items` or `max_bytes` (taken from the settings when not given), so a
    hostile length prefix cannot make a decoder build a huge list.

    >>> allocator = DefaultAllocator(max_items=2, max_bytes=4)
    >>> allocator.alloc(2)
    [None, None]
    >>> allocator.alloc_bytes(3)
    bytearray(b'\\x00\\x00\\x00')
    """

    __slots__ = ('log', '_max_items', '_max_bytes')

    def __init__(
        self,
        *,
        max_items: Optional[int] = None,
        max_bytes: Optional[int] = None,
        settings: Optional[BorshSettings] = None,
    ) -> None:
        if max_items is None or max_bytes is None:
            settings = settings or get_global_settings()
            max_items = settings.MAX_ALLOCATION_ITEMS if max_items is None else max_items
            max_bytes = settings.MAX_ALLOCATION_BYTES if max_bytes is None else max_bytes
        self.log = logger.new()
        self._max_items = max_items
        self._max_bytes = max_bytes

    @property
    def max_items(self) -> int:
        return self._max_items

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    @override
    def alloc(self, n: int, /) -> list[Any]:
        assert n >= 0
        if n > self._max_items:
            self.log.warn('allocation refused', kind='items', requested=n, limit=self._max_items)
            raise OutOfMemoryError(f'cannot allocate {n} items, the limit is {self._max_items}')
        try:
            return [None] * n
        except MemoryError as e:
            raise OutOfMemoryError(f'cannot allocate {n} items') from e

    @override
    def free(self, storage: Sized, /) -> None:
        pass

    @override
    def alloc_bytes(self, size: int, /) -> bytearray:
        assert size >= 0
        if size > self._max_bytes:
            self.log.warn('allocation refused', kind='bytes', requested=size, limit=self._max_bytes)
            raise OutOfMemoryError(f'cannot allocate {size} bytes, the limit is {self._max_bytes}')
        try:
            return bytearray(size)
        except MemoryError as e:
            raise OutOfMemoryError(f'cannot allocate {size} bytes') from e

    @override
    def free_bytes(self, size: int, /) -> None:
        pass

    @override
    def create(self) -> Box[Any]:
        return Box(None)

    @override
    def destroy(self, box: Box[Any], /) -> None:
        pass
