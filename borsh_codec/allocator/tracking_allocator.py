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
from borsh_codec.allocator.default_allocator import DefaultAllocator
from borsh_codec.serialization.exceptions import OutOfMemoryError
from borsh_codec.types import Box

logger = get_logger()


class TrackingAllocator(Allocator):
    """
    Allocator wrapper that keeps count of everything that is alive, meant for tests and debugging.

    - `fail_index`: the allocation with this zero-based index is refused, later ones succeed again.
    - `max_live_items` / `max_live_bytes`: budget over everything currently alive.

    Releasing more than was handed out fails with `AssertionError`.

    >>> allocator = TrackingAllocator(DefaultAllocator(max_items=10, max_bytes=10))
    >>> storage = allocator.alloc(3)
    >>> allocator.live_allocations, allocator.live_items
    (1, 3)
    >>> allocator.free(storage)
    >>> allocator.assert_no_leaks()
    """

    __slots__ = (
        'log',
        '_inner',
        '_fail_index',
        '_max_live_items',
        '_max_live_bytes',
        'total_allocations',
        '_requests',
        'live_allocations',
        'live_items',
        'live_bytes',
        'live_boxes',
    )

    def __init__(
        self,
        inner: Optional[Allocator] = None,
        *,
        fail_index: Optional[int] = None,
        max_live_items: Optional[int] = None,
        max_live_bytes: Optional[int] = None,
    ) -> None:
        self.log = logger.new()
        self._inner = inner if inner is not None else DefaultAllocator()
        self._fail_index = fail_index
        self._max_live_items = max_live_items
        self._max_live_bytes = max_live_bytes
        self.total_allocations = 0
        self._requests = 0
        self.live_allocations = 0
        self.live_items = 0
        self.live_bytes = 0
        self.live_boxes = 0

    def _before_allocation(self) -> None:
        # refused requests take up an index too
        index = self._requests
        self._requests += 1
        if self._fail_index is not None and index == self._fail_index:
            self.log.warn('allocation refused', index=index, reason='fail_index')
            raise OutOfMemoryError(f'allocation #{index} refused')

    @override
    def alloc(self, n: int, /) -> list[Any]:
        self._before_allocation()
        if self._max_live_items is not None and self.live_items + n > self._max_live_items:
            self.log.warn('allocation refused', requested=n, live_items=self.live_items, reason='budget')
            raise OutOfMemoryError(f'cannot allocate {n} items, budget is {self._max_live_items}')
        storage = self._inner.alloc(n)
        self.total_allocations += 1
        self.live_allocations += 1
        self.live_items += n
        return storage

    @override
    def free(self, storage: Sized, /) -> None:
        n = len(storage)
        assert self.live_allocations > 0, 'free() without a matching alloc()'
        assert self.live_items >= n, f'freeing {n} items but only {self.live_items} are alive'
        self._inner.free(storage)
        self.live_allocations -= 1
        self.live_items -= n

    @override
    def alloc_bytes(self, size: int, /) -> bytearray:
        self._before_allocation()
        if self._max_live_bytes is not None and self.live_bytes + size > self._max_live_bytes:
            self.log.warn('allocation refused', requested=size, live_bytes=self.live_bytes, reason='budget')
            raise OutOfMemoryError(f'cannot allocate {size} bytes, budget is {self._max_live_bytes}')
        buffer = self._inner.alloc_bytes(size)
        self.total_allocations += 1
        self.live_allocations += 1
        self.live_bytes += size
        return buffer

    @override
    def free_bytes(self, size: int, /) -> None:
        assert self.live_allocations > 0, 'free_bytes() without a matching alloc_bytes()'
        assert self.live_bytes >= size, f'freeing {size} bytes but only {self.live_bytes} are alive'
        self._inner.free_bytes(size)
        self.live_allocations -= 1
        self.live_bytes -= size

    @override
    def create(self) -> Box[Any]:
        self._before_allocation()
        box = self._inner.create()
        self.total_allocations += 1
        self.live_allocations += 1
        self.live_boxes += 1
        return box

    @override
    def destroy(self, box: Box[Any], /) -> None:
        assert self.live_boxes > 0, 'destroy() without a matching create()'
        self._inner.destroy(box)
        self.live_allocations -= 1
        self.live_boxes -= 1

    def assert_no_leaks(self) -> None:
        """Fail with AssertionError unless every allocation has been released."""
        assert self.live_allocations == 0, (
            f'{self.live_allocations} allocations still alive: {self.live_items} items, {self.live_bytes} bytes, '
            f'{self.live_boxes} boxes'
        )
