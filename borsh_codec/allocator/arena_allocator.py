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
from types import TracebackType
from typing import Any, Optional

from typing_extensions import Self, override

from borsh_codec.allocator.allocator import Allocator
from borsh_codec.allocator.default_allocator import DefaultAllocator
from borsh_codec.types import Box


class ArenaAllocator(Allocator):
    """Allocator whose individual releases do nothing, everything goes away at once on `reset()`.

    >>> with ArenaAllocator(DefaultAllocator(max_items=8, max_bytes=8)) as arena:
    ...     _ = arena.alloc(2)
    ...     _ = arena.alloc_bytes(4)
    ...     arena.allocation_count
    2
    >>> arena.allocation_count
    0
    """

    __slots__ = ('_inner', '_allocations')

    def __init__(self, inner: Optional[Allocator] = None) -> None:
        self._inner = inner if inner is not None else DefaultAllocator()
        self._allocations: list[Any] = []

    @property
    def allocation_count(self) -> int:
        return len(self._allocations)

    @override
    def alloc(self, n: int, /) -> list[Any]:
        storage = self._inner.alloc(n)
        self._allocations.append(storage)
        return storage

    @override
    def free(self, storage: Sized, /) -> None:
        pass

    @override
    def alloc_bytes(self, size: int, /) -> bytearray:
        buffer = self._inner.alloc_bytes(size)
        self._allocations.append(buffer)
        return buffer

    @override
    def free_bytes(self, size: int, /) -> None:
        pass

    @override
    def create(self) -> Box[Any]:
        box = self._inner.create()
        self._allocations.append(box)
        return box

    @override
    def destroy(self, box: Box[Any], /) -> None:
        pass

    def reset(self) -> None:
        """Release every allocation made since the last reset through the wrapped allocator."""
        for allocation in reversed(self._allocations):
            if isinstance(allocation, Box):
                self._inner.destroy(allocation)
            elif isinstance(allocation, bytearray):
                self._inner.free_bytes(len(allocation))
            else:
                self._inner.free(allocation)
        self._allocations.clear()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.reset()
