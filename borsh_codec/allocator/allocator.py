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


from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Any

from borsh_codec.types import Box


class Allocator(ABC):
    """
    Source of the storage a decoder needs.

    Every `alloc`, `alloc_bytes` and `create` is paired with exactly one `free`, `free_bytes` or `destroy` when the
    decoded value is released. Refusing a request must raise `OutOfMemoryError`.
    """

    __slots__ = ()

    @abstractmethod
    def alloc(self, n: int, /) -> list[Any]:
        """Storage for exactly `n` sequence elements, every slot starts as `None`."""
        raise NotImplementedError

    @abstractmethod
    def free(self, storage: Sized, /) -> None:
        """Release storage obtained from `alloc`, sized by its length."""
        raise NotImplementedError

    @abstractmethod
    def alloc_bytes(self, size: int, /) -> bytearray:
        """A zeroed buffer of exactly `size` bytes."""
        raise NotImplementedError

    @abstractmethod
    def free_bytes(self, size: int, /) -> None:
        """Release `size` bytes obtained from `alloc_bytes`."""
        raise NotImplementedError

    @abstractmethod
    def create(self) -> Box[Any]:
        """A single box whose value has not been set yet."""
        raise NotImplementedError

    @abstractmethod
    def destroy(self, box: Box[Any], /) -> None:
        """Release a box obtained from `create`."""
        raise NotImplementedError
