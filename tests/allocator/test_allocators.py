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


import pytest

from borsh_codec.allocator import ArenaAllocator, DefaultAllocator, TrackingAllocator
from borsh_codec.codec import make_codec
from borsh_codec.conf import BorshSettings
from borsh_codec.serialization import OutOfMemoryError, TrailingDataError
from borsh_codec.types import Box


def test_default_allocator_limits() -> None:
    allocator = DefaultAllocator(max_items=3, max_bytes=5)
    assert allocator.alloc(3) == [None, None, None]
    assert allocator.alloc_bytes(5) == bytearray(5)
    with pytest.raises(OutOfMemoryError):
        allocator.alloc(4)
    with pytest.raises(OutOfMemoryError):
        allocator.alloc_bytes(6)


def test_default_allocator_limits_from_settings() -> None:
    settings = BorshSettings(MAX_ALLOCATION_ITEMS=2, MAX_ALLOCATION_BYTES=2)
    allocator = DefaultAllocator(settings=settings)
    assert allocator.max_items == 2
    assert allocator.max_bytes == 2
    # an explicit limit wins over the settings
    assert DefaultAllocator(max_items=10, settings=settings).max_items == 10


def test_default_allocator_uses_global_settings(settings_limits: tuple[int, int]) -> None:
    allocator = DefaultAllocator()
    assert (allocator.max_items, allocator.max_bytes) == settings_limits


def test_default_allocator_box() -> None:
    allocator = DefaultAllocator()
    box = allocator.create()
    assert isinstance(box, Box)
    assert box.value is None
    allocator.destroy(box)


def test_tracking_allocator_counts() -> None:
    allocator = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8))
    storage = allocator.alloc(2)
    buffer = allocator.alloc_bytes(4)
    box = allocator.create()
    assert allocator.total_allocations == 3
    assert allocator.live_allocations == 3
    assert (allocator.live_items, allocator.live_bytes, allocator.live_boxes) == (2, 4, 1)
    with pytest.raises(AssertionError):
        allocator.assert_no_leaks()
    allocator.free(storage)
    allocator.free_bytes(len(buffer))
    allocator.destroy(box)
    allocator.assert_no_leaks()
    assert allocator.total_allocations == 3


def test_tracking_allocator_detects_over_free() -> None:
    allocator = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8))
    storage = allocator.alloc(1)
    allocator.free(storage)
    with pytest.raises(AssertionError):
        allocator.free(storage)
    with pytest.raises(AssertionError):
        allocator.free_bytes(1)
    with pytest.raises(AssertionError):
        allocator.destroy(Box(None))


def test_tracking_allocator_fail_index() -> None:
    allocator = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8), fail_index=1)
    first = allocator.alloc(1)
    with pytest.raises(OutOfMemoryError):
        allocator.alloc(1)
    # only the allocation at that index is refused
    second = allocator.alloc(1)
    allocator.free(first)
    allocator.free(second)
    allocator.assert_no_leaks()


def test_tracking_allocator_fail_index_counts_every_kind() -> None:
    allocator = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8), fail_index=1)
    buffer = allocator.alloc_bytes(2)
    with pytest.raises(OutOfMemoryError):
        allocator.create()
    box = allocator.create()
    storage = allocator.alloc(1)
    allocator.destroy(box)
    allocator.free(storage)
    allocator.free_bytes(len(buffer))
    assert allocator.total_allocations == 3
    allocator.assert_no_leaks()


def test_decoding_succeeds_after_refused_decoding() -> None:
    codec = make_codec(str)
    data = codec.to_bytes('a')
    allocator = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8), fail_index=0)
    with pytest.raises(OutOfMemoryError):
        codec.from_bytes(data, allocator=allocator)
    value = codec.from_bytes(data, allocator=allocator)
    assert value == 'a'
    codec.free(value, allocator)
    allocator.assert_no_leaks()


def test_from_bytes_trailing_data_releases_value() -> None:
    codec = make_codec(list[Box[str]])
    data = codec.to_bytes([Box('x')]) + b'\x00'
    allocator = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8))
    with pytest.raises(TrailingDataError):
        codec.from_bytes(data, allocator=allocator)
    allocator.assert_no_leaks()


def test_tracking_allocator_budget() -> None:
    allocator = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8), max_live_items=3, max_live_bytes=2)
    storage = allocator.alloc(2)
    with pytest.raises(OutOfMemoryError):
        allocator.alloc(2)
    allocator.free(storage)
    allocator.free(allocator.alloc(3))
    with pytest.raises(OutOfMemoryError):
        allocator.alloc_bytes(3)
    allocator.assert_no_leaks()


def test_tracking_allocator_refusal_from_inner() -> None:
    allocator = TrackingAllocator(DefaultAllocator(max_items=1, max_bytes=1))
    with pytest.raises(OutOfMemoryError):
        allocator.alloc(2)
    assert allocator.total_allocations == 0
    allocator.assert_no_leaks()


@pytest.mark.parametrize('fail_index', [0, 1, 2])
def test_decoding_with_refusals_never_reports_decode_error(fail_index: int) -> None:
    codec = make_codec(Box[list[str]])
    data = codec.to_bytes(Box(['a', 'b']))
    allocator = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8), fail_index=fail_index)
    with pytest.raises(OutOfMemoryError):
        codec.from_bytes(data, allocator=allocator)
    # the box and the sequence storage release themselves, no element was decoded yet
    allocator.assert_no_leaks()


def test_arena_allocator_reset() -> None:
    inner = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8))
    arena = ArenaAllocator(inner)
    codec = make_codec(list[Box[str]])
    value = codec.from_bytes(codec.to_bytes([Box('x'), Box('yz')]), allocator=arena)
    assert value == [Box('x'), Box('yz')]
    assert arena.allocation_count == 5
    # releasing through the arena is a no-op
    codec.free(value, arena)
    assert inner.live_allocations == 5
    arena.reset()
    assert arena.allocation_count == 0
    inner.assert_no_leaks()


def test_arena_allocator_context_manager() -> None:
    inner = TrackingAllocator(DefaultAllocator(max_items=8, max_bytes=8))
    with ArenaAllocator(inner) as arena:
        make_codec(list[str]).from_bytes(bytes.fromhex('010000000100000061'), allocator=arena)
        assert inner.live_allocations == 2
    inner.assert_no_leaks()
