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


import unittest
from typing import Any, Optional

from structlog import get_logger

from borsh_codec.allocator import DefaultAllocator, TrackingAllocator
from borsh_codec.codec import Codec, make_codec
from borsh_codec.conf.get_settings import get_global_settings
from borsh_codec.serialization import Deserializer

logger = get_logger()


class TestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.log = logger.new()
        self.settings = get_global_settings()
        self.allocator = self.make_allocator()

    def tearDown(self) -> None:
        self.allocator.assert_no_leaks()

    def make_allocator(self, *, fail_index: Optional[int] = None) -> TrackingAllocator:
        return TrackingAllocator(DefaultAllocator(settings=self.settings), fail_index=fail_index)

    def assert_encodes(self, type_: Any, value: Any, expected_hex: str) -> None:
        """Encoding `value` gives exactly `expected_hex` and decoding it gives `value` back."""
        codec = make_codec(type_)
        data = codec.to_bytes(value)
        self.assertEqual(data.hex(), expected_hex)
        self.assertEqual(codec.size_of(value), len(data))
        self.assert_decodes(codec, data, value)

    def assert_round_trip(self, type_: Any, value: Any) -> bytes:
        codec = make_codec(type_)
        data = codec.to_bytes(value)
        self.assertEqual(codec.size_of(value), len(data))
        self.assert_decodes(codec, data, value)
        return data

    def assert_decodes(self, codec: Codec, data: bytes, expected: Any) -> None:
        """Decoding `data` gives `expected`, consumes everything and every allocation is released by `free`."""
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = codec.deserialize(deserializer, self.allocator)
        deserializer.finalize()
        self.assertEqual(value, expected)
        codec.free(value, self.allocator)
        self.allocator.assert_no_leaks()
