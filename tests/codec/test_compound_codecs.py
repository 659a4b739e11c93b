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


from enum import Enum, IntEnum
from typing import Optional

from borsh_codec.codec import make_codec
from borsh_codec.serialization import (
    Deserializer,
    DiscriminantTooLargeError,
    InvalidBooleanError,
    InvalidOptionalTagError,
    InvalidUtf8Error,
    LengthTooLargeError,
    OutOfDataError,
    OutOfMemoryError,
    UnknownDiscriminantError,
)
from borsh_codec.types import U8, U16, U32, Box, Option
from tests import unittest


class Color(Enum):
    RED = 'red'
    GREEN = 'green'
    BLUE = 'blue'


class Level(IntEnum):
    LOW = 0
    HIGH = 5


class Wide(IntEnum):
    SMALL = 255
    LARGE = 256


Big = Enum('Big', [f'M{i}' for i in range(257)])  # type: ignore[misc]


class _HugeList(list):
    def __len__(self) -> int:
        return 2**32


class BytesAndTextTest(unittest.TestCase):
    def test_str(self) -> None:
        self.assert_encodes(str, 'hi', '020000006869')
        self.assert_encodes(str, '', '00000000')
        self.assert_encodes(str, 'π', '02000000cf80')

    def test_str_allocation_is_sized_by_utf8(self) -> None:
        codec = make_codec(str)
        value = codec.deserialize(Deserializer.build_bytes_deserializer(bytes.fromhex('02000000cf80')), self.allocator)
        self.assertEqual(self.allocator.live_bytes, 2)
        codec.free(value, self.allocator)

    def test_str_invalid_utf8(self) -> None:
        with self.assertRaises(InvalidUtf8Error):
            make_codec(str).from_bytes(bytes.fromhex('01000000ff'), allocator=self.allocator)

    def test_bytes(self) -> None:
        self.assert_encodes(bytes, b'\x00\xff', '0200000000ff')
        self.assert_encodes(bytes, b'', '00000000')

    def test_bytearray_is_accepted_as_bytes(self) -> None:
        self.assertEqual(make_codec(bytes).to_bytes(bytearray(b'ab')), b'\x02\x00\x00\x00ab')
        self.assertIs(type(make_codec(bytearray)), type(make_codec(bytes)))

    def test_truncated(self) -> None:
        with self.assertRaises(OutOfDataError):
            make_codec(bytes).from_bytes(b'\x05\x00\x00\x00abc', allocator=self.allocator)
        with self.assertRaises(OutOfDataError):
            make_codec(str).from_bytes(b'\x05\x00', allocator=self.allocator)

    def test_wrong_type(self) -> None:
        with self.assertRaises(TypeError):
            make_codec(str).to_bytes(b'hi')  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            make_codec(bytes).to_bytes('hi')  # type: ignore[arg-type]


class SequenceTest(unittest.TestCase):
    def test_list(self) -> None:
        self.assert_encodes(list[U32], [1, 2, 3], '03000000010000000200000003000000')
        self.assert_encodes(list[U32], [], '00000000')
        self.assert_encodes(list[str], ['a', 'bc'], '020000000100000061020000006263')

    def test_nested_list(self) -> None:
        self.assert_round_trip(list[list[U8]], [[], [1], [2, 3]])
        self.assert_round_trip(list[list[str]], [['x'], [], ['y', 'zz']])

    def test_list_accepts_tuple_value(self) -> None:
        self.assertEqual(make_codec(list[U8]).to_bytes((1, 2)), make_codec(list[U8]).to_bytes([1, 2]))

    def test_variable_tuple(self) -> None:
        self.assert_encodes(tuple[U16, ...], (1, 2), '0200000001000200')
        data = make_codec(tuple[U16, ...]).to_bytes((1, 2))
        self.assertEqual(data, make_codec(list[U16]).to_bytes([1, 2]))

    def test_fixed_tuple(self) -> None:
        self.assert_encodes(tuple[U8, str, bool], (1, 'a', True), '01010000006101')
        self.assert_encodes(tuple[()], (), '')

    def test_fixed_tuple_wrong_size(self) -> None:
        with self.assertRaises(TypeError):
            make_codec(tuple[U8, U8]).to_bytes((1,))

    def test_length_too_large(self) -> None:
        codec = make_codec(list[U8])
        with self.assertRaises(LengthTooLargeError):
            codec.to_bytes(_HugeList())
        with self.assertRaises(LengthTooLargeError):
            codec.size_of(_HugeList())

    def test_element_out_of_range_aborts(self) -> None:
        with self.assertRaises(ValueError):
            make_codec(list[U8]).to_bytes([1, 256])

    def test_element_failure_releases_storage(self) -> None:
        with self.assertRaises(InvalidBooleanError):
            make_codec(list[bool]).from_bytes(bytes.fromhex('030000000100ff'), allocator=self.allocator)
        self.allocator.assert_no_leaks()

    def test_element_truncated_releases_storage(self) -> None:
        with self.assertRaises(OutOfDataError):
            make_codec(list[U32]).from_bytes(bytes.fromhex('0200000001000000'), allocator=self.allocator)
        self.allocator.assert_no_leaks()

    def test_refused_storage(self) -> None:
        # the unit test settings limit a single allocation to 4096 items
        with self.assertRaises(OutOfMemoryError):
            make_codec(list[U8]).from_bytes(bytes.fromhex('01100000'), allocator=self.allocator)
        self.allocator.assert_no_leaks()

    def test_refused_element_releases_storage(self) -> None:
        allocator = self.make_allocator(fail_index=1)
        with self.assertRaises(OutOfMemoryError):
            make_codec(list[str]).from_bytes(bytes.fromhex('010000000100000061'), allocator=allocator)
        allocator.assert_no_leaks()

    def test_out_of_memory_is_not_a_decode_error(self) -> None:
        from borsh_codec.serialization import DecodeError
        allocator = self.make_allocator(fail_index=0)
        try:
            make_codec(list[U8]).from_bytes(bytes.fromhex('0100000001'), allocator=allocator)
        except DecodeError:
            self.fail('allocation refusal reported as a decode error')
        except OutOfMemoryError:
            pass
        else:
            self.fail('expected OutOfMemoryError')


class OptionalTest(unittest.TestCase):
    def test_optional(self) -> None:
        self.assert_encodes(bool | None, None, '00')
        self.assert_encodes(bool | None, True, '0101')
        self.assert_encodes(Optional[str], 'a', '010100000061')
        self.assert_encodes(Optional[str], None, '00')

    def test_nested_optional_in_list(self) -> None:
        self.assert_encodes(list[U8 | None], [None, 3], '020000000001' + '03')

    def test_invalid_tag(self) -> None:
        for tag in (b'\x02', b'\x05', b'\x05\x01'):
            with self.assertRaises(InvalidOptionalTagError):
                make_codec(bool | None).from_bytes(tag)

    def test_payload_is_checked(self) -> None:
        with self.assertRaises(TypeError):
            make_codec(bool | None).to_bytes(1)  # type: ignore[arg-type]


class OptionTest(unittest.TestCase):
    def test_option_bool(self) -> None:
        self.assert_encodes(Option[bool], Option.none(), '00')
        self.assert_encodes(Option[bool], Option.some(True), '0101')

    def test_option_wire_matches_optional(self) -> None:
        for value in (None, False, True):
            self.assertEqual(
                make_codec(Option[bool]).to_bytes(Option.from_optional(value)),
                make_codec(bool | None).to_bytes(value),
            )

    def test_option_tag_is_one_byte(self) -> None:
        # the declared tag type is U32, the wire tag is still a single byte
        self.assertIs(Option.TAG_TYPE, U32)
        codec = make_codec(Option[U32])
        self.assertEqual(codec.to_bytes(Option.some(1)).hex(), '0101000000')
        self.assertEqual(codec.size_of(Option.some(1)), 5)
        self.assertEqual(codec.size_of(Option.none()), 1)

    def test_option_allocations(self) -> None:
        self.assert_round_trip(Option[str], Option.some('abc'))
        self.assert_round_trip(Option[list[str]], Option.some(['a', 'b']))
        self.assert_round_trip(Option[str], Option.none())

    def test_nested_option(self) -> None:
        self.assert_encodes(Option[Option[bool]], Option.none(), '00')
        self.assert_encodes(Option[Option[bool]], Option.some(Option.none()), '0100')
        self.assert_encodes(Option[Option[bool]], Option.some(Option.some(False)), '010100')
        self.assert_round_trip(Option[Option[str]], Option.some(Option.some('ab')))

    def test_option_of_optional(self) -> None:
        self.assert_encodes(Option[bool | None], Option.none(), '00')
        self.assert_encodes(Option[bool | None], Option.some(None), '0100')
        self.assert_encodes(Option[bool | None], Option.some(True), '010101')

    def test_unknown_tag(self) -> None:
        for data in (b'\x02\x01', b'\x05\x01'):
            with self.assertRaises(UnknownDiscriminantError):
                make_codec(Option[bool]).from_bytes(data)

    def test_wrong_type(self) -> None:
        with self.assertRaises(TypeError):
            make_codec(Option[bool]).to_bytes(True)  # type: ignore[arg-type]


class BoxTest(unittest.TestCase):
    def test_box_is_transparent(self) -> None:
        self.assert_encodes(Box[U16], Box(258), '0201')
        self.assertEqual(make_codec(Box[str]).to_bytes(Box('hi')), make_codec(str).to_bytes('hi'))

    def test_box_allocations(self) -> None:
        codec = make_codec(Box[str])
        value = codec.deserialize(Deserializer.build_bytes_deserializer(b'\x01\x00\x00\x00a'), self.allocator)
        self.assertEqual(self.allocator.live_boxes, 1)
        self.assertEqual(self.allocator.live_bytes, 1)
        codec.free(value, self.allocator)

    def test_inner_failure_destroys_box(self) -> None:
        with self.assertRaises(InvalidUtf8Error):
            make_codec(Box[str]).from_bytes(b'\x01\x00\x00\x00\xff', allocator=self.allocator)
        self.allocator.assert_no_leaks()

    def test_inner_refusal_destroys_box(self) -> None:
        allocator = self.make_allocator(fail_index=1)
        with self.assertRaises(OutOfMemoryError):
            make_codec(Box[str]).from_bytes(b'\x01\x00\x00\x00a', allocator=allocator)
        allocator.assert_no_leaks()


class EnumTest(unittest.TestCase):
    def test_enum_uses_declaration_order(self) -> None:
        self.assert_encodes(Color, Color.RED, '00')
        self.assert_encodes(Color, Color.BLUE, '02')

    def test_int_enum_uses_value(self) -> None:
        self.assert_encodes(Level, Level.LOW, '00')
        self.assert_encodes(Level, Level.HIGH, '05')

    def test_unknown_discriminant(self) -> None:
        with self.assertRaises(UnknownDiscriminantError):
            make_codec(Color).from_bytes(b'\x03')
        with self.assertRaises(UnknownDiscriminantError):
            make_codec(Level).from_bytes(b'\x01')

    def test_discriminant_too_large(self) -> None:
        self.assert_encodes(Wide, Wide.SMALL, 'ff')
        with self.assertRaises(DiscriminantTooLargeError):
            make_codec(Wide).to_bytes(Wide.LARGE)

    def test_more_than_256_members(self) -> None:
        codec = make_codec(Big)
        self.assertEqual(codec.to_bytes(Big.M255).hex(), 'ff')
        with self.assertRaises(DiscriminantTooLargeError):
            codec.to_bytes(Big.M256)

    def test_wrong_member_type(self) -> None:
        with self.assertRaises(TypeError):
            make_codec(Color).to_bytes(Level.LOW)  # type: ignore[arg-type]
