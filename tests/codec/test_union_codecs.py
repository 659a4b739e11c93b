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


from dataclasses import dataclass, make_dataclass
from functools import reduce
from operator import or_
from typing import Union

from borsh_codec.codec import make_codec
from borsh_codec.serialization import DiscriminantTooLargeError, UnknownDiscriminantError, UnsupportedTypeError
from borsh_codec.types import F32, U8, U16, Box, Option
from tests import unittest


@dataclass
class Circle:
    radius: F32


@dataclass
class Square:
    side: U16


@dataclass
class Label:
    text: str


Shape = Circle | Square | None

VARIANTS = [make_dataclass(f'Variant{i}', []) for i in range(257)]
ManyVariants = reduce(or_, VARIANTS)


class TaggedUnionTest(unittest.TestCase):
    def test_variants_by_position(self) -> None:
        self.assert_encodes(Shape, Circle(1.5), '000000c03f')
        self.assert_encodes(Shape, Square(3), '010300')
        self.assert_encodes(Shape, None, '02')

    def test_typing_union_is_the_same(self) -> None:
        self.assertEqual(
            make_codec(Union[Circle, Square]).to_bytes(Square(3)),
            make_codec(Circle | Square).to_bytes(Square(3)),
        )

    def test_scalar_variants(self) -> None:
        self.assert_encodes(U8 | str, 5, '0005')
        self.assert_encodes(U8 | str, 'a', '010100000061')

    def test_bool_and_int_are_distinct(self) -> None:
        self.assert_encodes(bool | U8, True, '0001')
        self.assert_encodes(bool | U8, 1, '0101')

    def test_bytearray_value_selects_bytes_variant(self) -> None:
        codec = make_codec(bytes | str)
        self.assertEqual(codec.to_bytes(bytearray(b'a')).hex(), '000100000061')
        self.assertEqual(codec.size_of(bytearray(b'a')), 6)
        self.assertEqual(codec.to_bytes(bytearray(b'a')), codec.to_bytes(b'a'))

    def test_optional_union_is_not_option(self) -> None:
        # None is the last variant here, Option[A | B] writes the optional enum layout instead
        self.assert_encodes(Option[Circle | Square], Option.none(), '00')
        self.assert_encodes(Option[Circle | Square], Option.some(Square(3)), '01010300')

    def test_variant_allocations(self) -> None:
        self.assert_round_trip(Label | Box[str], Label('x'))
        self.assert_round_trip(Label | Box[str], Box('y'))

    def test_unknown_discriminant(self) -> None:
        with self.assertRaises(UnknownDiscriminantError):
            make_codec(Shape).from_bytes(b'\x03')

    def test_value_not_a_variant(self) -> None:
        with self.assertRaises(TypeError):
            make_codec(Circle | Square).to_bytes(Label('x'))  # type: ignore[arg-type]

    def test_ambiguous_union(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            make_codec(U8 | U16)

    def test_discriminant_too_large(self) -> None:
        codec = make_codec(ManyVariants)
        self.assertEqual(codec.to_bytes(VARIANTS[255]()).hex(), 'ff')
        with self.assertRaises(DiscriminantTooLargeError):
            codec.to_bytes(VARIANTS[256]())
        with self.assertRaises(DiscriminantTooLargeError):
            codec.size_of(VARIANTS[256]())
