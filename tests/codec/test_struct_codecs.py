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


from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from borsh_codec.codec import make_codec
from borsh_codec.serialization import (
    Deserializer,
    OutOfDataError,
    Serializer,
    UnsupportedTypeError,
    ValueOutOfRangeError,
)
from borsh_codec.types import F64, I32, U8, U16, Box, Bytes32
from tests import unittest


@dataclass
class Point:
    x: I32
    y: I32


@dataclass(frozen=True)
class Profile:
    name: str
    tags: list[str]
    origin: Point
    score: Optional[F64]
    key: Bytes32


class Pair(NamedTuple):
    key: str
    value: U16


@dataclass
class Empty:
    pass


@dataclass
class Node:
    value: U8
    next: Optional[Box['Node']]


@dataclass
class Tree:
    label: str
    children: list['Tree']


@dataclass
class WithDerivedField:
    a: U8
    b: U8 = field(init=False, default=0)


@dataclass
class WithMissingAnnotation:
    a: 'DoesNotExist'  # type: ignore[name-defined]  # noqa: F821


class StructTest(unittest.TestCase):
    def test_fields_in_declaration_order(self) -> None:
        self.assert_encodes(Point, Point(1, -1), '01000000ffffffff')

    def test_nested(self) -> None:
        profile = Profile(
            name='ab',
            tags=['x'],
            origin=Point(2, 3),
            score=None,
            key=bytes(32),
        )
        data = self.assert_round_trip(Profile, profile)
        self.assertEqual(data[:6], b'\x02\x00\x00\x00ab')
        self.assertEqual(len(data), 6 + 9 + 8 + 1 + 32)

    def test_empty_struct(self) -> None:
        self.assert_encodes(Empty, Empty(), '')

    def test_namedtuple(self) -> None:
        self.assert_encodes(Pair, Pair('k', 7), '010000006b0700')
        value = make_codec(Pair).from_bytes(bytes.fromhex('010000006b0700'))
        self.assertIsInstance(value, Pair)

    def test_namedtuple_matches_tuple(self) -> None:
        self.assertEqual(make_codec(Pair).to_bytes(Pair('k', 7)), make_codec(tuple[str, U16]).to_bytes(('k', 7)))

    def test_recursive_through_box(self) -> None:
        self.assert_encodes(Node, Node(1, None), '0100')
        self.assert_encodes(Node, Node(1, Box(Node(2, None))), '01010200')
        codec = make_codec(Node)
        value = codec.deserialize(Deserializer.build_bytes_deserializer(bytes.fromhex('010102010300')), self.allocator)
        self.assertEqual(value, Node(1, Box(Node(2, Box(Node(3, None))))))
        self.assertEqual(self.allocator.live_boxes, 2)
        codec.free(value, self.allocator)

    def test_recursive_through_list(self) -> None:
        tree = Tree('root', [Tree('a', []), Tree('b', [Tree('c', [])])])
        self.assert_round_trip(Tree, tree)

    def test_wrong_type(self) -> None:
        with self.assertRaises(TypeError):
            make_codec(Point).to_bytes(Pair('k', 1))  # type: ignore[arg-type]

    def test_deep_check(self) -> None:
        codec = make_codec(Point)
        codec.check_value(Point(1, 2))
        with self.assertRaises(TypeError):
            codec.check_value(Point(1, 'two'))  # type: ignore[arg-type]

    def test_member_failure_aborts(self) -> None:
        serializer = Serializer.build_bytes_serializer()
        with self.assertRaises(ValueOutOfRangeError):
            make_codec(Point).serialize(serializer, Point(1, 2**40))
        # bytes already written are not retracted
        self.assertEqual(serializer.cur_pos(), 4)

    def test_truncated(self) -> None:
        with self.assertRaises(OutOfDataError):
            make_codec(Point).from_bytes(bytes.fromhex('0100000002'))

    def test_init_false_field_unsupported(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            make_codec(WithDerivedField)

    def test_unresolved_annotation(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            make_codec(WithMissingAnnotation)
