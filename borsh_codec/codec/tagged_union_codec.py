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


from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, get_args, get_origin

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.codec.utils import get_runtime_class, is_union, pretty_type
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.compound_encoding.tagged_union import decode_tagged_union, encode_tagged_union
from borsh_codec.serialization.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


class TaggedUnionCodec(Codec[Any]):
    """ Represents `A | B | ...` as a 1-byte discriminant (the position of the variant in the union) and the payload.

    Values are matched to a variant by their class, so every variant must resolve to a distinct runtime class. `None`
    can be used as an empty variant, however `T | None` on its own is handled by `OptionalCodec` instead.

    `A | B | None` is a 3-variant union where `None` is the last discriminant, use `Option[A | B]` for the layout of
    an optional enum in other Borsh implementations.
    """

    __slots__ = ('_classes', '_variants', '_aliases')

    _classes: tuple[type, ...]
    _variants: tuple[Codec[Any], ...]
    # value classes accepted in place of a variant class, like bytearray for bytes
    _aliases: dict[type, type]

    def __init__(
        self,
        classes: tuple[type, ...],
        variants: tuple[Codec[Any], ...],
        aliases: Optional[dict[type, type]] = None,
    ) -> None:
        assert len(classes) == len(variants)
        self._classes = classes
        self._variants = variants
        self._aliases = aliases or {}

    @override
    @classmethod
    def _from_type(cls, type_: type[Any], /, *, type_map: Codec.TypeMap) -> Self:
        if not is_union(get_origin(type_)):
            raise UnsupportedTypeError('expected type union')
        args = get_args(type_)
        classes = tuple(get_runtime_class(arg) for arg in args)
        if len(set(classes)) != len(classes):
            raise UnsupportedTypeError(f'ambiguous union {pretty_type(type_)}, variants must have distinct classes')
        variants = tuple(Codec.from_type(arg, type_map=type_map) for arg in args)
        aliases = {k: v for k, v in type_map.alias_map.items() if isinstance(k, type) and isinstance(v, type)}
        return cls(classes, variants, aliases)

    def _variant_index(self, value: Any) -> int:
        value_class = type(value)
        value_class = self._aliases.get(value_class, value_class)
        for i, class_ in enumerate(self._classes):
            if value_class is class_:
                return i
        for i, class_ in enumerate(self._classes):
            if isinstance(value, class_):
                return i
        raise TypeError(f'{value_class.__name__} is not a variant of this union')

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        index = self._variant_index(value)
        if deep:
            self._variants[index]._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        index = self._variant_index(value)
        encode_tagged_union(serializer, index, value, self._variants[index].serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> Any:
        _, value = decode_tagged_union(deserializer, allocator, tuple(v.deserialize for v in self._variants))
        return value

    @override
    def _free(self, value: Any, allocator: Allocator, /) -> None:
        self._variants[self._variant_index(value)].free(value, allocator)
