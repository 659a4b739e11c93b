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

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.encoding.discriminant import decode_discriminant, encode_discriminant
from borsh_codec.serialization.exceptions import UnknownDiscriminantError, UnsupportedTypeError
from borsh_codec.utils.typing import is_subclass

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

E = TypeVar('E', bound=Enum)


class EnumCodec(Codec[E]):
    """ Codec for Enum subclasses, the member is written as a 1-byte discriminant.

    For `IntEnum` (and any other int-valued enum) the discriminant is the member's value, for other enums it's the
    member's position in declaration order. Aliases are not members, so they don't take a position.
    """

    __slots__ = ('_enum_class', '_members', '_int_valued')

    _enum_class: type[E]
    _members: tuple[E, ...]
    _int_valued: bool

    def __init__(self, enum_class: type[E]) -> None:
        self._enum_class = enum_class
        self._members = tuple(enum_class)
        self._int_valued = issubclass(enum_class, int)

    @override
    @classmethod
    def _from_type(cls, type_: type[E], /, *, type_map: Codec.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise UnsupportedTypeError('expected Enum subclass')
        return cls(type_)

    def _discriminant(self, value: E) -> int:
        if self._int_valued:
            return int(value)  # type: ignore[call-overload]
        return self._members.index(value)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._enum_class):
            raise TypeError(f'expected {self._enum_class.__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: E, /) -> None:
        encode_discriminant(serializer, self._discriminant(value))

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> E:
        discriminant = decode_discriminant(deserializer)
        if self._int_valued:
            try:
                return self._enum_class(discriminant)
            except ValueError as e:
                raise UnknownDiscriminantError(
                    f'invalid {self._enum_class.__name__} value: {discriminant}'
                ) from e
        if discriminant >= len(self._members):
            raise UnknownDiscriminantError(f'invalid {self._enum_class.__name__} discriminant: {discriminant}')
        return self._members[discriminant]
