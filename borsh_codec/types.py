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


"""Python spellings for the Borsh shapes that have no direct builtin counterpart.

Integers and floats are `NewType`s so a field annotation carries its wire width while values stay plain `int` and
`float` objects. `Box` and `Option` are small generic containers.
"""

from enum import IntEnum, unique
from typing import Any, ClassVar, Generic, NewType, Optional, TypeVar

from typing_extensions import Self

T = TypeVar('T')

U8 = NewType('U8', int)
U16 = NewType('U16', int)
U32 = NewType('U32', int)
U64 = NewType('U64', int)
U128 = NewType('U128', int)

I8 = NewType('I8', int)
I16 = NewType('I16', int)
I32 = NewType('I32', int)
I64 = NewType('I64', int)
I128 = NewType('I128', int)

F32 = NewType('F32', float)
F64 = NewType('F64', float)

Bytes32 = NewType('Bytes32', bytes)
Bytes64 = NewType('Bytes64', bytes)


class Box(Generic[T]):
    """Owned reference to a value, encoded exactly like the value itself.

    Decoding a `Box[T]` asks the allocator for the box before decoding the value into it.

    >>> Box(5)
    Box(5)
    >>> Box(5) == Box(5)
    True
    >>> Box(5) == 5
    False
    """

    __slots__ = ('value',)

    value: T

    def __init__(self, value: T) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Box({self.value!r})'


@unique
class OptionTag(IntEnum):
    NONE = 0
    SOME = 1


class Option(Generic[T]):
    """Two-variant tagged union for "value present", the explicit counterpart to `T | None`.

    >>> Option.some(3)
    Option.some(3)
    >>> Option.none().is_none()
    True
    >>> Option.from_optional(None) == Option.none()
    True
    >>> Option.from_optional(7).into()
    7
    >>> str(Option.none()), str(Option.some(True))
    ('null', 'True')
    """

    # Declared width of the discriminant. It only documents the type; the wire tag is one byte like every other
    # discriminant.
    TAG_TYPE: ClassVar[Any] = U32

    __slots__ = ('_tag', '_payload')

    _tag: OptionTag
    _payload: Optional[T]

    def __init__(self, tag: OptionTag, payload: Optional[T] = None) -> None:
        self._tag = OptionTag(tag)
        if self._tag is OptionTag.NONE and payload is not None:
            raise ValueError('Option.none() cannot carry a payload')
        self._payload = payload

    @classmethod
    def none(cls) -> Self:
        return cls(OptionTag.NONE)

    @classmethod
    def some(cls, payload: T) -> Self:
        return cls(OptionTag.SOME, payload)

    @classmethod
    def from_optional(cls, value: Optional[T]) -> Self:
        """Build `none` from `None` and `some` from anything else."""
        return cls.none() if value is None else cls.some(value)

    @property
    def tag(self) -> OptionTag:
        return self._tag

    def is_some(self) -> bool:
        return self._tag is OptionTag.SOME

    def is_none(self) -> bool:
        return self._tag is OptionTag.NONE

    def into(self) -> Optional[T]:
        """Return the payload, or `None` for `none`."""
        return self._payload if self.is_some() else None

    def unwrap(self) -> T:
        if not self.is_some():
            raise ValueError('called unwrap() on Option.none()')
        return self._payload  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._tag == other._tag and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._tag, self._payload))

    def __repr__(self) -> str:
        if self.is_some():
            return f'Option.some({self._payload!r})'
        return 'Option.none()'

    def __str__(self) -> str:
        if self.is_some():
            return str(self._payload)
        return 'null'
