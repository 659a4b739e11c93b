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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, NamedTuple, Optional, TypeVar, final

from typing_extensions import Self

from borsh_codec.codec.utils import TypeAliasMap, TypeToCodecMap, get_aliased_type, get_usable_origin_type
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import TrailingDataError, UnsupportedTypeError

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator

T = TypeVar('T')


class Codec(ABC, Generic[T]):
    """ This class is used to model a type with a known type signature and how it will be (de)serialized.

    A codec is built once from a type annotation (see `Codec.from_type` and `borsh_codec.codec.make_codec`) and then
    encodes, decodes and releases values of that shape. Compound codecs hold the codecs of their members, so the
    resulting tree mirrors the structure of the annotation.

    Instances are immutable once built and can be shared, the state of a single encoding or decoding lives in the
    serializer, deserializer and allocator that are passed in.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        codecs_map: TypeToCodecMap
        # codecs of named types (dataclasses, named tuples) being built, so recursive types resolve to themselves
        in_progress: dict[Any, Codec]

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: type[T], /, *, type_map: TypeMap) -> Codec[T]:
        """ Instantiate a Codec instance from a type signature using the given maps.

        A `codecs_map` associates concrete types to concrete Codec classes, while an `alias_map` associate types with
        substitute types to use instead.
        """
        usable_origin = get_usable_origin_type(type_, type_map=type_map, _verbose=False)
        codec_class = type_map.codecs_map[usable_origin]
        aliased_type = get_aliased_type(type_, type_map.alias_map)
        try:
            existing = type_map.in_progress.get(aliased_type)
        except TypeError:
            existing = None
        if existing is not None:
            return existing
        return codec_class._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: TypeMap) -> Self:
        """ Instantiate a Codec instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        decide on using `Codec.from_type`, forwarding the given `type_map` to continue instantiating Codec
        specializations, this is the case particularly for compound codecs, like OptionalCodec or ListCodec.
        """
        raise UnsupportedTypeError(f'{cls.__name__} is not compatible with use in a Codec.TypeMap')

    @final
    def check_value(self, value: T, /) -> None:
        """ Implementation should raise a TypeError if the value's type is not compatible.

        If `deep=True` then the check should recurse for compound types (like lists/tuples) to check each value. It is
        expected that `deep=False` is used in a context where the recursion would be made externally, so to avoid
        checking the same value multiple times `deep=False` is used.
        """
        # XXX: subclasses must implement Codec._check_value, not Codec.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize a value instance according to the signature that was abstracted.

        Serialization includes calling check_value while the value is being serialized, so calling check_value before
        calling serialize is not needed. Bytes already written when a member fails are not retracted.
        """
        # XXX: subclasses must implement Codec._serialize, not Codec.serialize
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> T:
        """ Deserialize a value instance according to the signature that was abstracted.

        Any storage the value needs is requested from `allocator`, the caller owns it afterwards and releases it with
        `Codec.free`.
        """
        # XXX: subclasses must implement Codec._deserialize, not Codec.deserialize
        return self._deserialize(deserializer, allocator)

    @final
    def free(self, value: T, allocator: Allocator, /) -> None:
        """ Release everything `deserialize` requested from `allocator` for this value.

        Must be called exactly once per decoded value, with the same codec and allocator used to decode it.
        """
        # XXX: subclasses must implement Codec._free, not Codec.free
        self._free(value, allocator)

    @final
    def size_of(self, value: T, /) -> int:
        """ Number of bytes `serialize` would write for this value, without producing them.
        """
        serializer = Serializer.build_counting_serializer()
        self.serialize(serializer, value)
        return serializer.cur_pos()

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` and avoid using the serialization system.
        """
        serializer = Serializer.build_bytes_serializer()
        self.serialize(serializer, value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: bytes, /, *, allocator: Optional[Allocator] = None) -> T:
        """ Shortcut to quickly parse a value T from `bytes` and avoid using the serialization system.

        Trailing bytes are an error. When no `allocator` is given, a `DefaultAllocator` is used.
        """
        if allocator is None:
            from borsh_codec.allocator import DefaultAllocator
            allocator = DefaultAllocator()
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.deserialize(deserializer, allocator)
        try:
            deserializer.finalize()
        except TrailingDataError:
            self.free(value, allocator)
            raise
        return value

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Codec.check_value`, should raise TypeError if the given value is not valid.

        Compound values should use `Codec._check_value` on the inner type(s) instead of `Codec.check_value` and pass
        the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the give value has been "shallow checked".

        When implementing the serialization with compound encoders, `Codec.serialize` should be passed as an `Encoder`
        instead of `Codec._serialize`, by passing `Codec.serialize` the next `Codec._serialize` implementation will
        be able to assume that the value was checked.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> T:
        """ Inner implementation of `deserialize`, it is expected that deserializers always produce valid values.
        """
        raise NotImplementedError

    def _free(self, value: T, allocator: Allocator, /) -> None:
        """ Inner implementation of `free`, codecs that never allocate keep this default.
        """
