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

from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

    from borsh_codec.allocator import Allocator

D = TypeVar('D', bound='DataclassInstance')


class StructCodec(Codec[D]):
    """ Codec for dataclasses, fields are encoded one after the other in declaration order.

    Field annotations are resolved with `typing.get_type_hints`, so string annotations and forward references work,
    and a dataclass can refer to itself (through `Box`, an optional or a sequence).
    """

    __slots__ = ('_fields', '_class')

    _fields: dict[str, Codec]
    _class: type[D]

    def __init__(self, class_: type[D], fields_: dict[str, Codec] | None = None) -> None:
        self._class = class_
        self._fields = {} if fields_ is None else fields_

    @override
    @classmethod
    def _from_type(cls, type_: type[D], /, *, type_map: Codec.TypeMap) -> Self:
        if not (isinstance(type_, type) and is_dataclass(type_)):
            raise UnsupportedTypeError('expected a dataclass')
        try:
            hints = get_type_hints(type_)
        except NameError as e:
            raise UnsupportedTypeError(f'cannot resolve the annotations of {type_.__name__}: {e}') from e
        codec = cls(type_)
        # registered before the fields are built, a field that refers back to this class gets this same codec
        type_map.in_progress[type_] = codec
        # XXX: the order is important, but `dict` and `fields` should have a stable order
        for field in fields(type_):
            if not field.init:
                raise UnsupportedTypeError(f'field {type_.__name__}.{field.name} must be an __init__ argument')
            codec._fields[field.name] = Codec.from_type(hints[field.name], type_map=type_map)
        return codec

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')
        if deep:
            for field_name, field_codec in self._fields.items():
                field_codec._check_value(getattr(value, field_name), deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: D, /) -> None:
        for field_name, field_codec in self._fields.items():
            field_codec.serialize(serializer, getattr(value, field_name))

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> D:
        kwargs: dict[str, Any] = {}
        for field_name, field_codec in self._fields.items():
            kwargs[field_name] = field_codec.deserialize(deserializer, allocator)
        return self._class(**kwargs)

    @override
    def _free(self, value: D, allocator: Allocator, /) -> None:
        for field_name, field_codec in self._fields.items():
            field_codec.free(getattr(value, field_name), allocator)
