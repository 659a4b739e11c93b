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

from types import NoneType
from typing import TYPE_CHECKING

from typing_extensions import Self, override

from borsh_codec.codec.codec import Codec
from borsh_codec.serialization import Deserializer, Serializer
from borsh_codec.serialization.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from borsh_codec.allocator import Allocator


class NullCodec(Codec[None]):
    """ Codec of the empty shape, `None` takes no bytes at all.
    """

    __slots__ = ()

    @override
    @classmethod
    def _from_type(cls, type_: type[None], /, *, type_map: Codec.TypeMap) -> Self:
        if type_ is not None and type_ is not NoneType:
            raise UnsupportedTypeError('expected None type')
        return cls()

    @override
    def _check_value(self, value: None, /, *, deep: bool) -> None:
        if value is not None:
            raise TypeError('expected None')

    @override
    def _serialize(self, serializer: Serializer, value: None, /) -> None:
        pass

    @override
    def _deserialize(self, deserializer: Deserializer, allocator: Allocator, /) -> None:
        return None
