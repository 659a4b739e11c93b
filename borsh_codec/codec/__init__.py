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


"""
Codecs turn a type annotation into an encoder, a decoder and a deallocator for values of that shape.

>>> from dataclasses import dataclass
>>> from borsh_codec.types import U8
>>> @dataclass
... class Pixel:
...     x: U8
...     y: U8
...     label: str | None
>>> codec = make_codec(Pixel)
>>> codec.to_bytes(Pixel(1, 2, 'a')).hex()
'0102010100000061'
>>> codec.from_bytes(bytes.fromhex('010200'))
Pixel(x=1, y=2, label=None)
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import NoneType, UnionType
from typing import NamedTuple, Optional, TypeVar, Union

from structlog import get_logger

from borsh_codec.codec.bool_codec import BoolCodec
from borsh_codec.codec.box_codec import BoxCodec
from borsh_codec.codec.bytes_codec import BytesCodec
from borsh_codec.codec.codec import Codec
from borsh_codec.codec.enum_codec import EnumCodec
from borsh_codec.codec.fixed_size_bytes_codec import Bytes32Codec, Bytes64Codec
from borsh_codec.codec.float_codec import F32Codec, F64Codec
from borsh_codec.codec.list_codec import ListCodec
from borsh_codec.codec.namedtuple_codec import NamedTupleCodec
from borsh_codec.codec.null_codec import NullCodec
from borsh_codec.codec.option_codec import OptionCodec
from borsh_codec.codec.optional_codec import OptionalCodec
from borsh_codec.codec.sized_int_codec import (
    I8Codec,
    I16Codec,
    I32Codec,
    I64Codec,
    I128Codec,
    U8Codec,
    U16Codec,
    U32Codec,
    U64Codec,
    U128Codec,
)
from borsh_codec.codec.str_codec import StrCodec
from borsh_codec.codec.struct_codec import StructCodec
from borsh_codec.codec.tagged_union_codec import TaggedUnionCodec
from borsh_codec.codec.tuple_codec import TupleCodec
from borsh_codec.codec.utils import TypeAliasMap, TypeToCodecMap, pretty_type
from borsh_codec.types import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    Box,
    Bytes32,
    Bytes64,
    Option,
)

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'TYPE_TO_CODEC_MAP',
    'BoolCodec',
    'BoxCodec',
    'Bytes32Codec',
    'Bytes64Codec',
    'BytesCodec',
    'Codec',
    'EnumCodec',
    'F32Codec',
    'F64Codec',
    'I8Codec',
    'I16Codec',
    'I32Codec',
    'I64Codec',
    'I128Codec',
    'ListCodec',
    'NamedTupleCodec',
    'NullCodec',
    'OptionCodec',
    'OptionalCodec',
    'StrCodec',
    'StructCodec',
    'TaggedUnionCodec',
    'TupleCodec',
    'TypeAliasMap',
    'TypeToCodecMap',
    'U8Codec',
    'U16Codec',
    'U32Codec',
    'U64Codec',
    'U128Codec',
    'make_codec',
    'make_type_map',
]

T = TypeVar('T')

logger = get_logger()

DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    # XXX: technically types.UnionType is not a type, so mypy complains, but for our purposes it is a type
    Union: UnionType,
    bytearray: bytes,
}

# Mapping between annotations and Codec classes, see `get_usable_origin_type` for the keys that are not classes.
TYPE_TO_CODEC_MAP: TypeToCodecMap = {
    # builtin types:
    None: NullCodec,
    NoneType: NullCodec,  # this can come up here as well as None
    bool: BoolCodec,
    bytes: BytesCodec,
    float: F64Codec,
    int: U64Codec,
    list: ListCodec,
    str: StrCodec,
    tuple: TupleCodec,
    # sized scalars:
    U8: U8Codec,
    U16: U16Codec,
    U32: U32Codec,
    U64: U64Codec,
    U128: U128Codec,
    I8: I8Codec,
    I16: I16Codec,
    I32: I32Codec,
    I64: I64Codec,
    I128: I128Codec,
    F32: F32Codec,
    F64: F64Codec,
    Bytes32: Bytes32Codec,
    Bytes64: Bytes64Codec,
    # containers:
    Box: BoxCodec,
    Option: OptionCodec,
    # other Python types:
    Optional: OptionalCodec,
    UnionType: TaggedUnionCodec,
    Enum: EnumCodec,
    NamedTuple: NamedTupleCodec,
    dataclass: StructCodec,
}


def make_type_map() -> Codec.TypeMap:
    """ A fresh type map with the default maps, `Codec.from_type` needs a new one for every top-level call.
    """
    return Codec.TypeMap(DEFAULT_TYPE_ALIAS_MAP, TYPE_TO_CODEC_MAP, {})


@lru_cache(maxsize=None)
def make_codec(type_: type[T], /) -> Codec[T]:
    """ Like Codec.from_type, but with the default maps, codecs are built once per annotation and then reused.

    If you need to customize the mapping use `Codec.from_type` instead.

    >>> from borsh_codec.types import U32
    >>> make_codec(U32).to_bytes(300).hex()
    '2c010000'
    >>> make_codec(U32) is make_codec(U32)
    True
    """
    codec = Codec.from_type(type_, type_map=make_type_map())
    logger.debug('codec created', type=pretty_type(type_), codec=type(codec).__name__)
    return codec
