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


from pathlib import Path
from typing import Optional

from pydantic import field_validator

from borsh_codec.utils import pydantic
from borsh_codec.utils.yaml import model_from_extended_yaml


class BorshSettings(pydantic.BaseModel):
    # Largest number of elements a single sequence allocation may request. A decoded length prefix above this is
    # refused with OutOfMemoryError before any storage is created.
    MAX_ALLOCATION_ITEMS: int = 16 * 1024 * 1024

    # Largest number of bytes a single bytes/text allocation may request.
    MAX_ALLOCATION_BYTES: int = 64 * 1024 * 1024

    # Default byte budget when decoding from a stream, `None` means unbounded.
    STREAM_MAX_BYTES: Optional[int] = None

    @field_validator('MAX_ALLOCATION_ITEMS', 'MAX_ALLOCATION_BYTES', mode='after')
    @classmethod
    def _validate_allocation_limit(cls, limit: int) -> int:
        if limit < 0:
            raise ValueError('allocation limits cannot be negative')
        return limit

    @field_validator('STREAM_MAX_BYTES', mode='after')
    @classmethod
    def _validate_stream_max_bytes(cls, max_bytes: Optional[int]) -> Optional[int]:
        if max_bytes is not None and max_bytes <= 0:
            raise ValueError('STREAM_MAX_BYTES must be positive or null')
        return max_bytes

    @classmethod
    def from_yaml(cls, *, filepath: str | Path) -> 'BorshSettings':
        """Takes a filepath to a yaml file and returns a validated BorshSettings instance."""
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(__file__).parent)
