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


import os
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from borsh_codec.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, BorshSettings
from borsh_codec.conf.get_settings import get_global_settings, get_settings_source


def test_default_settings_file() -> None:
    settings = BorshSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert settings == BorshSettings()
    assert settings.MAX_ALLOCATION_ITEMS == 16 * 1024 * 1024
    assert settings.STREAM_MAX_BYTES is None


def test_unittests_settings_file_extends_default() -> None:
    settings = BorshSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert settings.MAX_ALLOCATION_ITEMS == 4096
    assert settings.MAX_ALLOCATION_BYTES == 65536
    assert settings.STREAM_MAX_BYTES == 1048576


def test_global_settings_come_from_env() -> None:
    settings = get_global_settings()
    assert get_settings_source() == os.environ['BORSH_CONFIG_YAML']
    assert get_global_settings() is settings


def test_settings_are_frozen() -> None:
    settings = BorshSettings()
    with pytest.raises(ValidationError):
        settings.MAX_ALLOCATION_ITEMS = 1  # type: ignore[misc]


def test_settings_reject_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        BorshSettings.model_validate({'MAX_ALLOCATION_ITEM': 1})


@pytest.mark.parametrize(
    'values',
    [
        {'MAX_ALLOCATION_ITEMS': -1},
        {'MAX_ALLOCATION_BYTES': -1},
        {'STREAM_MAX_BYTES': 0},
    ]
)
def test_settings_validation(values: dict[str, int]) -> None:
    with pytest.raises(ValidationError):
        BorshSettings.model_validate(values)


def test_custom_file_extending_bundled_default() -> None:
    with tempfile.TemporaryDirectory() as directory:
        filepath = Path(directory) / 'custom.yml'
        filepath.write_text('extends: default.yml\nMAX_ALLOCATION_BYTES: 10\n')
        settings = BorshSettings.from_yaml(filepath=filepath)
    assert settings.MAX_ALLOCATION_BYTES == 10
    assert settings.MAX_ALLOCATION_ITEMS == BorshSettings().MAX_ALLOCATION_ITEMS


def test_missing_file() -> None:
    with pytest.raises(ValueError):
        BorshSettings.from_yaml(filepath='/does/not/exist.yml')
