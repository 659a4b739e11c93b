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

import pytest

from borsh_codec.utils.dict import deep_merge
from borsh_codec.utils.yaml import dict_from_extended_yaml, dict_from_yaml


@pytest.fixture
def fixtures(tmp_path: Path) -> Path:
    (tmp_path / 'empty.yml').write_text('')
    (tmp_path / 'number.yml').write_text('123\n')
    (tmp_path / 'valid.yml').write_text('a: 1\nb:\n  c: 2\n  d: 3\n')
    (tmp_path / 'empty_extends.yml').write_text('extends:\na: aa\nb:\n  d: dd\n  e: ee\n')
    (tmp_path / 'invalid_extends.yml').write_text('extends: unknown_file.yml\na: aa\n')
    (tmp_path / 'self_extends.yml').write_text('extends: self_extends.yml\na: aa\n')
    (tmp_path / 'valid_extends.yml').write_text('extends: valid.yml\na: aa\nb:\n  d: dd\n  e: ee\n')
    return tmp_path


def test_dict_from_yaml_invalid_filepath() -> None:
    with pytest.raises(ValueError) as e:
        dict_from_yaml(filepath='fake_file.yml')

    assert str(e.value) == "'fake_file.yml' is not a file"


def test_dict_from_yaml_empty(fixtures: Path) -> None:
    assert dict_from_yaml(filepath=fixtures / 'empty.yml') == {}


def test_dict_from_yaml_invalid_contents(fixtures: Path) -> None:
    filepath = fixtures / 'number.yml'

    with pytest.raises(ValueError) as e:
        dict_from_yaml(filepath=filepath)

    assert str(e.value) == f"'{filepath}' cannot be parsed as a dictionary"


def test_dict_from_yaml_valid(fixtures: Path) -> None:
    assert dict_from_yaml(filepath=fixtures / 'valid.yml') == dict(a=1, b=dict(c=2, d=3))


def test_dict_from_extended_yaml_valid(fixtures: Path) -> None:
    assert dict_from_extended_yaml(filepath=fixtures / 'valid.yml') == dict(a=1, b=dict(c=2, d=3))


def test_dict_from_extended_yaml_empty_extends(fixtures: Path) -> None:
    result = dict_from_extended_yaml(filepath=fixtures / 'empty_extends.yml')

    assert result == dict(a='aa', b=dict(d='dd', e='ee'))


def test_dict_from_extended_yaml_invalid_extends(fixtures: Path) -> None:
    with pytest.raises(ValueError) as e:
        dict_from_extended_yaml(filepath=fixtures / 'invalid_extends.yml')

    assert "unknown_file.yml' is not a file" in str(e.value)


def test_dict_from_extended_yaml_self_extends(fixtures: Path) -> None:
    with pytest.raises(ValueError) as e:
        dict_from_extended_yaml(filepath=fixtures / 'self_extends.yml')

    assert str(e.value) == 'Cannot parse yaml with recursive extensions.'


def test_dict_from_extended_yaml_valid_extends(fixtures: Path) -> None:
    result = dict_from_extended_yaml(filepath=fixtures / 'valid_extends.yml')

    assert result == dict(a='aa', b=dict(c=2, d='dd', e='ee'))


def test_dict_from_extended_yaml_custom_root(fixtures: Path, tmp_path_factory: pytest.TempPathFactory) -> None:
    other_dir = tmp_path_factory.mktemp('other')
    filepath = other_dir / 'extends_from_root.yml'
    filepath.write_text('extends: valid.yml\na: 5\n')

    result = dict_from_extended_yaml(filepath=filepath, custom_root=fixtures)

    assert result == dict(a=5, b=dict(c=2, d=3))


def test_deep_merge_does_not_mutate_inputs() -> None:
    base = dict(a=1, b=dict(c=2))
    extension = dict(b=dict(d=3))

    result = deep_merge(base, extension)

    assert result == dict(a=1, b=dict(c=2, d=3))
    assert base == dict(a=1, b=dict(c=2))
