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
from pydantic import ValidationError

from storable_writer.conf import DEFAULT_SETTINGS_FILEPATH, StorableSettings, get_global_settings
from storable_writer.conf.get_settings import CONFIG_YAML_ENV_VAR, get_settings_source
from storable_writer.utils.yaml import dict_from_extended_yaml, dict_from_yaml

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def test_default_file_matches_model_defaults():
    assert StorableSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH) == StorableSettings()


def test_extends_packaged_file():
    settings = StorableSettings.from_yaml(filepath=FIXTURES_DIR / 'skip_unsupported.yml')
    assert settings == StorableSettings(UNSUPPORTED_SHAPE='skip')


def test_extends_sibling_file():
    settings = StorableSettings.from_yaml(filepath=FIXTURES_DIR / 'child.yml')
    assert settings.MAX_OUTPUT_BYTES == 64
    assert settings.DIRECTIVE_KEY == 'perl'
    assert settings.UNSUPPORTED_SHAPE == 'raise'


def test_extends_key_is_dropped():
    assert dict_from_extended_yaml(filepath=FIXTURES_DIR / 'child.yml') == dict(MAX_OUTPUT_BYTES=64, DIRECTIVE_KEY='perl')


def test_empty_file():
    assert dict_from_yaml(filepath=FIXTURES_DIR / 'empty.yml') == {}
    assert StorableSettings.from_yaml(filepath=FIXTURES_DIR / 'empty.yml') == StorableSettings()


@pytest.mark.parametrize('filename', ['invalid_policy.yml', 'unknown_key.yml'])
def test_invalid_settings(filename):
    with pytest.raises(ValidationError):
        StorableSettings.from_yaml(filepath=FIXTURES_DIR / filename)


@pytest.mark.parametrize('filename', ['not_a_dict.yml', 'missing.yml', 'recursive.yml'])
def test_unreadable_settings(filename):
    with pytest.raises(ValueError):
        StorableSettings.from_yaml(filepath=FIXTURES_DIR / filename)


def test_max_output_bytes_must_be_positive():
    with pytest.raises(ValidationError):
        StorableSettings(MAX_OUTPUT_BYTES=0)


def test_settings_are_frozen():
    settings = StorableSettings()
    with pytest.raises(ValidationError):
        settings.UNSUPPORTED_SHAPE = 'skip'  # type: ignore[misc]


def test_global_settings_default(reset_global_settings):
    settings = get_global_settings()
    assert settings == StorableSettings()
    assert get_global_settings() is settings
    assert get_settings_source() == DEFAULT_SETTINGS_FILEPATH


def test_global_settings_from_env_var(reset_global_settings, monkeypatch):
    filepath = str(FIXTURES_DIR / 'skip_unsupported.yml')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, filepath)
    assert get_global_settings().UNSUPPORTED_SHAPE == 'skip'
    assert get_settings_source() == filepath


def test_global_settings_cannot_change_file(reset_global_settings, monkeypatch):
    get_global_settings()
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(FIXTURES_DIR / 'child.yml'))
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_global_settings()
