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

from typing import Iterator

import pytest

from storable_writer.conf import get_settings
from storable_writer.conf.get_settings import CONFIG_YAML_ENV_VAR


@pytest.fixture
def reset_global_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start from an unloaded settings singleton and restore the previous one afterwards."""
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    yield
