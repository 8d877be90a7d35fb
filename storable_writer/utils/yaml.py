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
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

from storable_writer.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that must contain a mapping (or nothing at all) and return it as a dict."""
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}

    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")

    return contents


def dict_from_extended_yaml(*, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> dict[str, Any]:
    """
    Read a yaml file like `dict_from_yaml`, following its `extends` key.

    The `extends` value names another yaml file, relative to the directory of the file being read or, when no such
    file exists there, relative to `custom_root`. The extended file is read first and the current file is deep-merged
    over it. The `extends` key itself is not part of the result.
    """
    contents = dict_from_yaml(filepath=filepath)
    parent_name = contents.pop(_EXTENDS_KEY, None)

    if not parent_name:
        return contents

    parent_path = Path(filepath).parent / str(parent_name)
    if not parent_path.is_file() and custom_root is not None:
        parent_path = custom_root / str(parent_name)

    try:
        parent_contents = dict_from_extended_yaml(filepath=parent_path, custom_root=custom_root)
    except RecursionError as e:
        raise ValueError('Cannot parse yaml with recursive extensions.') from e

    return deep_merge(parent_contents, contents)


def model_from_extended_yaml(model: type[T], *, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> T:
    """Read a yaml file (following `extends`) and validate its contents with a pydantic model."""
    contents = dict_from_extended_yaml(filepath=filepath, custom_root=custom_root)
    return model.model_validate(contents)
