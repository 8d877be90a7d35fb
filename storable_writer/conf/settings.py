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
from typing import Literal, Optional, Union

from pydantic import PositiveInt

from storable_writer.inspection import DEFAULT_DIRECTIVE_KEY
from storable_writer.utils.pydantic import BaseModel

UnsupportedShapePolicy = Literal['raise', 'skip']


class StorableSettings(BaseModel):
    # What to do with a value that is not a reference, a record, a sequence or a scalar: 'raise' fails the encoding
    # with UnsupportedShapeError, 'skip' writes nothing for the value. Skipping keeps the value counted in the
    # enclosing array or hash, so the result can only be read back by lenient readers.
    UNSUPPORTED_SHAPE: UnsupportedShapePolicy = 'raise'

    # Maximum size in bytes of a whole encoded stream, header included, None means no limit. Hash entries that are
    # buffered before their count share the same limit.
    MAX_OUTPUT_BYTES: Optional[PositiveInt] = None

    # Metadata key that holds the encoding directive of record fields.
    DIRECTIVE_KEY: str = DEFAULT_DIRECTIVE_KEY

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'StorableSettings':
        """Load settings from a yaml file, `extends` can also name files that ship with this package."""
        from storable_writer.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(__file__).parent)
