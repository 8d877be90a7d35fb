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

r"""
The header opens every stream: the magic byte followed by the format version byte.

>>> se = Serializer.build_bytes_serializer()
>>> encode_header(se)
>>> bytes(se.finalize())
b'\x05\x07'
"""

from storable_writer.consts import MAGIC, VERSION
from storable_writer.serialization import Serializer


def encode_header(serializer: Serializer) -> None:
    """ Writes the 2-byte header, it must be written exactly once and before any value.
    """
    serializer.write_byte(MAGIC)
    serializer.write_byte(VERSION)
