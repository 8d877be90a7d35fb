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
A reference is a single tag written right before the value it points to, it has no length and no payload of its own.

Layout: [0x04][value]

>>> from storable_writer.encoding.scalar import encode_str
>>> se = Serializer.build_bytes_serializer()
>>> encode_ref(se, 'Kevin', encode_str)
>>> bytes(se.finalize()).hex()
'040a054b6576696e'
"""

from typing import TypeVar

from storable_writer.consts import SX_REF
from storable_writer.serialization import Serializer

from . import Encoder

T = TypeVar('T')


def encode_ref(serializer: Serializer, target: T, encoder: Encoder[T]) -> None:
    serializer.write_byte(SX_REF)
    encoder(serializer, target)
