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
An array is any value that has a known size and is iterable, its elements are written in iteration order without
names.

Layout: [0x02][N: u32][value_0]...[value_N-1]

>>> from storable_writer.encoding.scalar import encode_str
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, ['hey', 'there'], encode_str)
>>> bytes(se.finalize()).hex()
'02000000020a036865790a057468657265'

Breakdown of the result:

    02: array tag
    00000002: 2 elements
    0a03686579: 'hey' (scalar tag, length, text)
    0a057468657265: 'there' (scalar tag, length, text)

An empty array is just the tag and a zero count:

>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [], encode_str)
>>> bytes(se.finalize()).hex()
'0200000000'
"""

from collections.abc import Collection
from typing import TypeVar

from storable_writer.consts import MAX_COUNT, SX_ARRAY
from storable_writer.encoding.int import encode_u32
from storable_writer.exceptions import CountTooLargeError
from storable_writer.serialization import Serializer

from . import Encoder

T = TypeVar('T')


def encode_array(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    count = len(values)
    if count > MAX_COUNT:
        raise CountTooLargeError(f'array has {count} elements, the limit is {MAX_COUNT}')
    serializer.write_byte(SX_ARRAY)
    encode_u32(serializer, count)
    for value in values:
        encoder(serializer, value)
