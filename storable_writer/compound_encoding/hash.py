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
A hash is a sequence of named entries, each entry is written value first and key last.

Layout: [0x03][N: u32]([value_0][len(key_0): u32][key_0])...([value_N-1][len(key_N-1): u32][key_N-1])

>>> from storable_writer.encoding.scalar import encode_str
>>> se = Serializer.build_bytes_serializer()
>>> encode_hash(se, [('Name', 'Kevin')], encode_str)
>>> bytes(se.finalize()).hex()
'03000000010a054b6576696e000000044e616d65'

Breakdown of the result:

    03: hash tag
    00000001: 1 entry
    0a054b6576696e: 'Kevin' (scalar tag, length, text)
    00000004: key length
    4e616d65: 'Name'

The entries can be any iterable, including a generator that decides which entries to yield while it is consumed. The
count is only known after the last entry, so entries go to a side buffer first and are copied after the count:

>>> def fields():
...     yield 'Name', 'Kevin'
...     if False:
...         yield 'Omit', ''
>>> se = Serializer.build_bytes_serializer()
>>> encode_hash(se, fields(), encode_str)
>>> bytes(se.finalize()).hex()
'03000000010a054b6576696e000000044e616d65'
"""

from collections.abc import Iterable
from typing import TypeVar

from storable_writer.consts import MAX_COUNT, SX_HASH
from storable_writer.encoding.int import encode_u32
from storable_writer.exceptions import CountTooLargeError
from storable_writer.serialization import Serializer

from . import Encoder

T = TypeVar('T')

_COUNT_SIZE = 4


def encode_key(serializer: Serializer, key: str) -> None:
    """ Encodes a hash key as its UTF-8 bytes with a 4-byte length prefix.
    """
    data = key.encode('utf-8')
    if len(data) > MAX_COUNT:
        raise CountTooLargeError(f'key is {len(data)} bytes long, the limit is {MAX_COUNT}')
    encode_u32(serializer, len(data))
    serializer.write_bytes(data)


def _build_entries_serializer(serializer: Serializer) -> Serializer:
    """Side buffer for the entries, limited to what the target can still take after the count."""
    entries_serializer = Serializer.build_bytes_serializer()
    bytes_left = serializer.bytes_left()
    if bytes_left is None:
        return entries_serializer
    return entries_serializer.with_max_bytes(max(bytes_left - _COUNT_SIZE, 0))


def encode_hash(serializer: Serializer, entries: Iterable[tuple[str, T]], value_encoder: Encoder[T]) -> None:
    serializer.write_byte(SX_HASH)
    entries_serializer = _build_entries_serializer(serializer)
    count = 0
    for key, value in entries:
        count += 1
        value_encoder(entries_serializer, value)
        encode_key(entries_serializer, key)
    if count > MAX_COUNT:
        raise CountTooLargeError(f'hash has {count} entries, the limit is {MAX_COUNT}')
    encode_u32(serializer, count)
    serializer.write_bytes(entries_serializer.finalize())
