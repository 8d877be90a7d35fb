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

"""
This module implements encoding of integers with a fixed size, the size is parametrized.

The encoding format itself is a standard big-endian format. The format uses unsigned 1-byte integers for the scalar
length and unsigned 4-byte integers for counts and key lengths.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 10, length=1)  # writes 0a
>>> encode_int(se, 255, length=1)  # writes ff
>>> encode_int(se, 2, length=4)  # writes 00000002
>>> encode_int(se, 1234, length=4)  # writes 000004d2
>>> bytes(se.finalize()).hex()
'0aff00000002000004d2'

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 256, length=1)
Traceback (most recent call last):
...
ValueError: too big to encode
"""

from storable_writer.serialization import Serializer


def encode_int(serializer: Serializer, number: int, *, length: int) -> None:
    """ Encode an unsigned int using the given byte-length.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=False)
    except OverflowError:
        raise ValueError('too big to encode')
    serializer.write_bytes(data)


def encode_u8(serializer: Serializer, number: int) -> None:
    encode_int(serializer, number, length=1)


def encode_u32(serializer: Serializer, number: int) -> None:
    encode_int(serializer, number, length=4)
