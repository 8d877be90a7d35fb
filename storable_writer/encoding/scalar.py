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
This module implements scalar encoding: a `SX_SCALAR` tag, the length of the payload in 1 byte and the payload, which
is the text form of the value.

Layout: [0x0a][N: u8][text_0]...[text_N-1]

>>> se = Serializer.build_bytes_serializer()
>>> encode_str(se, 'Kevin')  # writes 0a 05 4b6576696e
>>> encode_int(se, 1234)  # writes 0a 04 31323334
>>> encode_float(se, 5.55)  # writes 0a 04 352e3535
>>> encode_bool(se, False)  # writes 0a 01 30
>>> bytes(se.finalize()).hex()
'0a054b6576696e0a04313233340a04352e35350a0130'

The text of strings is their UTF-8 encoding, so the length counts bytes and not characters:

>>> se = Serializer.build_bytes_serializer()
>>> encode_str(se, 'π')
>>> bytes(se.finalize()).hex()
'0a02cf80'

The length prefix is a single byte, longer texts cannot be represented:

>>> se = Serializer.build_bytes_serializer()
>>> encode_str(se, 'x' * 256)
Traceback (most recent call last):
...
storable_writer.exceptions.ScalarTooLongError: scalar text is 256 bytes long, the limit is 255
"""

from storable_writer.consts import MAX_SCALAR_LENGTH, SX_SCALAR
from storable_writer.exceptions import ScalarTooLongError
from storable_writer.serialization import Serializer

from .int import encode_u8
from .text import format_bool, format_float, format_int


def encode_scalar(serializer: Serializer, text: bytes) -> None:
    """ Encodes raw text with a scalar tag and a 1-byte length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(text, bytes)
    if len(text) > MAX_SCALAR_LENGTH:
        raise ScalarTooLongError(f'scalar text is {len(text)} bytes long, the limit is {MAX_SCALAR_LENGTH}')
    serializer.write_byte(SX_SCALAR)
    encode_u8(serializer, len(text))
    serializer.write_bytes(text)


def encode_bool(serializer: Serializer, value: bool) -> None:
    assert isinstance(value, bool)
    encode_scalar(serializer, format_bool(value).encode('ascii'))


def encode_str(serializer: Serializer, value: str) -> None:
    assert isinstance(value, str)
    encode_scalar(serializer, value.encode('utf-8'))


def encode_int(serializer: Serializer, value: int) -> None:
    """ Encodes a signed integer in base 10.
    """
    assert isinstance(value, int) and not isinstance(value, bool)
    encode_scalar(serializer, format_int(value).encode('ascii'))


def encode_uint(serializer: Serializer, value: int) -> None:
    """ Encodes an unsigned integer in base 10, negative values are rejected.
    """
    assert isinstance(value, int) and not isinstance(value, bool)
    if value < 0:
        raise ValueError(f'cannot encode value <0 as unsigned: {value}')
    encode_scalar(serializer, format_int(value).encode('ascii'))


def encode_float(serializer: Serializer, value: float, *, bits: int = 64) -> None:
    """ Encodes a float with the shortest text that round-trips at the given width (32 or 64).
    """
    assert isinstance(value, float)
    encode_scalar(serializer, format_float(value, bits=bits).encode('ascii'))
