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
Encoder of Perl Storable streams.

A stream is the `0x05 0x07` header followed by one value: references, records (written as hashes), sequences (written
as arrays) and scalars (written as text). `marshal` returns the stream as bytes, `dump` and `Encoder` write it to a
binary sink.
"""

from storable_writer.conf import StorableSettings, get_global_settings
from storable_writer.encoder import Encoder, ValueEncoder, dump, encode_stream, encode_value, marshal
from storable_writer.exceptions import (
    CountTooLargeError,
    MaxBytesExceededError,
    ScalarTooLongError,
    SerializationError,
    StorableError,
    StorableWriteError,
    TooLongError,
    UnsupportedShapeError,
)
from storable_writer.log import LoggingOutput, setup_logging
from storable_writer.types import Float32, Ref, Uint
from storable_writer.version import __version__

__all__ = [
    'CountTooLargeError',
    'Encoder',
    'Float32',
    'LoggingOutput',
    'MaxBytesExceededError',
    'Ref',
    'ScalarTooLongError',
    'SerializationError',
    'StorableError',
    'StorableSettings',
    'StorableWriteError',
    'TooLongError',
    'Uint',
    'UnsupportedShapeError',
    'ValueEncoder',
    '__version__',
    'dump',
    'encode_stream',
    'encode_value',
    'get_global_settings',
    'marshal',
    'setup_logging',
]
