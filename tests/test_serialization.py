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

import io

import pytest

from storable_writer import MaxBytesExceededError
from storable_writer.serialization import BytesSerializer, Serializer, StreamSerializer
from storable_writer.serialization.adapters import GenericSerializerAdapter, MaxBytesSerializer


def test_bytes_serializer():
    se = Serializer.build_bytes_serializer()
    assert isinstance(se, BytesSerializer)
    se.write_byte(0x05)
    se.write_bytes(b'\x07')
    se.write_bytes(memoryview(b'\x00\x01'))
    assert se.cur_pos() == 4
    assert bytes(se.finalize()).hex() == '05070001'


def test_bytes_serializer_rejects_out_of_range_byte():
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        se.write_byte(256)


def test_stream_serializer():
    stream = io.BytesIO()
    se = Serializer.build_stream_serializer(stream)
    assert isinstance(se, StreamSerializer)
    se.write_byte(0x05)
    se.write_bytes(bytearray(b'\x07\x0a'))
    assert se.cur_pos() == 3
    assert stream.getvalue() == b'\x05\x07\x0a'


def test_stream_serializer_cannot_finalize():
    se = Serializer.build_stream_serializer(io.BytesIO())
    with pytest.raises(TypeError):
        se.finalize()


def test_optional_max_bytes():
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
    wrapped = se.with_optional_max_bytes(3)
    assert isinstance(wrapped, MaxBytesSerializer)
    assert isinstance(wrapped, GenericSerializerAdapter)


def test_max_bytes_serializer():
    se = Serializer.build_bytes_serializer().with_max_bytes(3)
    se.write_byte(0x01)
    se.write_bytes(b'\x02\x03')
    assert se.cur_pos() == 3
    with pytest.raises(MaxBytesExceededError):
        se.write_byte(0x04)
    assert bytes(se.finalize()) == b'\x01\x02\x03'


def test_max_bytes_serializer_rejects_whole_write():
    inner = Serializer.build_bytes_serializer()
    se = inner.with_max_bytes(2)
    with pytest.raises(MaxBytesExceededError):
        se.write_bytes(b'abc')
    assert inner.cur_pos() == 0


def test_bytes_left():
    se = Serializer.build_bytes_serializer()
    assert se.bytes_left() is None
    limited = se.with_max_bytes(5)
    limited.write_bytes(b'ab')
    assert limited.bytes_left() == 3
    nested = limited.with_max_bytes(10)
    assert nested.bytes_left() == 3
    assert nested.with_max_bytes(1).bytes_left() == 1
