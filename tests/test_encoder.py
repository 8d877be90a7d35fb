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
from dataclasses import dataclass
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from storable_writer import (
    Encoder,
    MaxBytesExceededError,
    StorableSettings,
    StorableWriteError,
    UnsupportedShapeError,
    dump,
    encode_stream,
    encode_value,
    marshal,
)
from storable_writer.compound_encoding.hash import encode_hash
from storable_writer.conf.get_settings import CONFIG_YAML_ENV_VAR
from storable_writer.encoding.scalar import encode_str
from storable_writer.serialization import Serializer

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
SETTINGS = StorableSettings()
SKIP_SETTINGS = StorableSettings(UNSUPPORTED_SHAPE='skip')


@pytest.mark.parametrize('value', [None, {'a': 1}, {1, 2}, object(), 1j, print])
def test_unsupported_shape_raises(value):
    with pytest.raises(UnsupportedShapeError) as exc_info:
        marshal(value, settings=SETTINGS)
    assert type(value).__name__ in str(exc_info.value)


def test_unsupported_shape_inside_array_raises():
    with pytest.raises(UnsupportedShapeError):
        marshal(['a', None], settings=SETTINGS)


def test_unsupported_shape_skip_writes_nothing():
    assert marshal(None, settings=SKIP_SETTINGS).hex() == '0507'


def test_unsupported_shape_skip_keeps_the_count():
    data = marshal([None, 'a'], settings=SKIP_SETTINGS)
    assert data.hex() == '0507' + '02' + '00000002' + '0a0161'


def test_unsupported_shape_skip_logs_a_warning():
    with capture_logs() as log_list:
        marshal([{'a': 1}], settings=SKIP_SETTINGS)
    skipped = [entry for entry in log_list if entry['event'] == 'skipping value with unsupported shape']
    assert len(skipped) == 1
    assert skipped[0]['type'] == 'dict'
    assert skipped[0]['log_level'] in ('warn', 'warning')


def test_max_output_bytes():
    # the stream of 'Kevin' is 9 bytes long
    assert len(marshal('Kevin', settings=StorableSettings(MAX_OUTPUT_BYTES=9))) == 9
    with pytest.raises(MaxBytesExceededError):
        marshal('Kevin', settings=StorableSettings(MAX_OUTPUT_BYTES=8))


def test_max_output_bytes_counts_nested_values():
    with pytest.raises(MaxBytesExceededError):
        marshal([['a'] * 10], settings=StorableSettings(MAX_OUTPUT_BYTES=20))


def test_max_output_bytes_stops_hash_entries_early():
    consumed = []

    def entries():
        for i in range(1000):
            consumed.append(i)
            yield 'k', 'v'

    # each entry is 8 bytes, 3 of them fit in what is left after the tag and the count
    se = Serializer.build_bytes_serializer().with_max_bytes(30)
    with pytest.raises(MaxBytesExceededError):
        encode_hash(se, entries(), encode_str)
    assert len(consumed) == 4


def test_max_output_bytes_limits_records():
    @dataclass
    class Record:
        Items: list

    value = Record(['a' * 200] * 1000)
    with pytest.raises(MaxBytesExceededError):
        marshal(value, settings=StorableSettings(MAX_OUTPUT_BYTES=1000))
    assert len(marshal(Record(['a']), settings=StorableSettings(MAX_OUTPUT_BYTES=24))) == 24


def test_encode_value_writes_no_header():
    se = Serializer.build_bytes_serializer()
    encode_value(se, 'Kevin', SETTINGS)
    assert bytes(se.finalize()).hex() == '0a054b6576696e'


def test_encode_stream_to_stream_serializer():
    stream = io.BytesIO()
    se = Serializer.build_stream_serializer(stream)
    encode_stream(se, ['hey', 'there'], SETTINGS)
    assert stream.getvalue().hex() == '050702000000020a036865790a057468657265'
    assert se.cur_pos() == len(stream.getvalue())


def test_dump():
    stream = io.BytesIO()
    dump(1234, stream, settings=SETTINGS)
    assert stream.getvalue() == marshal(1234, settings=SETTINGS)


def test_encoder_writes_one_stream_per_call():
    stream = io.BytesIO()
    encoder = Encoder(stream, settings=SETTINGS)
    encoder.encode('Kevin')
    encoder.encode(False)
    assert stream.getvalue().hex() == '05070a054b6576696e' + '05070a0130'
    assert encoder.err is None


def test_encoder_leaves_sink_untouched_on_invalid_value():
    stream = io.BytesIO()
    encoder = Encoder(stream, settings=SETTINGS)
    with pytest.raises(UnsupportedShapeError):
        encoder.encode(['a', None])
    assert stream.getvalue() == b''
    assert encoder.err is None
    encoder.encode('a')
    assert stream.getvalue().hex() == '05070a0161'


class _FailingStream(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        raise OSError('disk full')


class _SlowStream(io.RawIOBase):
    def __init__(self) -> None:
        self.received = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        chunk = bytes(data[:2])
        self.received.extend(chunk)
        return len(chunk)


class _StuckStream(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        return 0


def test_encoder_sink_failure():
    encoder = Encoder(_FailingStream(), settings=SETTINGS)
    with pytest.raises(StorableWriteError) as exc_info:
        encoder.encode('Kevin')
    assert isinstance(exc_info.value.__cause__, OSError)
    assert encoder.err is exc_info.value


def test_encoder_refuses_to_write_after_failure():
    encoder = Encoder(_FailingStream(), settings=SETTINGS)
    with pytest.raises(StorableWriteError):
        encoder.encode('Kevin')
    with pytest.raises(StorableWriteError):
        encoder.encode('Kevin')


def test_encoder_retries_short_writes():
    stream = _SlowStream()
    Encoder(stream, settings=SETTINGS).encode(['hey', 'there'])
    assert bytes(stream.received).hex() == '050702000000020a036865790a057468657265'


def test_encoder_stream_accepting_nothing():
    encoder = Encoder(_StuckStream(), settings=SETTINGS)
    with pytest.raises(StorableWriteError):
        encoder.encode('Kevin')
    assert encoder.err is not None


def test_encoder_closed_stream():
    stream = io.BytesIO()
    stream.close()
    with pytest.raises(StorableWriteError) as exc_info:
        dump('Kevin', stream, settings=SETTINGS)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_global_settings_are_used_by_default(reset_global_settings):
    with pytest.raises(UnsupportedShapeError):
        marshal([None])


def test_global_settings_from_env_var(reset_global_settings, monkeypatch):
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(FIXTURES_DIR / 'skip_unsupported.yml'))
    assert marshal([None]).hex() == '0507' + '02' + '00000001'
