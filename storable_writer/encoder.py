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
The value dispatch and the public entry points of the encoder.

A stream is the 2-byte header followed by exactly one value. Every value goes through `ValueEncoder`, which asks
`storable_writer.inspection` for the shape of the value and hands it to the matching encoder. Compound encoders call
back into the same `ValueEncoder` for the values they contain, so nesting has no special case.

>>> marshal('Kevin', settings=StorableSettings()).hex()
'05070a054b6576696e'
>>> marshal(['hey', 'there'], settings=StorableSettings()).hex()
'050702000000020a036865790a057468657265'
>>> from storable_writer.types import Ref
>>> marshal(Ref(1234), settings=StorableSettings()).hex()
'0507040a0431323334'
"""

from typing import Any, BinaryIO, Optional

from typing_extensions import assert_never

from storable_writer.compound_encoding.array import encode_array
from storable_writer.compound_encoding.hash import encode_hash
from storable_writer.compound_encoding.ref import encode_ref
from storable_writer.conf.get_settings import get_global_settings
from storable_writer.conf.settings import StorableSettings
from storable_writer.encoding.header import encode_header
from storable_writer.encoding.scalar import encode_bool, encode_float, encode_int, encode_str, encode_uint
from storable_writer.exceptions import StorableError, StorableWriteError, UnsupportedShapeError
from storable_writer.inspection import Shape, inspect_shape, iter_record_entries
from storable_writer.log import get_logger
from storable_writer.serialization import Serializer

logger = get_logger(__name__)


class ValueEncoder:
    """Encodes one value (and everything reachable from it) according to its shape.

    Instances are callables with the `Encoder` protocol of `storable_writer.compound_encoding`, so they are passed
    as-is to compound encoders.
    """

    def __init__(self, settings: StorableSettings) -> None:
        self._settings = settings
        self.log = logger.new()

    def __call__(self, serializer: Serializer, value: Any, /) -> None:
        shape = inspect_shape(value)
        match shape:
            case Shape.REF:
                encode_ref(serializer, value.target, self)
            case Shape.RECORD:
                entries = iter_record_entries(value, directive_key=self._settings.DIRECTIVE_KEY)
                encode_hash(serializer, entries, self)
            case Shape.SEQUENCE:
                encode_array(serializer, value, self)
            case Shape.BOOL:
                encode_bool(serializer, value)
            case Shape.STRING:
                encode_str(serializer, value)
            case Shape.INT:
                encode_int(serializer, value)
            case Shape.UINT:
                encode_uint(serializer, value)
            case Shape.FLOAT32:
                encode_float(serializer, value, bits=32)
            case Shape.FLOAT64:
                encode_float(serializer, value, bits=64)
            case Shape.UNSUPPORTED:
                self._encode_unsupported(value)
            case _:
                assert_never(shape)

    def _encode_unsupported(self, value: Any) -> None:
        type_name = type(value).__name__
        match self._settings.UNSUPPORTED_SHAPE:
            case 'raise':
                raise UnsupportedShapeError(f'cannot encode value of type {type_name}')
            case 'skip':
                self.log.warning('skipping value with unsupported shape', type=type_name)
            case _:
                assert_never(self._settings.UNSUPPORTED_SHAPE)


def _resolve_settings(settings: Optional[StorableSettings]) -> StorableSettings:
    return settings if settings is not None else get_global_settings()


def encode_value(serializer: Serializer, value: Any, settings: Optional[StorableSettings] = None) -> None:
    """Encode a single value, without header, to any serializer."""
    ValueEncoder(_resolve_settings(settings))(serializer, value)


def encode_stream(serializer: Serializer, value: Any, settings: Optional[StorableSettings] = None) -> None:
    """Encode a full stream (header and value) to any serializer.

    The header is written before the value is looked at, so it is there even when the value turns out to be invalid.
    """
    settings = _resolve_settings(settings)
    target = serializer.with_optional_max_bytes(settings.MAX_OUTPUT_BYTES)
    encode_header(target)
    ValueEncoder(settings)(target, value)


def marshal(value: Any, *, settings: Optional[StorableSettings] = None) -> bytes:
    """Encode a value and return the resulting stream.

    Any error aborts the whole encoding and is raised as-is, no partial result is returned.
    """
    log = logger.new()
    log.debug('encoding value', type=type(value).__name__)
    serializer = Serializer.build_bytes_serializer()
    encode_stream(serializer, value, settings)
    result = bytes(serializer.finalize())
    log.debug('value encoded', size=len(result))
    return result


class Encoder:
    """Writes encoded streams to a binary sink, one stream per call to `encode`.

    Each stream is fully encoded in memory before the sink sees any byte of it, so a value that cannot be encoded
    leaves the sink untouched. A failed write is kept in `err` and the encoder refuses to be used again, because the
    sink now ends with a truncated stream.

    >>> import io
    >>> sink = io.BytesIO()
    >>> encoder = Encoder(sink, settings=StorableSettings())
    >>> encoder.encode(False)
    >>> sink.getvalue().hex()
    '05070a0130'
    """

    err: Optional[StorableError]

    def __init__(self, stream: BinaryIO, *, settings: Optional[StorableSettings] = None) -> None:
        self._serializer = Serializer.build_stream_serializer(stream)
        self._settings = settings
        self.err = None
        self.log = logger.new()

    def encode(self, value: Any) -> None:
        if self.err is not None:
            raise StorableWriteError('encoder cannot be used after a failed write') from self.err
        data = marshal(value, settings=self._settings)
        try:
            self._serializer.write_bytes(data)
        except StorableWriteError as e:
            self.log.error('failed to write stream', size=len(data), error=str(e))
            self.err = e
            raise
        self.log.debug('stream written', size=len(data), pos=self._serializer.cur_pos())


def dump(value: Any, stream: BinaryIO, *, settings: Optional[StorableSettings] = None) -> None:
    """Encode a value and write the resulting stream to a binary sink."""
    Encoder(stream, settings=settings).encode(value)


__all__ = [
    'Encoder',
    'ValueEncoder',
    'dump',
    'encode_stream',
    'encode_value',
    'marshal',
]
