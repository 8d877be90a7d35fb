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

from typing import BinaryIO

from typing_extensions import override

from storable_writer.exceptions import StorableWriteError
from storable_writer.types import Buffer

from .serializer import Serializer


class StreamSerializer(Serializer):
    """Implementation of Serializer that writes directly to a binary stream.

    Any failure of the stream (an `OSError`, or the `ValueError` raised by a closed file) is raised as a
    `StorableWriteError` with the original exception chained. Short writes of raw streams are retried until everything
    is written, a stream that accepts nothing is a failure too.

    >>> import io
    >>> stream = io.BytesIO()
    >>> se = StreamSerializer(stream)
    >>> se.write_bytes(b'\\x05\\x07')
    >>> se.cur_pos()
    2
    >>> stream.getvalue()
    b'\\x05\\x07'
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pos: int = 0

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self.write_bytes(int.to_bytes(data, length=1, byteorder='big'))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        while view:
            try:
                written = self._stream.write(view)
            except (OSError, ValueError) as e:
                raise StorableWriteError(f'write failed at position {self._pos}: {e}') from e
            if written is None:
                # file-like objects that don't report how much was written
                written = len(view)
            elif written == 0:
                raise StorableWriteError(f'stream accepted no bytes at position {self._pos}')
            self._pos += written
            view = view[written:]
