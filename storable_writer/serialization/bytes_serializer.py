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

from typing import Optional

from typing_extensions import override

from storable_writer.types import Buffer

from .serializer import Serializer


class BytesSerializer(Serializer):
    """Serializer that appends everything to a single in-memory buffer.

    >>> se = BytesSerializer()
    >>> se.write_byte(0x05)
    >>> se.write_bytes(b'\\x07')
    >>> se.cur_pos()
    2
    >>> bytes(se.finalize())
    b'\\x05\\x07'
    >>> se.cur_pos()
    Traceback (most recent call last):
    ...
    TypeError: serializer was already finalized
    """

    def __init__(self) -> None:
        self._buffer: Optional[bytearray] = bytearray()

    def _get_buffer(self) -> bytearray:
        if self._buffer is None:
            raise TypeError('serializer was already finalized')
        return self._buffer

    @override
    def finalize(self) -> memoryview:
        buffer = self._get_buffer()
        self._buffer = None
        return memoryview(buffer)

    @override
    def cur_pos(self) -> int:
        return len(self._get_buffer())

    @override
    def write_byte(self, data: int) -> None:
        # bytearray.append checks for correct range
        self._get_buffer().append(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        self._get_buffer().extend(memoryview(data))
