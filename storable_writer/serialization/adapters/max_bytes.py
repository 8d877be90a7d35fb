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

from typing import Optional, TypeVar

from typing_extensions import override

from storable_writer.exceptions import MaxBytesExceededError
from storable_writer.serialization.serializer import Serializer
from storable_writer.types import Buffer

from .generic_adapter import GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """Adapter that fails with `MaxBytesExceededError` as soon as more than `max_bytes` would be written.

    The check happens before forwarding, so the inner serializer never receives the write that crosses the limit.

    >>> se = Serializer.build_bytes_serializer().with_max_bytes(2)
    >>> se.write_bytes(b'ab')
    >>> se.write_byte(0x63)
    Traceback (most recent call last):
    ...
    storable_writer.exceptions.MaxBytesExceededError: limit of 2 bytes exceeded
    """

    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._max_bytes = max_bytes
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, write_size: int) -> None:
        self._bytes_left -= write_size
        if self._bytes_left < 0:
            raise MaxBytesExceededError(f'limit of {self._max_bytes} bytes exceeded')

    @override
    def bytes_left(self) -> Optional[int]:
        inner_left = super().bytes_left()
        own_left = max(self._bytes_left, 0)
        return own_left if inner_left is None else min(own_left, inner_left)

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(data_view.nbytes)
        super().write_bytes(data_view)
