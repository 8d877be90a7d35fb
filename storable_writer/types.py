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

import struct
from typing import Any, Generic, TypeVar, final

from typing_extensions import Buffer

T = TypeVar('T')

__all__ = [
    'Buffer',
    'Float32',
    'Ref',
    'Uint',
]


@final
class Ref(Generic[T]):
    """A reference to another value.

    Python values have no pointers, so this wrapper marks the places where the encoded stream must carry a reference:
    the target is written prefixed by a single `SX_REF` tag. References can be chained, each level writes one tag.

    >>> Ref('Kevin')
    Ref('Kevin')
    >>> Ref(1) == Ref(1)
    True
    """

    __slots__ = ('target',)

    target: T

    def __init__(self, target: T) -> None:
        self.target = target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return bool(self.target == other.target)

    def __hash__(self) -> int:
        return hash((Ref, self.target))

    def __repr__(self) -> str:
        return f'Ref({self.target!r})'


class Uint(int):
    """An integer that is encoded as unsigned, negative values are rejected.

    >>> Uint(42)
    Uint(42)
    >>> Uint(-1)
    Traceback (most recent call last):
    ...
    ValueError: unsigned integer cannot be negative: -1
    """

    def __new__(cls, value: Any = 0) -> 'Uint':
        number = int(value)
        if number < 0:
            raise ValueError(f'unsigned integer cannot be negative: {number}')
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f'Uint({int(self)})'


class Float32(float):
    """A float with single precision, its value is rounded to the nearest 32-bit float on creation.

    The text form of a `Float32` is the shortest one that reads back as the same 32-bit float, which is usually
    shorter than what the equivalent 64-bit float would need.

    >>> Float32(0.1) == 0.1
    False
    >>> Float32(0.5) == 0.5
    True
    """

    def __new__(cls, value: Any = 0.0) -> 'Float32':
        try:
            data = struct.pack('>f', float(value))
        except OverflowError:
            raise ValueError(f'too big for a 32-bit float: {value!r}')
        number, = struct.unpack('>f', data)
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f'Float32({float(self)!r})'
