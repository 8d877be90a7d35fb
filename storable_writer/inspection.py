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
Structural inspection of Python values.

The encoder never looks at concrete types by itself, it asks this module for the shape of a value and, for records,
for the fields that should be written. The set of shapes is closed:

- `Shape.REF`: a `Ref`, the target is reached through `Ref.target`;
- `Shape.RECORD`: a dataclass instance, a pydantic model instance or a named tuple, fields come in declaration order;
- `Shape.SEQUENCE`: a list, a tuple, `bytes` or `bytearray`;
- one shape per scalar kind: `BOOL`, `STRING`, `INT`, `UINT`, `FLOAT32`, `FLOAT64`;
- `Shape.UNSUPPORTED`: everything else (dicts, sets, None, callables, ...).

Fields can carry an encoding directive, a comma separated string stored under a metadata key (`'storable'` by
default). The first option is the only one that is interpreted and `omitempty` is the only recognized value:

>>> from dataclasses import dataclass, field
>>> @dataclass
... class Person:
...     Name: str
...     Omit: str = field(default='', metadata={'storable': 'omitempty'})
...     _cache: str = ''
>>> list(iter_record_entries(Person('Kevin')))
[('Name', 'Kevin')]
>>> list(iter_record_entries(Person('Kevin', Omit='x')))
[('Name', 'Kevin'), ('Omit', 'x')]
"""

import dataclasses
from collections.abc import Iterator, Sized
from enum import Enum, auto
from typing import Any, NamedTuple, Optional

from pydantic import BaseModel

from storable_writer.types import Float32, Ref, Uint

DEFAULT_DIRECTIVE_KEY = 'storable'

OMIT_EMPTY = 'omitempty'


class Shape(Enum):
    REF = auto()
    RECORD = auto()
    SEQUENCE = auto()
    BOOL = auto()
    STRING = auto()
    INT = auto()
    UINT = auto()
    FLOAT32 = auto()
    FLOAT64 = auto()
    UNSUPPORTED = auto()


class RecordField(NamedTuple):
    name: str
    directive: Optional[str]


def inspect_shape(value: Any) -> Shape:
    """Classify a value into one of the shapes the encoder knows.

    The order of the checks matters: references and records come first because named tuples are tuples, `bool` is
    checked before `int` because it is a subclass of it, and the sized wrappers before their base types.

    >>> inspect_shape(Ref(1)), inspect_shape(True), inspect_shape(1), inspect_shape(Uint(1))
    (<Shape.REF: 1>, <Shape.BOOL: 4>, <Shape.INT: 6>, <Shape.UINT: 7>)
    >>> inspect_shape(['a']), inspect_shape({'a': 1}), inspect_shape(None)
    (<Shape.SEQUENCE: 3>, <Shape.UNSUPPORTED: 10>, <Shape.UNSUPPORTED: 10>)
    """
    if isinstance(value, Ref):
        return Shape.REF
    if is_record(value):
        return Shape.RECORD
    if isinstance(value, bool):
        return Shape.BOOL
    if isinstance(value, str):
        return Shape.STRING
    if isinstance(value, Uint):
        return Shape.UINT
    if isinstance(value, int):
        return Shape.INT
    if isinstance(value, Float32):
        return Shape.FLOAT32
    if isinstance(value, float):
        return Shape.FLOAT64
    if isinstance(value, (list, tuple, bytes, bytearray)):
        return Shape.SEQUENCE
    return Shape.UNSUPPORTED


def is_record(value: Any) -> bool:
    if isinstance(value, type):
        # classes are not values
        return False
    if dataclasses.is_dataclass(value):
        return True
    if isinstance(value, BaseModel):
        return True
    return isinstance(value, tuple) and hasattr(type(value), '_fields')


def is_serializable_field(name: str) -> bool:
    """Fields with a leading underscore are private to the Python object and are never written."""
    return not name.startswith('_')


def iter_record_fields(record: Any, *, directive_key: str = DEFAULT_DIRECTIVE_KEY) -> Iterator[tuple[RecordField, Any]]:
    """Iterate over the serializable fields of a record and their values, in declaration order."""
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        for dc_field in dataclasses.fields(record):
            if not is_serializable_field(dc_field.name):
                continue
            directive = dc_field.metadata.get(directive_key)
            yield RecordField(dc_field.name, directive), getattr(record, dc_field.name)
    elif isinstance(record, BaseModel):
        for name, field_info in type(record).model_fields.items():
            if not is_serializable_field(name):
                continue
            extra = field_info.json_schema_extra
            directive = extra.get(directive_key) if isinstance(extra, dict) else None
            yield RecordField(name, directive if isinstance(directive, str) else None), getattr(record, name)
    elif isinstance(record, tuple) and hasattr(type(record), '_fields'):
        for name, value in zip(type(record)._fields, record):
            if not is_serializable_field(name):
                continue
            yield RecordField(name, None), value
    else:
        raise TypeError(f'not a record: {type(record).__name__}')


def parse_directive(directive: Optional[str]) -> list[str]:
    """Split a directive in its options.

    >>> parse_directive('omitempty')
    ['omitempty']
    >>> parse_directive('omitempty,other')
    ['omitempty', 'other']
    >>> parse_directive(None)
    []
    """
    if not directive:
        return []
    return [option.strip() for option in directive.split(',')]


def is_empty(value: Any) -> bool:
    """Only values that have a length can be empty."""
    return isinstance(value, Sized) and len(value) == 0


def is_omitted(field: RecordField, value: Any) -> bool:
    options = parse_directive(field.directive)
    return bool(options) and options[0] == OMIT_EMPTY and is_empty(value)


def iter_record_entries(record: Any, *, directive_key: str = DEFAULT_DIRECTIVE_KEY) -> Iterator[tuple[str, Any]]:
    """Iterate over the `(name, value)` entries that should be written for a record.

    This is lazy: the omission of each field is decided when the iteration reaches it.
    """
    for field, value in iter_record_fields(record, directive_key=directive_key):
        if is_omitted(field, value):
            continue
        yield field.name, value
