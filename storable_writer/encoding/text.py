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
This module implements the textual form of scalars.

Every scalar travels as text: booleans are `'1'`/`'0'`, integers are base 10 and floats use the shortest sequence of
digits that reads back as the same value for their width (64 bits for `float`, 32 bits for `Float32`).

Floats are written in general notation: plain decimal when the decimal exponent is in the range [-4, 6) and
scientific notation (with at least 2 exponent digits and an explicit exponent sign) otherwise.

>>> format_bool(True), format_bool(False)
('1', '0')
>>> format_int(1234), format_int(-42), format_int(0)
('1234', '-42', '0')
>>> format_float(5.55)
'5.55'
>>> format_float(100000.0), format_float(1e6), format_float(1234567.0)
('100000', '1e+06', '1.234567e+06')
>>> format_float(0.0001), format_float(0.00001), format_float(-1.5e-7)
('0.0001', '1e-05', '-1.5e-07')
>>> format_float(1e100), format_float(0.0), format_float(-0.0)
('1e+100', '0', '-0')
>>> format_float(float('inf')), format_float(float('-inf')), format_float(float('nan'))
('+Inf', '-Inf', 'NaN')

Single precision floats get shorter text than their double precision counterpart:

>>> from storable_writer.types import Float32
>>> format_float(0.1, bits=32), format_float(float(Float32(0.1)))
('0.1', '0.10000000149011612')
>>> format_float(16777216.0, bits=32)
'1.6777216e+07'
"""

import math
import struct
from decimal import Decimal

# scientific notation is used when the exponent is below this
_MIN_PLAIN_EXPONENT = -4
# scientific notation is used when the exponent is at or above this
_MAX_PLAIN_EXPONENT = 6

# enough significant digits to round-trip any 32-bit float
_FLOAT32_MAX_DIGITS = 9


def format_bool(value: bool) -> str:
    return '1' if value else '0'


def format_int(value: int) -> str:
    # int() drops the repr of int subclasses, str() of a subclass would go through its __repr__
    return str(int(value))


def format_float(value: float, *, bits: int = 64) -> str:
    """ Shortest round-trippable text of a float of the given width, in general notation.

    This module's docstring has more details and examples.
    """
    if bits not in (32, 64):
        raise ValueError(f'unsupported float width: {bits}')
    value = float(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '+Inf' if value > 0 else '-Inf'
    sign = '-' if math.copysign(1.0, value) < 0 else ''
    if value == 0:
        return sign + '0'
    digits, point = _shortest_digits(abs(value), bits)
    exponent = point - 1
    if exponent < _MIN_PLAIN_EXPONENT or exponent >= _MAX_PLAIN_EXPONENT:
        return sign + _scientific(digits, exponent)
    return sign + _plain(digits, point)


def _shortest_digits(value: float, bits: int) -> tuple[str, int]:
    """ Decompose a finite positive float into significant digits and the position of the decimal point.

    The result `(digits, point)` means `value == 0.<digits> * 10**point`, `digits` has no trailing zeros.
    """
    text = repr(value) if bits == 64 else _float32_repr(value)
    _, digit_tuple, exponent = Decimal(text).as_tuple()
    assert isinstance(exponent, int)
    digit_list = list(digit_tuple)
    while len(digit_list) > 1 and digit_list[-1] == 0:
        digit_list.pop()
        exponent += 1
    digits = ''.join(map(str, digit_list))
    return digits, len(digits) + exponent


def _to_float32(value: float) -> float:
    number, = struct.unpack('>f', struct.pack('>f', value))
    return number


def _float32_round_trips(candidate: Decimal, value: float) -> bool:
    try:
        return _to_float32(float(candidate)) == value
    except OverflowError:
        # rounded past the largest 32-bit float
        return False


def _float32_repr(value: float) -> str:
    """ Shortest text that reads back as the same 32-bit float.

    Each precision tries the correctly rounded text and its neighbours one unit away in the last digit, since at powers
    of two the rounding interval is wider above the value than below it. The candidate closest to the value wins.
    """
    value = _to_float32(value)
    exact = Decimal(value)
    for precision in range(1, _FLOAT32_MAX_DIGITS + 1):
        _, digit_tuple, exponent = Decimal(f'{value:.{precision - 1}e}').as_tuple()
        assert isinstance(exponent, int)
        mantissa = int(''.join(map(str, digit_tuple)))
        candidates = [Decimal(m).scaleb(exponent) for m in (mantissa, mantissa - 1, mantissa + 1) if m > 0]
        matches = [candidate for candidate in candidates if _float32_round_trips(candidate, value)]
        if matches:
            return str(min(matches, key=lambda candidate: abs(candidate - exact)))
    raise AssertionError(f'no text reads back as {value!r}')


def _scientific(digits: str, exponent: int) -> str:
    mantissa = digits[0]
    if len(digits) > 1:
        mantissa += '.' + digits[1:]
    exponent_sign = '-' if exponent < 0 else '+'
    return f'{mantissa}e{exponent_sign}{abs(exponent):02d}'


def _plain(digits: str, point: int) -> str:
    if point > 0:
        integer = digits[:point].ljust(point, '0')
        fraction = digits[point:]
    else:
        integer = '0'
        fraction = '0' * -point + digits
    if fraction:
        return f'{integer}.{fraction}'
    return integer
