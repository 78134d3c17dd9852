# SPDX-FileCopyrightText: 2025 Frederic Ruget <fred@atlant.is> (GitHub: @douzebis)
#
# SPDX-License-Identifier: MIT

from __future__ import annotations

from cob.auxiliaries import ValueOutOfRangeError, check_base
from cob.constants import ALPHABET, FORMAT_SPECIFIERS, INT_MIN


def format_magnitude(magnitude: int, base: int) -> str:
    """
    Write a non-negative integer in `base`, most significant digit first.

    Raises:
        ValueError: If magnitude is negative or base is out of range
        ValueOutOfRangeError: If magnitude exceeds the 64-bit signed range
    """
    check_base(base)
    if magnitude < 0:
        raise ValueError(f'Magnitude must not be negative, got {magnitude}')
    if magnitude > -INT_MIN:
        raise ValueOutOfRangeError(
            f'{magnitude} does not fit in a signed 64-bit integer'
        )

    digits = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        digits.append(ALPHABET[digit])
        if magnitude == 0:
            break
    digits.reverse()
    return ''.join(digits)


def get_prefix(base: int) -> str:
    return FORMAT_SPECIFIERS.get(base, '')


def format_integer(value: int, base: int, prefix: bool = True) -> str:
    """Render a signed value as `[sign][prefix]DIGITS`."""
    sign = '-' if value < 0 else ''
    specifier = get_prefix(base) if prefix else ''
    return f'{sign}{specifier}{format_magnitude(abs(value), base)}'
