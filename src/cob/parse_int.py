# SPDX-FileCopyrightText: 2025 Frederic Ruget <fred@atlant.is> (GitHub: @douzebis)
#
# SPDX-License-Identifier: MIT

from __future__ import annotations

from dataclasses import dataclass

import click

from cob.auxiliaries import ValueOutOfRangeError, check_base
from cob.constants import (
    DIGIT_VALUES,
    INT_MAX,
    INT_MIN,
    SOURCE_PREFIX_MARKERS,
    WHITESPACE,
)


@dataclass(frozen=True)
class Scan:
    """Outcome of reading one numeral.

    `digits` is the span that was interpreted, `rest` whatever trailed it.
    `has_digits` is False when nothing numeric was found at all, which is the
    only way to tell garbage apart from a genuine zero.
    """
    value: int
    digits: str
    rest: str
    negative: bool = False
    has_digits: bool = False


def digit_value(char: str, base: int) -> int | None:
    """Return the value of `char` in `base`, or None if it is not a digit."""
    value = DIGIT_VALUES.get(char)
    if value is None or value >= base:
        return None
    return value


def scan_integer(text: str, base: int) -> Scan:
    """
    Read a signed numeral written in `base` from the start of `text`.

    Leading whitespace, one sign character and leading zeros are skipped,
    then a 'b' (base 2) or 'x' (base 16) marker. Scanning stops at the first
    character that is not a digit of `base`.

    Args:
        text: Input string
        base: Source base, 2-72

    Returns:
        Scan record

    Raises:
        ValueError: If base is out of range
        ValueOutOfRangeError: If the numeral does not fit in 64 signed bits
    """
    check_base(base)
    pos, end = 0, len(text)

    while pos < end and text[pos] in WHITESPACE:
        pos += 1

    negative = False
    if pos < end and text[pos] in '+-':
        negative = text[pos] == '-'
        pos += 1

    zeros_from = pos
    while pos < end and text[pos] == '0':
        pos += 1
    has_zeros = pos > zeros_from

    marker = SOURCE_PREFIX_MARKERS.get(base)
    if marker is not None and text[pos:pos + 1] == marker:
        pos += 1

    digits_from = pos
    while pos < end and digit_value(text[pos], base) is not None:
        pos += 1
    digits = text[digits_from:pos]

    limit = -INT_MIN if negative else INT_MAX
    magnitude = 0
    for char in digits:
        magnitude = magnitude * base + DIGIT_VALUES[char]
        if magnitude > limit:
            raise ValueOutOfRangeError(
                f'{text.strip()!r} does not fit in a signed 64-bit integer'
            )

    return Scan(
        value=-magnitude if negative else magnitude,
        digits=digits,
        rest=text[pos:],
        negative=negative,
        has_digits=has_zeros or bool(digits),
    )


def parse_integer(text: str, base: int) -> int:
    """Convert `text` from `base` to an int; 0 when no digits are found."""
    return scan_integer(text, base).value


def parse_base(ctx, param, value):
    """Click callback turning a --base-* option into a checked int."""
    # Plain ASCII decimal digits only
    if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
        raise click.BadParameter(f"Invalid number: {value!r}")
    base = int(value, 10)
    try:
        return check_base(base)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
