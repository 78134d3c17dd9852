# SPDX-FileCopyrightText: 2025 Frederic Ruget <fred@atlant.is> (GitHub: @douzebis)
#
# SPDX-License-Identifier: MIT

"""
Orchestrator module for base conversions.

This module contains the conversion logic driven by the CLI, kept apart from
click so that it can be exercised directly by tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from cob.auxiliaries import NotANumberError, check_base
from cob.constants import DEFAULT_BASE_DEST, DEFAULT_BASE_SRC
from cob.format_int import format_integer, format_magnitude
from cob.parse_int import digit_value, scan_integer


@dataclass(frozen=True)
class Conversion:
    argument: str
    value: int
    base_src: int
    base_dest: int
    prefix: bool = True

    @property
    def digits(self) -> str:
        return format_magnitude(abs(self.value), self.base_dest)

    @property
    def text(self) -> str:
        return format_integer(self.value, self.base_dest, prefix=self.prefix)

    def dict(self) -> dict:
        return {
            'argument': self.argument,
            'value': self.value,
            'base_src': self.base_src,
            'base_dest': self.base_dest,
            'output': self.text,
        }


def convert_argument(
    argument: str,
    base_src: int = DEFAULT_BASE_SRC,
    base_dest: int = DEFAULT_BASE_DEST,
    prefix: bool = True,
) -> Conversion:
    """
    Convert one command-line argument from base_src to base_dest.

    Args:
        argument: Numeral as typed by the user
        base_src: Base the argument is written in
        base_dest: Base to write the result in
        prefix: Whether to add the 0b/0/0x format specifier

    Returns:
        Conversion record

    Raises:
        NotANumberError: If the argument holds no digit of base_src
        ValueOutOfRangeError: If the value does not fit in 64 signed bits
        ValueError: If either base is out of range
    """
    check_base(base_dest)
    scan = scan_integer(argument, base_src)
    if not scan.has_digits:
        raise NotANumberError(f'not a valid base-{base_src} integer')

    return Conversion(
        argument=argument,
        value=scan.value,
        base_src=base_src,
        base_dest=base_dest,
        prefix=prefix,
    )


def looks_like_option(argument: str, base_src: int) -> bool:
    """Tell an unknown option apart from a negative numeral."""
    if len(argument) < 2 or not argument.startswith('-'):
        return False
    return digit_value(argument[1], base_src) is None
