# SPDX-FileCopyrightText: 2025 Frederic Ruget <fred@atlant.is> (GitHub: @douzebis)
#
# SPDX-License-Identifier: MIT

from __future__ import annotations
import sys

from cob.constants import MAX_BASE, MIN_BASE, PROGRAM_NAME


class ValueOutOfRangeError(ValueError):
    pass


class NotANumberError(ValueError):
    pass


def check_base(base: int) -> int:
    """
    Make sure a base lies within the supported range.

    Args:
        base: Radix to check

    Returns:
        The base, unchanged

    Raises:
        ValueError: If base is outside [MIN_BASE, MAX_BASE]
    """
    if base > MAX_BASE:
        raise ValueError(f'base must be less than or equal to {MAX_BASE}')
    if base < MIN_BASE:
        raise ValueError(f'base must be greater than or equal to {MIN_BASE}')
    return base


def warn(message: str, program_name: str = PROGRAM_NAME) -> None:
    print(f'{program_name}: {message}', file=sys.stderr)


def print_debug(enabled: bool, message: str) -> None:
    if enabled:
        print(f'[DEBUG] {message}', file=sys.stderr)
