# SPDX-FileCopyrightText: 2025 Frederic Ruget <fred@atlant.is> (GitHub: @douzebis)
#
# SPDX-License-Identifier: MIT

"""
Regression tests for reading numerals in bases 2 to 72.
"""

from __future__ import annotations

import click
import pytest

from cob.auxiliaries import ValueOutOfRangeError
from cob.constants import INT_MAX, INT_MIN
from cob.parse_int import digit_value, parse_base, parse_integer, scan_integer


def test_signs() -> None:
    """A single leading sign is honored."""
    assert parse_integer("42", 10) == 42
    assert parse_integer("+42", 10) == 42
    assert parse_integer("-42", 10) == -42
    assert parse_integer("  \t-42", 10) == -42
    assert parse_integer("--42", 10) == 0


def test_truncation_at_first_invalid_digit() -> None:
    """Scanning stops at the first character that is not a digit."""
    scan = scan_integer("FF", 10)
    assert scan.value == 0
    assert scan.digits == ""
    assert scan.rest == "FF"
    assert not scan.has_digits

    scan = scan_integer("12FF", 10)
    assert scan.value == 12
    assert scan.digits == "12"
    assert scan.rest == "FF"
    assert scan.has_digits

    assert parse_integer("19", 8) == 1
    assert parse_integer("1.5", 10) == 1


def test_zero_is_not_garbage() -> None:
    """Leading zeros count as digits, so a genuine zero is recognized."""
    for text in ("0", "-0", "000", "+0"):
        scan = scan_integer(text, 10)
        assert scan.value == 0
        assert scan.has_digits
    assert not scan_integer("", 10).has_digits
    assert not scan_integer("   ", 10).has_digits


def test_source_prefix_markers() -> None:
    """'b' is skipped in base 2 and 'x' in base 16, case-sensitively."""
    assert parse_integer("0b101", 2) == 5
    assert parse_integer("-0b101", 2) == -5
    assert parse_integer("0xFF", 16) == 255
    assert parse_integer("0X1F", 16) == 0
    assert parse_integer("0xff", 16) == 0
    assert parse_integer("0x10", 10) == 0
    assert parse_integer("007", 8) == 7


def test_extended_alphabet() -> None:
    """Lower case letters and symbols are digits in large bases."""
    assert parse_integer("a", 37) == 36
    assert parse_integer("a", 36) == 0
    assert parse_integer("zz", 62) == 61 * 62 + 61
    assert parse_integer("^", 72) == 71
    assert parse_integer("10", 72) == 72


def test_digit_value() -> None:
    assert digit_value("9", 10) == 9
    assert digit_value("A", 10) is None
    assert digit_value("A", 11) == 10
    assert digit_value("Z", 36) == 35
    assert digit_value(":", 72) is None
    assert digit_value("-", 72) is None
    assert digit_value(" ", 72) is None


def test_range_is_checked() -> None:
    """Values must fit in a signed 64-bit integer."""
    assert parse_integer(str(INT_MAX), 10) == INT_MAX
    assert parse_integer(str(INT_MIN), 10) == INT_MIN
    with pytest.raises(ValueOutOfRangeError):
        parse_integer(str(INT_MAX + 1), 10)
    with pytest.raises(ValueOutOfRangeError):
        parse_integer(str(INT_MIN - 1), 10)
    with pytest.raises(ValueError):
        parse_integer("1" * 100, 2)


def test_invalid_base() -> None:
    for base in (0, 1, 73, 100):
        with pytest.raises(ValueError):
            parse_integer("1", base)


def test_parse_base_callback() -> None:
    """The click callback accepts 2-72 and rejects the rest."""
    assert parse_base(None, None, "2") == 2
    assert parse_base(None, None, "37") == 37
    assert parse_base(None, None, "72") == 72
    with pytest.raises(click.BadParameter, match="less than or equal to 72"):
        parse_base(None, None, "73")
    with pytest.raises(click.BadParameter, match="greater than or equal to 2"):
        parse_base(None, None, "1")
    with pytest.raises(click.BadParameter, match="Invalid number"):
        parse_base(None, None, "sixteen")


def test_only_ascii_whitespace_is_skipped() -> None:
    """Unicode spaces are not skipped, the way C isspace() behaves."""
    assert parse_integer(" \t\n\v\f\r42", 10) == 42
    assert not scan_integer("\u00a042", 10).has_digits
    assert parse_integer("\u200342", 10) == 0


def test_parse_base_is_strict() -> None:
    """Only plain decimal digits name a base."""
    for value in ("1_6", "+16", " 16", "16 ", "-16", "", "١٦"):
        with pytest.raises(click.BadParameter, match="Invalid number"):
            parse_base(None, None, value)
