# SPDX-FileCopyrightText: 2025 Frederic Ruget <fred@atlant.is> (GitHub: @douzebis)
#
# SPDX-License-Identifier: MIT

PROGRAM_NAME = 'cob'
VERSION = '1.00'

MIN_BASE = 2
MAX_BASE = 72
DEFAULT_BASE_DEST = 16
DEFAULT_BASE_SRC = 10

# Native signed 64-bit range
INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1


# === DIGIT ALPHABET ===========================================================

DIGITS = '0123456789'
UPPER = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
LOWER = 'abcdefghijklmnopqrstuvwxyz'
# No sign characters nor whitespace past 'z'
SYMBOLS = '!#$%&*=?@^'
ALPHABET = DIGITS + UPPER + LOWER + SYMBOLS
assert len(ALPHABET) == MAX_BASE

DIGIT_VALUES = {char: value for value, char in enumerate(ALPHABET)}

# Conventional prefixes for common bases
FORMAT_SPECIFIERS = {
    2: '0b',
    8: '0',
    16: '0x',
}

# Skipped before the sign, as C isspace() does in the C locale
WHITESPACE = ' \t\n\v\f\r'

# Characters skipped after leading zeros when reading these bases
SOURCE_PREFIX_MARKERS = {
    2: 'b',
    16: 'x',
}
