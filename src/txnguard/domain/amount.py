"""Fixed-point amount parsing.

Amounts are signed 64-bit integers scaled by 10^7 (one unit is
10,000,000 stroops).  Integers are taken as already scaled; decimal strings
are scaled exactly, with no rounding of excess fractional digits.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

import re

from txnguard.errors import ParseError, RangeError

AMOUNT_DECIMALS = 7
STROOPS_PER_UNIT = 10**AMOUNT_DECIMALS

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL_PATTERN = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

# Integer digits of INT64_MAX once scaled down by STROOPS_PER_UNIT.
MAX_WHOLE_DIGITS = len(str(INT64_MAX // STROOPS_PER_UNIT))


def _scale_decimal(text: str) -> int:
    if _DECIMAL_PATTERN.fullmatch(text) is None:
        msg = f"invalid amount format: {text}"
        raise ParseError(msg)

    negative = text.startswith("-")
    whole, _, fraction = text.lstrip("-").partition(".")
    if len(fraction) > AMOUNT_DECIMALS:
        msg = f"more than {AMOUNT_DECIMALS} decimal places: {text}"
        raise ParseError(msg)

    whole = whole.lstrip("0")
    if len(whole) > MAX_WHOLE_DIGITS:
        msg = f"amount outside bounds of int64: {text}"
        raise ParseError(msg)

    scaled = int(whole or "0") * STROOPS_PER_UNIT + int(fraction.ljust(AMOUNT_DECIMALS, "0"))
    return -scaled if negative else scaled


def parse_amount(value: int | str) -> int:
    """Parse *value* into a scaled int64 amount.

    Examples:
        >>> parse_amount("10.1234567")
        101234567
        >>> parse_amount(25)
        25

    Raises:
        ParseError: Unsupported type, malformed decimal, more than seven
            fractional digits, or int64 overflow.
        RangeError: The scaled amount is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int | str):
        msg = f"could not parse expected numeric value {value!r}"
        raise ParseError(msg)

    scaled = value if isinstance(value, int) else _scale_decimal(value)
    if not INT64_MIN <= scaled <= INT64_MAX:
        msg = f"amount outside bounds of int64: {value}"
        raise ParseError(msg)
    if scaled < 0:
        msg = "amount can not be negative"
        raise RangeError(msg)
    return scaled


def format_amount(scaled: int) -> str:
    """Render a scaled amount with exactly seven fractional digits.

    Examples:
        >>> format_amount(101234567)
        '10.1234567'
        >>> format_amount(-5)
        '-0.0000005'
    """
    sign = "-" if scaled < 0 else ""
    units, stroops = divmod(abs(scaled), STROOPS_PER_UNIT)
    return f"{sign}{units}.{stroops:0{AMOUNT_DECIMALS}d}"
