"""
xpclaim.utils.parse

Lenient integer parsing for untrusted public inputs. The claim API receives
public inputs as JSON strings produced by browser tooling, so the accepted
grammar follows the two JavaScript conversions that tooling relies on:

  parse_big_int(v)  ~ BigInt(v)
      - surrounding whitespace ignored, empty string is 0
      - optional sign followed by decimal digits, or
      - unsigned 0x / 0o / 0b prefixed literal
      - anything else (fractions, exponents, underscores, junk) -> None

  parse_int(v)      ~ parseInt(v)
      - leading whitespace and optional sign
      - optional 0x prefix selects base 16
      - the longest run of valid digits is used; trailing junk is ignored
      - no digits at all -> None

Both return None instead of raising. bool is rejected outright.

Decimal literals with more than MAX_DECIMAL_DIGITS significant digits are not
converted (CPython refuses long decimal strings, and the work is quadratic).
They come back as +/-10**MAX_DECIMAL_DIGITS, which is above every bound the
callers check: p has 77 digits, a 160-bit address 49.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_BIG_DEC = re.compile(r"([+-]?)([0-9]+)")
_BIG_PREFIXED = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INT_LEADING = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|[0-9]+)")

MAX_DECIMAL_DIGITS = 80

_PREFIX_BASE = {"x": 16, "o": 8, "b": 2}


def _decimal(sign: str, digits: str) -> int:
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_DECIMAL_DIGITS:
        n = 10 ** MAX_DECIMAL_DIGITS
    else:
        n = int(digits, 10)
    return -n if sign == "-" else n


def _number_to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    return None


def parse_big_int(value: Any) -> Optional[int]:
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        return int(value)
    if not isinstance(value, str):
        return _number_to_int(value)

    s = value.strip()
    if s == "":
        return 0
    m = _BIG_DEC.fullmatch(s)
    if m is not None:
        return _decimal(m.group(1), m.group(2))
    if _BIG_PREFIXED.fullmatch(s):
        return int(s[2:], _PREFIX_BASE[s[1].lower()])
    return None


def parse_int(value: Any) -> Optional[int]:
    if not isinstance(value, str):
        return _number_to_int(value)

    m = _INT_LEADING.match(value.lstrip())
    if m is None:
        return None
    sign, digits = m.group(1), m.group(2)
    if digits[:2] in ("0x", "0X"):
        n = int(digits[2:], 16)
        return -n if sign == "-" else n
    return _decimal(sign, digits)


__all__ = ["MAX_DECIMAL_DIGITS", "parse_big_int", "parse_int"]
