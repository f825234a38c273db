"""
Lenient parsing of numeric request values.

Query strings such as ``page`` and ``limit`` are never rejected: a
value that does not start with an integer, or whose integer is not
positive, is replaced by the caller's default.
"""

import re
from typing import Optional

# ASCII digits only; ``\d`` would also accept other scripts' digits.
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")
# Longest digit run converted; CPython refuses longer strings by default.
_MAX_DIGITS = 4300


def parse_int(value: Optional[str]) -> Optional[int]:
    """Return the integer at the start of ``value`` or ``None``.

    Trailing garbage is ignored (``"12abc"`` gives ``12``), matching
    how browsers and most HTTP clients treat loosely formatted ids.
    Digit runs too long for ``int()`` are treated as unparseable.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    digits = match.group(1)
    if len(digits.lstrip("+-")) > _MAX_DIGITS:
        return None
    try:
        return int(digits)
    except ValueError:
        return None


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse ``value`` as a positive integer, falling back to ``default``."""
    parsed = parse_int(value)
    if parsed is None or parsed <= 0:
        return default
    return parsed
