"""Integer arithmetic helpers.

Python's ``//`` and ``%`` round toward negative infinity. Several
calendrical results (months between two dates, duration parts) are
defined with truncation toward zero instead, so both flavours live
here side by side.

This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.constants import MAX_LONG, MIN_LONG
from isochron.errors import OverflowError


def trunc_div(a: int, b: int) -> int:
    """Divide, rounding toward zero.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    q = a // b
    if q < 0 and q * b != a:
        q += 1
    return q


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching trunc_div; carries the sign of the dividend.

    Examples:
        >>> trunc_mod(-7, 2)
        -1
    """
    return a - b * trunc_div(a, b)


def check_long(value: int, what: str = "value") -> int:
    """Return value if it fits a signed 64-bit integer.

    Raises:
        OverflowError: If value is out of range.
    """
    if value < MIN_LONG or value > MAX_LONG:
        raise OverflowError(f"{what} exceeds the signed 64-bit range: {value}")
    return value


__all__ = ["trunc_div", "trunc_mod", "check_long"]
