"""Integer significant-figure rounding and precision selection.

Functions
---------
sigfigs
    Round a positive value to a number of leading digits using integer arithmetic.
choose_total_sigfigs
    Precision of ``elapsed + eta`` given an exact elapsed time and a rough ETA.
eta_sigfigs
    Precision of the ETA field itself.
"""

from __future__ import annotations

import math
from typing import List, Optional

# Largest value stored without overflow in a signed 32-bit int.
INT32_MAX = 2147483647
EXACT_SIGFIGS = 9

# ETA has one sig fig until 10 % done, two afterwards.
_ETA_SIGFIG_SWITCH = 0.1


def sigfigs(value: float, digits: int = 2, warnings: Optional[List[str]] = None) -> int:
    """Round ``value`` (>= 0) to ``digits`` significant figures.

    The value is first rounded to an integer, then the dropped digits are
    rounded half up: ``sigfigs(1250, 2) == 1300``, ``sigfigs(1249, 2) == 1200``.
    Integers with at most ``digits`` digits are returned unchanged.

    Values that do not fit in a signed 32-bit int are capped at ``INT32_MAX``.
    A digit count outside 1..9 falls back to plain rounding. Both cases append
    a message to ``warnings`` when given.
    """
    if value >= INT32_MAX + 1:
        _warn(warnings, f"WARNING: cannot store {value:f} in a 32-bit int, capped at {INT32_MAX}")
        return INT32_MAX

    n = int(value + 0.5)
    if not 1 <= digits <= 9:
        _warn(warnings, f"WARNING: {digits} is an unreasonable number of sigfigs")
        return n

    dropped = len(str(n)) - digits
    if dropped <= 0:
        return n
    scale = 10**dropped
    kept, rest = divmod(n, scale)
    if 2 * rest >= scale:
        kept += 1
    return kept * scale


def choose_total_sigfigs(eta: int, elapsed: int) -> int:
    """Number of significant figures in ``elapsed + eta``.

    The elapsed time is exact while the ETA has about two sig figs. Once the
    elapsed part dominates the sum, the sum carries more precision::

        12345 elapsed +  670 eta --> 5 - 3 + 2 = 4 sig figs
         9876 elapsed + 7700 eta --> 4 - 4 + 2 = 2 sig figs
           99 elapsed +  870 eta --> max(2 - 3 + 2, 2) = 2 sig figs
    """
    if eta <= 0:
        return EXACT_SIGFIGS
    if elapsed <= 0:
        return 1
    if eta > 10 * elapsed:
        return 1

    elapsed_digits = int(math.log10(elapsed))
    eta_digits = int(math.log10(eta))
    return max(elapsed_digits - eta_digits + 2, 2)


def eta_sigfigs(fraction: float) -> int:
    return 1 if fraction < _ETA_SIGFIG_SWITCH else 2


def _warn(warnings: Optional[List[str]], message: str) -> None:
    if warnings is not None:
        warnings.append(message)
