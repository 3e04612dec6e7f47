"""Remaining-time estimates and their blend into one ETA.

Two estimates of the remaining time are combined:

* ``tote``: assumes the loop keeps its average speed since the start.
* ``ince``: assumes the loop keeps its average speed since the last report.
  ``NO_RECENT_ESTIMATE`` (-1) means no such estimate is available.

Before half-way the geometric mean is used, which keeps a wildly wrong
estimate from dominating. Afterwards a weighted average is used, with the
recent rate gaining weight linearly as the loop approaches the end.
"""

from __future__ import annotations

import math

NO_RECENT_ESTIMATE = -1.0
DEFAULT_MAX_RECENT_WEIGHT = 0.75


def round_half_up(x: float) -> int:
    """Round to the nearest int, halves away from zero (``round`` is banker's)."""
    if x < 0:
        return -int(math.floor(-x + 0.5))
    return int(math.floor(x + 0.5))


def remaining_since_start(elapsed_total: float, fraction: float) -> float:
    """Remaining seconds at the average rate since the start (``tote``)."""
    if fraction <= 0:
        raise ValueError("fraction must be > 0")
    return elapsed_total / fraction - elapsed_total


def remaining_since_last(fraction: float, last_fraction: float, elapsed_since_last: float) -> float:
    """Remaining seconds at the rate since the last report (``ince``)."""
    delta = fraction - last_fraction
    if delta > 0:
        return (1 - fraction) * elapsed_since_last / delta
    return NO_RECENT_ESTIMATE


def eta_seconds(
    ince: float,
    tote: float,
    fraction: float,
    *,
    max_recent_weight: float = DEFAULT_MAX_RECENT_WEIGHT,
) -> int:
    """Blend the two remaining-time estimates into whole seconds.

    Parameters
    ----------
    ince:
        Remaining time at the recent rate, or ``NO_RECENT_ESTIMATE``.
    tote:
        Remaining time at the average rate since the start.
    fraction:
        Fraction of the loop done, in ``(0, 1]``.
    max_recent_weight:
        Weight of ``ince`` at ``fraction == 1``. At ``fraction == 0.5`` both
        estimates weigh the same.
    """
    if ince == NO_RECENT_ESTIMATE:
        return round_half_up(tote)

    if fraction < 0.5:
        return round_half_up(math.sqrt(tote * ince))

    n = max_recent_weight
    w = 1 - n + (2 * n - 1) * fraction
    return round_half_up(w * ince + (1 - w) * tote)
