from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


MIN_DECADES = 1
MAX_DECADES = 9


@dataclass(frozen=True)
class PrintPointPlan:
    """Item indices at which a progress report is attempted.

    Notes
    - ``points`` is a sorted int64 array without duplicates and without 0.
    - The plan is consumed front-to-back by one tracker; it is never modified.
    """
    total: int
    max_decades: int
    points: np.ndarray

    def __len__(self) -> int:
        return int(self.points.size)

    def __iter__(self) -> Iterator[int]:
        return (int(p) for p in self.points)

    def __contains__(self, index: object) -> bool:
        return bool(np.any(self.points == index))


def plan_print_points(total: int, max_decades: int) -> PrintPointPlan:
    """Generate the indices at which progress should be reported.

    Parameters
    ----------
    total:
        Number of items in the loop.
    max_decades:
        How many decades of refinement to add near 0 % and 100 %
        (2 adds the 1 %..9 % and 91 %..99 % bands, 3 the 0.1 % bands, ...).

    Returns
    -------
    PrintPointPlan
        Always contains the first items (so one can see the loop is not stuck)
        and ``total-1`` (so the total time gets printed).
    """
    total = int(total)
    if total <= 0:
        raise ValueError("total must be > 0")
    max_decades = int(max_decades)
    if not MIN_DECADES <= max_decades <= MAX_DECADES:
        raise ValueError(f"max_decades must be in [{MIN_DECADES}, {MAX_DECADES}], got {max_decades}")

    i = np.arange(1, 10, dtype=np.int64)
    parts = [
        np.array([0, 1, 2, total - 1], dtype=np.int64),
        i * (total // 10),
    ]
    for ep in range(2, max_decades + 1):
        step = total // 10**ep
        parts.append(i * step)
        parts.append(total - i * step)

    points = np.unique(np.concatenate(parts))
    # Index 0 is dropped: callers start at 0 or 1 at random, and there is no
    # rate estimate on the first item anyway.
    points = points[(points > 0) & (points < total)]
    return PrintPointPlan(total=total, max_decades=max_decades, points=points)
