from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Deque, Optional

from event_progress.models.plan import PrintPointPlan


class TrendStatus(IntEnum):
    """Whether the newest ETA is better or worse than the one shown before."""

    WORSENING = -1
    NEUTRAL = 0
    IMPROVING = 1


@dataclass
class ProgressState:
    """
    Mutable state of one tracker, from construction to the final report.

    Notes
    - Rate-related fields change only inside a report that actually prints.
    - A failed gate check only pops ``plan_remaining``.
    """
    total: int
    plan_remaining: Deque[int]
    start_time: float
    last_report_time: float
    last_fraction: float = 0.0
    previous_displayed_eta: int = 0
    has_previous_estimate: bool = False
    color_enabled: bool = False

    @classmethod
    def start(cls, plan: PrintPointPlan, now: float, *, color_enabled: bool) -> ProgressState:
        return cls(
            total=plan.total,
            plan_remaining=deque(plan),
            start_time=now,
            last_report_time=now,
            color_enabled=color_enabled,
        )

    @property
    def next_point(self) -> Optional[int]:
        return self.plan_remaining[0] if self.plan_remaining else None

    @property
    def final_index(self) -> int:
        return self.total - 1
