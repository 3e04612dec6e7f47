"""Tracker configuration -- bundles every parameter that changes what gets printed.

A TrackerConfig groups the reporting thresholds into one frozen dataclass.
It can be:

- Constructed with defaults matching the classic behaviour
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for provenance next to pipeline outputs
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from event_progress.models.plan import MAX_DECADES, MIN_DECADES


@dataclass(frozen=True)
class TrackerConfig:
    """Frozen configuration for one progress tracker.

    Fields
    ------
    max_decades : int
        Refinement depth of the print-point plan, valid range 1..9.
    min_elapsed_s : float
        No report before this many seconds since start (files still opening).
    min_interval_s : float
        No report sooner than this after the previous one.
    max_recent_weight : float
        Weight reached by the most recent rate at 100 % (``N`` of the blend).
    improving_ratio, worsening_ratio : float
        Trend thresholds relative to the previously displayed ETA.
    color : bool or None
        Force ANSI colour on/off. ``None`` decides once from ``isatty()``.
    """

    max_decades: int = 6
    min_elapsed_s: float = 4.0
    min_interval_s: float = 2.0
    max_recent_weight: float = 0.75
    improving_ratio: float = 0.75
    worsening_ratio: float = 1.33
    color: Optional[bool] = None

    def with_clamped_decades(self) -> Tuple[TrackerConfig, List[str]]:
        """Return a copy with ``max_decades`` forced into range, plus warnings."""
        warnings: List[str] = []
        if self.max_decades > MAX_DECADES:
            warnings.append(f"WARNING: max_decades may not be > {MAX_DECADES}. Using {MAX_DECADES}")
            return replace(self, max_decades=MAX_DECADES), warnings
        if self.max_decades < MIN_DECADES:
            warnings.append(f"WARNING: max_decades may not be < {MIN_DECADES}. Using {MIN_DECADES}")
            return replace(self, max_decades=MIN_DECADES), warnings
        return self, warnings

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> TrackerConfig:
        """Reconstruct from a dict (e.g. loaded from JSON). Unknown keys are rejected."""
        return cls(**dict(d))
