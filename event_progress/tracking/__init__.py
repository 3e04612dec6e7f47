"""Progress tracking for long batch loops.

Key classes:
- ProgressTracker: owns the plan, the clock and the report state of one loop

Helpers:
- track: wrap any sized iterable
- track_frame: iterate a pandas DataFrame record by record

Design principle:
- One tracker per loop, no module-level state
- The clock and the output stream are injected, so tests run on fake time
"""

from .iterate import track, track_frame
from .tracker import ProgressTracker

__all__ = [
    "ProgressTracker",
    "track",
    "track_frame",
]
