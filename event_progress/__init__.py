"""Event Progress -- adaptive progress and ETA reporting for batch event processing.

Built for long loops over detector records (millions of events read from one
file and written to another), where the only thing the loop knows is how many
items there are and which one it is on.

This package provides tools for:
- Planning the item indices at which a report is attempted
- Blending the average and the recent processing rate into an ETA
- Formatting durations with an adaptive number of significant figures
- Flagging whether the ETA improved or worsened since the last report
- Printing one compact, optionally coloured, line per report

Key principles:
- Cheap when silent: a non-reporting tick is one integer comparison
- Never fatal: bad settings and overflowing numbers degrade to coarser output
- No hidden state: every loop owns its own tracker

Main subpackages:
- analysis: Significant figures, rate blending, duration formatting, trend
- models: Plan, state, configuration and report data models
- presentation: Line layout and terminal colours
- tracking: ProgressTracker and iterable helpers
- gui: ipywidgets view for notebooks
"""

from event_progress.models.config import TrackerConfig
from event_progress.models.report import ProgressReport
from event_progress.models.state import TrendStatus
from event_progress.tracking import ProgressTracker, track, track_frame

__all__ = [
    "ProgressReport",
    "ProgressTracker",
    "TrackerConfig",
    "TrendStatus",
    "track",
    "track_frame",
]
