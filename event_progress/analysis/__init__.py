"""Numerical core of the progress reporter.

Design principle:
  - Everything here is a pure function of numbers: no clock reads, no output.
  - The tracker (:mod:`event_progress.tracking`) owns the state and the timing.

Recoverable problems (overflowing durations, odd sig-fig requests) never raise;
they are appended as ``WARNING:`` strings to an optional ``warnings`` list.
"""

from .durations import DurationText, Precision, format_elapsed, format_estimate
from .rate import eta_seconds, remaining_since_last, remaining_since_start
from .sigfigs import choose_total_sigfigs, eta_sigfigs, sigfigs
from .trend import classify_trend

__all__ = [
    "DurationText",
    "Precision",
    "format_elapsed",
    "format_estimate",
    "eta_seconds",
    "remaining_since_last",
    "remaining_since_start",
    "choose_total_sigfigs",
    "eta_sigfigs",
    "sigfigs",
    "classify_trend",
]
