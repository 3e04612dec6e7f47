from __future__ import annotations

from dataclasses import dataclass

from event_progress.models.state import TrendStatus


@dataclass(frozen=True)
class ProgressReport:
    """One emitted progress line and the numbers behind it.

    Attributes
    ----------
    index, fraction:
        Item index and ``index/total`` at the report.
    label:
        Task label supplied by the caller.
    elapsed_s:
        Seconds since the tracker started.
    eta_s:
        Blended ETA in whole seconds, before display rounding.
    displayed_eta_s:
        Seconds represented by ``eta_text`` after rounding. Trend detection
        compares these, i.e. what the user actually saw.
    percent_text, elapsed_text, total_text, eta_text:
        The formatted fields. ``total_text`` is empty on the final report.
    status:
        Trend relative to the previous report.
    final:
        True for the ``total-1`` report.
    line:
        The full rendered line, including colour escapes when enabled.
    """

    index: int
    fraction: float
    label: str
    elapsed_s: float
    eta_s: int
    displayed_eta_s: int
    percent_text: str
    elapsed_text: str
    total_text: str
    eta_text: str
    status: TrendStatus
    final: bool
    line: str
