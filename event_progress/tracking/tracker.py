from __future__ import annotations

import sys
import time
from dataclasses import replace
from typing import Callable, List, Optional, TextIO

import pandas as pd

from event_progress.analysis.durations import format_elapsed, format_estimate
from event_progress.analysis.rate import eta_seconds, remaining_since_last, remaining_since_start
from event_progress.analysis.sigfigs import choose_total_sigfigs, eta_sigfigs
from event_progress.analysis.trend import classify_trend
from event_progress.models.config import TrackerConfig
from event_progress.models.plan import PrintPointPlan, plan_print_points
from event_progress.models.report import ProgressReport
from event_progress.models.state import ProgressState
from event_progress.presentation.line import format_percent, render_line


Clock = Callable[[], float]
ReportCallback = Callable[[ProgressReport], None]


def _isatty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty()) if callable(isatty) else False


class ProgressTracker:
    """
    Progress reporter for a loop over a known number of items.

    Call :meth:`tick` on every iteration, after the work of the iteration is
    done. When the index is not a planned print point, ``tick`` only compares
    two integers and returns.

    One tracker serves one loop. Loops running side by side need one tracker
    each; nothing is shared between instances.

    Diagnostics (clamped configuration, overflowing durations) are collected
    in ``warnings`` and echoed to ``err_stream``.
    """

    def __init__(
        self,
        total: int,
        max_decades: Optional[int] = None,
        *,
        config: Optional[TrackerConfig] = None,
        clock: Optional[Clock] = None,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        color: Optional[bool] = None,
        on_report: Optional[ReportCallback] = None,
    ) -> None:
        config = config or TrackerConfig()
        if max_decades is not None:
            config = replace(config, max_decades=int(max_decades))
        if color is not None:
            config = replace(config, color=bool(color))

        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr
        self.clock = clock or time.monotonic
        self.on_report = on_report
        self.warnings: List[str] = []
        self.history: List[ProgressReport] = []

        self.config, clamp_warnings = config.with_clamped_decades()
        for msg in clamp_warnings:
            self._warn(msg)

        self.plan: PrintPointPlan = plan_print_points(total, self.config.max_decades)

        # Colour is decided once; a stream that stops being a tty mid-run is not re-checked.
        color_enabled = self.config.color if self.config.color is not None else _isatty(self.stream)
        self.state = ProgressState.start(self.plan, self.clock(), color_enabled=bool(color_enabled))

    @property
    def total(self) -> int:
        return self.state.total

    def tick(self, index: int, label: str = "") -> Optional[ProgressReport]:
        """Report progress if ``index`` is the next planned print point."""
        remaining = self.state.plan_remaining
        if not remaining or index != remaining[0]:
            return None
        # This point, and everything before it, will never be seen again.
        remaining.popleft()
        return self.report(index, label)

    def report(self, index: int, label: str = "") -> Optional[ProgressReport]:
        """Compute, print and record one report, unless it must be suppressed.

        Returns the emitted :class:`ProgressReport`, or None if nothing was printed.
        """
        st = self.state
        cfg = self.config
        final = index == st.final_index
        fraction = index / st.total

        now = self.clock()
        elapsed_total = now - st.start_time
        elapsed_since_last = now - st.last_report_time

        # The first iterations are often slow (files being opened), and
        # back-to-back reports are noise. The last item always prints.
        if not final and (elapsed_total < cfg.min_elapsed_s or elapsed_since_last < cfg.min_interval_s):
            return None

        # fraction == 0: started with index 0 after a long setup.
        # Same fraction again: the caller passed the same index twice.
        if fraction == 0 or fraction == st.last_fraction:
            return None

        tote = remaining_since_start(elapsed_total, fraction)
        ince = remaining_since_last(fraction, st.last_fraction, elapsed_since_last)
        eta = eta_seconds(ince, tote, fraction, max_recent_weight=cfg.max_recent_weight)

        warnings: List[str] = []
        eta_text = format_estimate(eta, False, eta_sigfigs(fraction), warnings)
        status = classify_trend(
            eta_text.seconds,
            elapsed_since_last,
            st.previous_displayed_eta,
            st.has_previous_estimate,
            improving_ratio=cfg.improving_ratio,
            worsening_ratio=cfg.worsening_ratio,
        )

        elapsed_s = int(elapsed_total)
        if final:
            total_text = ""
        else:
            total_text = format_estimate(eta + elapsed_s, True, choose_total_sigfigs(eta, elapsed_s), warnings).text
        elapsed_text = format_elapsed(elapsed_total, warnings)
        percent_text = format_percent(fraction, final)

        line = render_line(
            label,
            percent_text,
            elapsed_text,
            total_text,
            eta_text.text,
            status=status,
            color=st.color_enabled,
        )
        for msg in warnings:
            self._warn(msg)
        print(line, file=self.stream, flush=True)

        st.last_report_time = now
        st.last_fraction = fraction
        st.previous_displayed_eta = eta_text.seconds
        st.has_previous_estimate = True

        rep = ProgressReport(
            index=int(index),
            fraction=fraction,
            label=label,
            elapsed_s=elapsed_total,
            eta_s=eta,
            displayed_eta_s=eta_text.seconds,
            percent_text=percent_text,
            elapsed_text=elapsed_text,
            total_text=total_text,
            eta_text=eta_text.text,
            status=status,
            final=final,
            line=line,
        )
        self.history.append(rep)
        if self.on_report is not None:
            self.on_report(rep)
        return rep

    def history_frame(self) -> pd.DataFrame:
        """One row per emitted report, in emission order."""
        cols = ["index", "fraction", "elapsed_s", "eta_s", "displayed_eta_s", "status", "final"]
        rows = [
            {
                "index": r.index,
                "fraction": r.fraction,
                "elapsed_s": r.elapsed_s,
                "eta_s": r.eta_s,
                "displayed_eta_s": r.displayed_eta_s,
                "status": int(r.status),
                "final": r.final,
            }
            for r in self.history
        ]
        return pd.DataFrame(rows, columns=cols)

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        print(message, file=self.err_stream)
