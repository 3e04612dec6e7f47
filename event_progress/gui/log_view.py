from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Literal

import ipywidgets as w

from event_progress.models.report import ProgressReport
from event_progress.models.state import TrendStatus
from event_progress.presentation.line import render_line


Level = Literal["neutral", "improving", "worsening", "warning"]

_LEVEL_BY_STATUS = {
    TrendStatus.NEUTRAL: "neutral",
    TrendStatus.IMPROVING: "improving",
    TrendStatus.WORSENING: "worsening",
}


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


class ProgressLogView:
    """
    Notebook view of progress reports based on a single HTML widget.

    A notebook's stdout is not a terminal, so the tracker prints plain lines.
    This view shows the same lines with the trend colour the terminal would
    use: improving in green, worsening in red, warnings in orange.

    Pass the view itself as ``on_report`` to a tracker::

        view = ProgressLogView(title="OTC")
        display(view.panel)
        tracker = ProgressTracker(n, on_report=view)

    Features:
      - coalescing of consecutive identical lines (shows xN)
      - bounded history (drops oldest entries beyond max_entries)
    """

    def __init__(self, *, title: str | None = None, height_px: int = 220, max_entries: int = 2000) -> None:
        self._entries: List[_Entry] = []
        self._height_px = int(height_px)
        self._max_entries = int(max_entries)
        self.widget = w.HTML()
        if title:
            self.panel = w.VBox([w.HTML(f"<b>{html.escape(str(title))}</b>"), self.widget])
        else:
            self.panel = self.widget
        self.clear()

    def __call__(self, report: ProgressReport) -> None:
        self.add_report(report)

    @property
    def lines(self) -> List[str]:
        return [e.message for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()
        self._render()

    def add_report(self, report: ProgressReport) -> None:
        self._add(_LEVEL_BY_STATUS[TrendStatus(report.status)], _plain_line(report))

    def warning(self, message: str) -> None:
        self._add("warning", message)

    # -------------------------
    # Internals
    # -------------------------
    def _add(self, level: Level, message: str) -> None:
        msg = "" if message is None else str(message)

        if self._entries and self._entries[-1].level == level and self._entries[-1].message == msg:
            self._entries[-1].count += 1
            self._render()
            return

        self._entries.append(_Entry(level=level, message=msg, count=1))
        if len(self._entries) > self._max_entries:
            self._entries = self._entries[-self._max_entries :]
        self._render()

    def _render(self) -> None:
        def color(level: Level) -> str:
            if level == "worsening":
                return "#b00020"  # red
            if level == "improving":
                return "#1b7f1b"  # green
            if level == "warning":
                return "#b26a00"  # orange
            return "#222222"     # near-black

        rows = []
        for e in self._entries:
            txt = html.escape(e.message)
            suffix = f" (x{e.count})" if e.count > 1 else ""
            rows.append(
                f"<div style='color:{color(e.level)}; white-space:pre; "
                f"font-family:ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, Liberation Mono, Courier New, monospace;'>{txt}{html.escape(suffix)}</div>"
            )

        inner = "".join(rows) if rows else "<div style='color:#666;'>No progress reported yet.</div>"
        self.widget.value = (
            f"<div style='border:1px solid #ddd; padding:8px; height:{self._height_px}px; "
            f"overflow-y:auto; background:#fff;'>{inner}</div>"
        )


def _plain_line(report: ProgressReport) -> str:
    """The report line without terminal escapes, whatever the tracker's colour mode."""
    return render_line(
        report.label,
        report.percent_text,
        report.elapsed_text,
        report.total_text,
        report.eta_text,
        color=False,
    )
