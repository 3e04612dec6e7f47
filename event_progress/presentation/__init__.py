"""Text rendering of progress reports (terminal line layout and colours)."""

from .line import format_percent, percent_regime, render_line, trend_sequence

__all__ = [
    "format_percent",
    "percent_regime",
    "render_line",
    "trend_sequence",
]
