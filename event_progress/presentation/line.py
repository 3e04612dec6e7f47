"""Assembly of the one-line progress report.

Layout (plain)::

    *OTC:      50% So far:     1m05s  Est total:        2m ETA:        1m  *

With colour enabled, the total and ETA fields are wrapped in an ANSI
sequence choosing the trend colour. The background is forced to black; the
trailing sequence resets to white on black.
"""

from __future__ import annotations

from typing import Tuple

from event_progress.analysis.rate import round_half_up
from event_progress.models.state import TrendStatus


ESC = "\x1b"

# ── ANSI foreground colours ──────────────────────────────────────────
FG_WHITE = "37"
FG_GREEN = "32"
FG_RED   = "31"

TREND_COLOURS = {
    TrendStatus.NEUTRAL: FG_WHITE,
    TrendStatus.IMPROVING: FG_GREEN,
    TrendStatus.WORSENING: FG_RED,
}

RESET = f"{ESC}[0;37;40m"

# (ep, below, above): the fraction needs ep decimals of percent precision
# when it is closer than this to 0 % or 100 %.
_PERCENT_REGIMES: Tuple[Tuple[int, float, float], ...] = (
    (8, 0.0000000099, 0.99999999),
    (7, 0.000000099,  0.9999999),
    (6, 0.00000099,   0.999999),
    (5, 0.0000099,    0.99999),
    (4, 0.000099,     0.9999),
    (3, 0.00099,      0.999),
    (2, 0.0099,       0.99),
    (1, 0.099,        0.9),
)


def percent_regime(fraction: float, final: bool = False) -> int:
    """Number of decades of percent precision for ``fraction``.

    The final item always gets 0 so it prints 100 %, not 99.98 %.
    """
    if final:
        return 0
    for ep, below, above in _PERCENT_REGIMES:
        if fraction < below or fraction > above:
            return ep
    return 0


def format_percent(fraction: float, final: bool = False) -> str:
    if final:
        fraction = 1.0
    ep = percent_regime(fraction, final)
    decimals = max(ep - 1, 0)
    value = round_half_up(10.0 ** (ep + 1) * fraction) / 10.0 ** (ep - 1)
    return f"{value:7.{decimals}f}%"


def trend_sequence(status: TrendStatus) -> str:
    """ANSI sequence for a trend: bold unless neutral, on black."""
    bold = "0" if status == TrendStatus.NEUTRAL else "1"
    return f"{ESC}[{bold};{TREND_COLOURS[status]};40m"


def render_line(
    label: str,
    percent_text: str,
    elapsed_text: str,
    total_text: str,
    eta_text: str,
    *,
    status: TrendStatus = TrendStatus.NEUTRAL,
    color: bool = False,
) -> str:
    """Build one report line, delimited by ``*`` on both ends."""
    if color:
        return (
            f"*{label}: {percent_text} "
            f"So far: {elapsed_text:>9} "
            f"{trend_sequence(status)}Est total: {total_text:>9} "
            f"ETA: {eta_text:>9}{RESET}  "
            "*"
        )
    return (
        f"*{label}: {percent_text} "
        f"So far: {elapsed_text:>9}  "
        f"Est total: {total_text:>9} "
        f"ETA: {eta_text:>9}  "
        "*"
    )
