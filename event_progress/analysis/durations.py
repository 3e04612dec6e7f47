"""Human-readable durations with an adaptive number of significant figures.

Functions
---------
format_estimate
    Render an estimated duration at 1..4 significant figures and report the
    number of seconds the rendered text stands for.
format_elapsed
    Render an exact elapsed time with fixed units (``1d 02h03m``, ``1h 02m05s``).

The largest unit is days. Durations beyond roughly 1000 days are shown as a
day count rounded with :func:`~event_progress.analysis.sigfigs.sigfigs`; durations
that overflow a 32-bit int read "more than 68 years".

With ``emphasize`` set, long durations get " (!)", " (!!!)", " (!!!!!)" or
" (!!!!!!!)" appended.

Within one precision level a longer duration never stands for fewer seconds
than a shorter one: regime edges sit where the two roundings meet.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List, Optional

from event_progress.analysis.sigfigs import INT32_MAX, sigfigs


DAY = 86400
HOUR = 3600
MINUTE = 60

# Shown instead of a duration that does not fit in a signed 32-bit int.
OVERFLOW_TEXT = "more than 68 years"


class Precision(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


@dataclass(frozen=True)
class DurationText:
    """Formatted duration.

    ``seconds`` is the value the text represents after rounding, e.g.
    ``" 2m"`` stands for 120 s even if 125 s were formatted.
    """
    text: str
    seconds: int


# A level returns None when its rounding would be ambiguous and the next
# finer level must render instead.
_Level = Callable[[int, bool, Optional[List[str]]], Optional[DurationText]]


def _mark(emphasize: bool, bangs: int) -> str:
    return f" ({'!' * bangs})" if emphasize else ""


def _days(sec: int, digits: int, warnings: Optional[List[str]]) -> int:
    return sigfigs(sec / DAY, digits, warnings)


def _format_one(sec: int, emphasize: bool, warnings: Optional[List[str]]) -> Optional[DurationText]:
    if sec < 5:
        return DurationText(f"{sec:2d}s", sec)
    if sec < 55:
        ts = (sec + 5) // 10 * 10
        if ts == 10:  # "10s"
            return None
        return DurationText(f"{ts:2d}s", ts)
    if sec < 570:
        tm = (sec + 30) // MINUTE
        if tm == 1:  # "1m"
            return None
        return DurationText(f"{tm:2d}m", tm * MINUTE)
    if sec < 3570:
        tm = (sec + 300) // 600 * 10
        if tm == 10:  # "10m"
            return None
        return DurationText(f"{tm}m", tm * MINUTE)
    if sec < 34200:
        th = (sec + 1800) // HOUR
        if th == 1:  # "1h"
            return None
        return DurationText(f"{th:2d}h", th * HOUR)
    if sec < 84600:
        th = (sec + 1800) // 36000 * 10
        if th == 10:  # "10h"
            return None
        return DurationText(f"{th}h", th * HOUR)
    if sec < 856800:
        td = (sec + 43200) // DAY
        if td == 1:  # "1d"
            return None
        return DurationText(f"{td}d{_mark(emphasize, 1)}", td * DAY)
    td = _days(sec, 1, warnings)
    return DurationText(f"{td}d{_mark(emphasize, 3)}", td * DAY)


def _format_two(sec: int, emphasize: bool, warnings: Optional[List[str]]) -> Optional[DurationText]:
    if sec < 55:
        return DurationText(f"{sec:2d}s", sec)
    if sec < 3570:  # 1m to 59m, whole minutes: 61 s reads "1m"
        tm = (sec + 30) // MINUTE
        return DurationText(f"{tm}m", tm * MINUTE)
    if sec < 34200:  # 1h00m to 9h50m
        th = (sec + 300) // HOUR
        tm = (sec + 300) % HOUR // 600 * 10
        return DurationText(f"{th}h{tm:02d}m", th * HOUR + tm * MINUTE)
    if sec < 84600:  # 10h to 23h
        th = (sec + 1800) // HOUR
        return DurationText(f"{th}h", th * HOUR)
    if sec < 856800:
        # Two sig figs between 1 and 10 days: 0.1 d is about 2 h.
        td = (sec + 3600) // DAY
        th = (sec + 3600) % DAY // 7200 * 2
        return DurationText(f"{td}d{th:02d}h{_mark(emphasize, 1)}", td * DAY + th * HOUR)
    td = _days(sec, 2, warnings)
    return DurationText(f"{td}d{_mark(emphasize, 3)}", td * DAY)


def _format_three(sec: int, emphasize: bool, warnings: Optional[List[str]]) -> Optional[DurationText]:
    if sec < 60:
        return DurationText(f"{sec:2d}s", sec)
    if sec < 599:  # up to 9m59s
        return DurationText(f"{sec // MINUTE}m{sec % MINUTE:02d}s", sec)
    if sec < 3595:  # up to 59m50s
        ts = (sec + 5) // 10 * 10
        return DurationText(f"{ts // MINUTE}m{ts % MINUTE:02d}s", ts)
    if sec < 35970:  # up to 9h59m
        tm = (sec + 30) // MINUTE
        return DurationText(f"{tm // 60}h{tm % 60:02d}m", tm * MINUTE)
    if sec < 84600:  # up to 23h30m
        tm = (sec + 30) // MINUTE // 10 * 10
        return DurationText(f"{tm // 60}h{tm % 60}m", tm * MINUTE)
    if sec < 862200:  # up to 9d23h
        th = (sec + 1800) // HOUR
        return DurationText(f"{th // 24}d{th % 24:02d}h{_mark(emphasize, 1)}", th * HOUR)
    if sec < 8640000:  # up to 99d20h
        th = (sec + 1800) // HOUR // 10 * 10
        return DurationText(f"{th // 24}d{th % 24:02d}h{_mark(emphasize, 3)}", th * HOUR)
    td = _days(sec, 3, warnings)
    return DurationText(f"{td}d{_mark(emphasize, 5)}", td * DAY)


def _format_four(sec: int, emphasize: bool, warnings: Optional[List[str]]) -> Optional[DurationText]:
    if sec < 60:
        return DurationText(f"{sec:2d}s", sec)
    if sec < 3599:  # up to 59m59s
        return DurationText(f"{sec // MINUTE:2d}m{sec % MINUTE:02d}s", sec)
    if sec < 35995:  # up to 9h59m50s
        ts = (sec + 5) // 10 * 10
        return DurationText(f"{ts // HOUR}h{ts % HOUR // MINUTE:02d}m{ts % MINUTE:02d}s", ts)
    if sec < 88200:  # up to 24h29m
        tm = (sec + 30) // MINUTE
        return DurationText(f"{tm // 60}h{tm % 60:02d}m", tm * MINUTE)
    if sec < 863700:  # up to 9d23h50m
        tm = (sec + 300) // 600 * 10
        return DurationText(
            f"{tm // 1440}d{tm % 1440 // 60:02d}h{tm % 60:02d}m{_mark(emphasize, 1)}",
            tm * MINUTE,
        )
    if sec < 8638200:  # up to 99d23h
        th = (sec + 1800) // HOUR
        return DurationText(f"{th // 24}d{th % 24:02d}h{_mark(emphasize, 3)}", th * HOUR)
    if sec < 1000 * DAY:  # up to 999d20h
        th = (sec + 18000) // 36000 * 10
        return DurationText(f"{th // 24}d{th % 24:02d}h{_mark(emphasize, 5)}", th * HOUR)
    td = _days(sec, 4, warnings)
    return DurationText(f"{td}d{_mark(emphasize, 7)}", td * DAY)


_LEVELS: Dict[Precision, _Level] = {
    Precision.ONE: _format_one,
    Precision.TWO: _format_two,
    Precision.THREE: _format_three,
    Precision.FOUR: _format_four,
}


def precision_for(sig_figs: int) -> Precision:
    """Map a sig-fig count to a table. Anything outside 1..4 uses the finest."""
    try:
        return Precision(int(sig_figs))
    except ValueError:
        return Precision.FOUR


def render_at(
    sec: int,
    emphasize: bool,
    level: Precision,
    warnings: Optional[List[str]] = None,
) -> DurationText:
    """Render with one table, moving to the next finer table when it declines."""
    result = _LEVELS[level](sec, emphasize, warnings)
    if result is None:
        return render_at(sec, emphasize, Precision(level + 1), warnings)
    return result


def format_estimate(
    seconds: int,
    emphasize: bool = False,
    sig_figs: int = 2,
    warnings: Optional[List[str]] = None,
) -> DurationText:
    """Format an estimated duration.

    Parameters
    ----------
    seconds:
        Non-negative duration in seconds.
    emphasize:
        Append exclamation markers for very long durations.
    sig_figs:
        Requested precision, normally 1..4. Other values use 4.
    warnings:
        Optional list receiving diagnostics (overflow capping).

    Returns
    -------
    DurationText
        The text and the number of seconds it represents.
    """
    sec = int(seconds)
    if sec < 0:
        raise ValueError(f"duration must be >= 0, got {seconds}")
    if sec > INT32_MAX:
        if warnings is not None:
            warnings.append(f"WARNING: duration {sec}s does not fit in a 32-bit int, capped at {INT32_MAX}s")
        return DurationText(OVERFLOW_TEXT, INT32_MAX)
    return render_at(sec, emphasize, precision_for(sig_figs), warnings)


def format_elapsed(seconds: float, warnings: Optional[List[str]] = None) -> str:
    """Format an exact elapsed time as ``[Dd ][HHh][MMm]SSs``.

    Fields below the largest one present are zero-padded. Seconds are not
    shown once the duration reaches a day. A leading hour field is followed
    by a space: ``"1h 02m05s"``, ``"3d 04h05m"``.
    """
    if seconds >= INT32_MAX + 1:
        if warnings is not None:
            warnings.append(f"WARNING: cannot store {seconds:f} in a 32-bit int")
        return "more than 78 years"

    t = int(seconds)
    parts: List[str] = []
    pad = False
    show_seconds = True

    if t >= DAY:
        parts.append(f"{t // DAY}d ")
        t %= DAY
        pad = True
        show_seconds = False

    if t >= HOUR or pad:
        parts.append(f"{t // HOUR:02d}h" if pad else f"{t // HOUR}h ")
        t %= HOUR
        pad = True

    if t >= MINUTE or pad:
        parts.append(f"{t // MINUTE:02d}m" if pad else f"{t // MINUTE}m")
        t %= MINUTE
        pad = True

    if show_seconds:
        parts.append(f"{t:02d}s" if pad else f"{t}s")

    return "".join(parts)
