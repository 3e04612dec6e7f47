"""Tests for duration formatting (estimates and elapsed times)."""

from __future__ import annotations

from typing import List

import pytest

from event_progress.analysis.durations import (
    DurationText,
    Precision,
    format_elapsed,
    format_estimate,
    precision_for,
    render_at,
)
from event_progress.analysis.sigfigs import INT32_MAX


# -----------------------------------------------------------------------
# Rounding to what the user sees
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "sec, sig_figs, text, seconds",
    [
        (3, 1, " 3s", 3),
        (44, 1, "40s", 40),
        (125, 1, " 2m", 120),
        (1500, 1, "30m", 1800),
        (7200, 1, " 2h", 7200),
        (1_000_000, 1, "10d", 864000),
        (125, 2, "2m", 120),
        (61, 2, "1m", 60),
        (54, 2, "54s", 54),
        (569, 2, "9m", 540),
        (570, 2, "10m", 600),
        (1500, 2, "25m", 1500),
        (3900, 2, "1h10m", 4200),
        (50000, 2, "14h", 50400),
        (129599, 2, "1d12h", 129600),
        (700, 3, "11m40s", 700),
        (84000, 3, "23h20m", 84000),
        (862199, 3, "9d23h", 860400),
        (862200, 3, "10d00h", 864000),
        (59, 4, "59s", 59),
        (125, 4, " 2m05s", 125),
        (3598, 4, "59m58s", 3598),
        (3725, 4, "1h02m10s", 3730),
        (88199, 4, "24h30m", 88200),
        (88200, 4, "1d00h30m", 88200),
        (90000, 4, "1d01h00m", 90000),
    ],
)
def test_format_estimate_table(sec: int, sig_figs: int, text: str, seconds: int) -> None:
    assert format_estimate(sec, False, sig_figs) == DurationText(text, seconds)


# -----------------------------------------------------------------------
# Escalation from one to two significant figures
# -----------------------------------------------------------------------


@pytest.mark.parametrize("sec", [7, 55, 61, 89, 600, 899, 3600, 5399, 34200, 86400, 129599])
def test_one_sigfig_escalates_on_ambiguous_unit(sec: int) -> None:
    assert format_estimate(sec, False, 1) == format_estimate(sec, False, 2)


def test_61_seconds_at_one_sigfig() -> None:
    assert format_estimate(61, False, 1) == DurationText("1m", 60)


def test_one_sigfig_hour_escalation() -> None:
    assert format_estimate(3600, False, 1).text == "1h00m"
    assert format_estimate(86400, False, 1).text == "1d00h"


def test_render_at_finest_level_never_declines() -> None:
    assert render_at(61, False, Precision.FOUR) == DurationText(" 1m01s", 61)


# -----------------------------------------------------------------------
# Emphasis markers
# -----------------------------------------------------------------------


def test_emphasis_markers_escalate() -> None:
    assert format_estimate(3 * 86400, True, 1).text == "3d (!)"
    assert format_estimate(1_000_000, True, 1).text == "10d (!!!)"
    assert format_estimate(200 * 86400, True, 3).text.endswith(" (!!!!!)")
    assert format_estimate(200 * 86400, True, 4).text == "200d00h (!!!!!)"
    assert format_estimate(2000 * 86400, True, 4).text == "2000d (!!!!!!!)"


def test_no_emphasis_for_short_durations() -> None:
    assert "!" not in format_estimate(3000, True, 2).text
    assert "!" not in format_estimate(3 * 86400, False, 1).text


# -----------------------------------------------------------------------
# Precision selection and errors
# -----------------------------------------------------------------------


def test_out_of_range_precision_uses_finest_table() -> None:
    assert precision_for(9) is Precision.FOUR
    assert precision_for(0) is Precision.FOUR
    assert format_estimate(125, False, 9) == DurationText(" 2m05s", 125)


def test_negative_duration_rejected() -> None:
    with pytest.raises(ValueError):
        format_estimate(-1)


def test_overflowing_duration_is_capped() -> None:
    warnings: List[str] = []
    out = format_estimate(3_000_000_000, True, 2, warnings)
    assert out == DurationText("more than 68 years", INT32_MAX)
    assert len(warnings) == 1
    assert warnings[0].startswith("WARNING:")


def test_largest_int32_duration_still_formats() -> None:
    warnings: List[str] = []
    out = format_estimate(INT32_MAX, False, 2, warnings)
    assert out.text == "25000d"
    assert warnings == []


@pytest.mark.parametrize("level", [1, 2, 3, 4])
def test_represented_seconds_never_decrease(level: int) -> None:
    secs = set(range(0, 200_000)) | set(range(200_000, 200_000_000, 997))
    for edge in (856800, 862200, 863700, 8638200, 8640000, 86400000):
        secs |= set(range(edge - 50, edge + 50))
    prev = -1
    for s in sorted(secs):
        rep = format_estimate(s, False, level).seconds
        assert rep >= prev, (level, s)
        prev = rep


# -----------------------------------------------------------------------
# Elapsed time
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "sec, text",
    [
        (0, "0s"),
        (5, "5s"),
        (59.9, "59s"),
        (65, "1m05s"),
        (3600, "1h 00m00s"),
        (3725, "1h 02m05s"),
        (90061, "1d 01h01m"),
        (1999998, "23d 03h33m"),
    ],
)
def test_format_elapsed(sec: float, text: str) -> None:
    assert format_elapsed(sec) == text


def test_format_elapsed_overflow() -> None:
    warnings: List[str] = []
    assert format_elapsed(3e9, warnings) == "more than 78 years"
    assert len(warnings) == 1
