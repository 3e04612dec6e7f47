"""Tests for the remaining-time estimates and the ETA blend."""

from __future__ import annotations

import pytest

from event_progress.analysis.rate import (
    NO_RECENT_ESTIMATE,
    eta_seconds,
    remaining_since_last,
    remaining_since_start,
    round_half_up,
)


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(0.49) == 0
    assert round_half_up(-2.5) == -3


def test_remaining_since_start() -> None:
    assert remaining_since_start(10.0, 0.25) == pytest.approx(30.0)
    with pytest.raises(ValueError):
        remaining_since_start(10.0, 0.0)


def test_remaining_since_last() -> None:
    assert remaining_since_last(0.5, 0.25, 5.0) == pytest.approx(10.0)


def test_remaining_since_last_without_progress_is_sentinel() -> None:
    assert remaining_since_last(0.5, 0.5, 5.0) == NO_RECENT_ESTIMATE
    assert remaining_since_last(0.4, 0.5, 5.0) == NO_RECENT_ESTIMATE


def test_eta_uses_average_rate_without_recent_estimate() -> None:
    assert eta_seconds(NO_RECENT_ESTIMATE, 12.4, 0.3) == 12
    assert eta_seconds(NO_RECENT_ESTIMATE, 12.5, 0.9) == 13


def test_eta_geometric_mean_before_half() -> None:
    assert eta_seconds(100.0, 400.0, 0.3) == 200
    # the smaller estimate pulls harder than in an arithmetic mean
    assert eta_seconds(10.0, 1000.0, 0.2) == 100


def test_eta_linear_blend_after_half() -> None:
    # equal weights at one half
    assert eta_seconds(100.0, 200.0, 0.5) == 150
    # recent rate reaches 75 % weight at the end
    assert eta_seconds(100.0, 200.0, 1.0) == 125


def test_eta_custom_recent_weight() -> None:
    assert eta_seconds(100.0, 200.0, 1.0, max_recent_weight=1.0) == 100


def test_eta_continuous_at_half() -> None:
    for x in (3.0, 97.0, 12345.0):
        below = eta_seconds(x, x, 0.4999999)
        at = eta_seconds(x, x, 0.5)
        assert abs(below - at) <= 1


def test_eta_jump_at_half_is_gap_between_means() -> None:
    # Below one half the geometric mean is used, from one half on an equally
    # weighted arithmetic mean. The two agree only when the estimates agree;
    # otherwise the ETA jumps by the arithmetic-geometric mean gap.
    assert eta_seconds(100.0, 400.0, 0.4999999) == 200
    assert eta_seconds(100.0, 400.0, 0.5) == 250
    # estimates within 1 % of each other stay within a second
    below = eta_seconds(1000.0, 1010.0, 0.4999999)
    at = eta_seconds(1000.0, 1010.0, 0.5)
    assert abs(below - at) <= 1
