"""Tests for significant-figure rounding and precision selection."""

from __future__ import annotations

from typing import List

import pytest

from event_progress.analysis.sigfigs import (
    EXACT_SIGFIGS,
    INT32_MAX,
    choose_total_sigfigs,
    eta_sigfigs,
    sigfigs,
)


# -----------------------------------------------------------------------
# sigfigs
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (5.4, 1, 5),
        (10, 1, 10),
        (15, 1, 20),
        (123, 2, 120),
        (1234, 2, 1200),
        (1249, 2, 1200),
        (1250, 2, 1300),
        (999, 2, 1000),
        (100, 2, 100),
        (1009, 2, 1000),
        (1010, 2, 1000),
        (24855.13, 4, 24860),
    ],
)
def test_sigfigs_rounding(value: float, digits: int, expected: int) -> None:
    assert sigfigs(value, digits) == expected


def test_sigfigs_never_decreases() -> None:
    for digits in (1, 2, 3):
        prev = 0
        for n in range(0, 30000):
            r = sigfigs(n, digits)
            assert r >= prev, (digits, n)
            prev = r


def test_sigfigs_caps_at_int32() -> None:
    warnings: List[str] = []
    assert sigfigs(3e9, 2, warnings) == INT32_MAX
    assert len(warnings) == 1
    assert warnings[0].startswith("WARNING:")


@pytest.mark.parametrize("digits", [0, 10, -3])
def test_sigfigs_bad_digit_count_falls_back(digits: int) -> None:
    warnings: List[str] = []
    assert sigfigs(123.6, digits, warnings) == 124
    assert "unreasonable" in warnings[0]


def test_sigfigs_without_warning_list_is_silent() -> None:
    assert sigfigs(3e9, 2) == INT32_MAX
    assert sigfigs(42, 12) == 42


# -----------------------------------------------------------------------
# choose_total_sigfigs
# -----------------------------------------------------------------------


def test_total_sigfigs_exact_when_no_eta() -> None:
    assert choose_total_sigfigs(0, 500) == EXACT_SIGFIGS
    assert choose_total_sigfigs(-3, 500) == EXACT_SIGFIGS


def test_total_sigfigs_eta_dominates() -> None:
    assert choose_total_sigfigs(5000, 10) == 1
    assert choose_total_sigfigs(10, 0) == 1


@pytest.mark.parametrize(
    "eta, elapsed, expected",
    [
        (670, 12345, 4),
        (7700, 9876, 2),
        (870, 99, 2),
        (50, 120, 3),
    ],
)
def test_total_sigfigs_elapsed_contributes(eta: int, elapsed: int, expected: int) -> None:
    assert choose_total_sigfigs(eta, elapsed) == expected


def test_eta_sigfigs_switches_at_ten_percent() -> None:
    assert eta_sigfigs(0.0001) == 1
    assert eta_sigfigs(0.09) == 1
    assert eta_sigfigs(0.1) == 2
    assert eta_sigfigs(0.9) == 2
