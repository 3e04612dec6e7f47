"""Tests for print-point planning."""

from __future__ import annotations

import numpy as np
import pytest

from event_progress.models.plan import plan_print_points


def test_plan_hundred_items_two_decades() -> None:
    plan = plan_print_points(100, 2)
    expected = list(range(1, 11)) + list(range(20, 100, 10)) + list(range(91, 100))
    assert list(plan) == sorted(set(expected))


def test_plan_million_items() -> None:
    plan = plan_print_points(1_000_000, 6)
    pts = list(plan)
    assert pts[:5] == [1, 2, 3, 4, 5]
    assert pts[-1] == 999_999
    assert 100_000 in plan
    assert 999_990 in plan
    assert 0 not in plan


@pytest.mark.parametrize("max_decades", range(1, 10))
def test_plan_invariants(max_decades: int) -> None:
    for total in list(range(1, 300)) + [999, 1000, 1001, 123_457, 2**31 + 11]:
        plan = plan_print_points(total, max_decades)
        pts = plan.points
        assert pts.dtype == np.int64
        assert np.all(np.diff(pts) > 0)
        assert not np.any(pts == 0)
        assert np.all(pts < total)
        if total > 1:
            assert pts[-1] == total - 1
        if total > 3:
            assert pts[0] == 1 and pts[1] == 2


def test_plan_tiny_totals() -> None:
    assert list(plan_print_points(1, 6)) == []
    assert list(plan_print_points(2, 6)) == [1]
    assert list(plan_print_points(3, 6)) == [1, 2]


def test_plan_more_decades_is_a_superset() -> None:
    coarse = set(plan_print_points(10**6, 2))
    fine = set(plan_print_points(10**6, 5))
    assert coarse < fine


def test_plan_rejects_bad_arguments() -> None:
    with pytest.raises(ValueError):
        plan_print_points(0, 3)
    with pytest.raises(ValueError):
        plan_print_points(100, 0)
    with pytest.raises(ValueError):
        plan_print_points(100, 10)
