"""Tests for the shared ladder / interpolation helpers."""
import math

import pytest

from app.analysis.grading import (
    clamp,
    interpolate,
    is_number,
    ladder,
    round_score,
    weighted_average,
)

STEPS = ((30.0, 10.0), (15.0, 7.5), (0.0, 5.0))
BREAKPOINTS = ((0.0, 10.0), (1.0, 6.0), (3.0, 0.0))


@pytest.mark.parametrize(
    "value, expected",
    [(100, 10.0), (30, 10.0), (29.99, 7.5), (15, 7.5), (14.99, 5.0), (0, 5.0), (-0.01, 2.5), (-80, 2.5)],
)
def test_ladder_boundaries(value, expected):
    assert ladder(value, STEPS, floor=2.5) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(-5, 10.0), (0, 10.0), (0.5, 8.0), (1.0, 6.0), (2.0, 3.0), (3.0, 0.0), (50, 0.0)],
)
def test_interpolate_between_and_beyond_breakpoints(value, expected):
    assert interpolate(value, BREAKPOINTS) == pytest.approx(expected)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, None, "12", True])
def test_invalid_inputs_are_neutral_on_ladders(bad):
    assert ladder(bad, STEPS, floor=2.5) == 5.0


@pytest.mark.parametrize("bad", [math.nan, None, "12", True])
def test_invalid_inputs_are_neutral_on_breakpoints(bad):
    assert interpolate(bad, BREAKPOINTS) == 5.0


@pytest.mark.parametrize("value, expected", [(math.inf, 0.0), (-math.inf, 10.0), (1e308 * 10, 0.0)])
def test_infinite_inputs_take_end_scores(value, expected):
    assert interpolate(value, BREAKPOINTS) == expected


def test_is_number():
    assert is_number(0)
    assert is_number(-3.5)
    assert not is_number(False)
    assert not is_number(math.nan)
    assert not is_number("1.0")


def test_clamp_defaults_to_score_range():
    assert clamp(-1) == 0.0
    assert clamp(11) == 10.0
    assert clamp(4.2) == 4.2


class TestWeightedAverage:
    def test_all_missing_is_neutral(self):
        assert weighted_average([(None, 0.5), (None, 0.5)]) == 5.0

    def test_empty_is_neutral(self):
        assert weighted_average([]) == 5.0

    def test_missing_weight_is_redistributed(self):
        # 8 alone carries the full weight, not 8 * 0.25
        assert weighted_average([(8.0, 0.25), (None, 0.75)]) == pytest.approx(8.0)

    def test_weights_are_renormalized(self):
        assert weighted_average([(10.0, 0.2), (0.0, 0.2)]) == pytest.approx(5.0)
        assert weighted_average([(10.0, 0.6), (0.0, 0.2)]) == pytest.approx(7.5)


def test_round_score_clamps_then_rounds():
    assert round_score(7.12345) == 7.12
    assert round_score(12.0) == 10.0
    assert round_score(-0.001) == 0.0
