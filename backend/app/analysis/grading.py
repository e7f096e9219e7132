"""Shared scoring utilities: clamping, threshold ladders and breakpoint interpolation."""
import math

from app.analysis.policy import MAX_SCORE, MIN_SCORE, NEUTRAL_SCORE, SCORE_PRECISION


def is_number(value) -> bool:
    """True for finite ints/floats. bool is rejected even though it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (math.isnan(value) or math.isinf(value))


def clamp(score: float, low: float = MIN_SCORE, high: float = MAX_SCORE) -> float:
    if score < low:
        return low
    return high if score > high else score


def ladder(value: float, steps: tuple[tuple[float, float], ...], floor: float) -> float:
    """Threshold ladder: the first (threshold, score) step with value >= threshold wins.

    Steps must be ordered from the highest threshold down. Values below every
    threshold score `floor`.
    """
    if not is_number(value):
        return NEUTRAL_SCORE

    for threshold, score in steps:
        if value >= threshold:
            return float(score)
    return float(floor)


def interpolate(value: float, breakpoints: tuple[tuple[float, float], ...]) -> float:
    """Piecewise-linear score over (metric, score) points sorted by metric.

    Metrics past either end take that end's score. Infinity counts as past the
    end, so a multiple or ratio that overflows still scores at the extreme.
    NaN and non-numbers score neutral.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        return NEUTRAL_SCORE

    low_metric, low_score = breakpoints[0]
    high_metric, high_score = breakpoints[-1]
    if value <= low_metric:
        return float(low_score)
    if value >= high_metric:
        return float(high_score)

    # value > low_metric here, so each segment we stop on has x2 > x1
    for (x1, s1), (x2, s2) in zip(breakpoints, breakpoints[1:]):
        if value <= x2:
            return s1 + (value - x1) / (x2 - x1) * (s2 - s1)
    return float(high_score)


def weighted_average(items: list[tuple[float | None, float]]) -> float:
    """
    Weighted mean of (score, weight) pairs, redistributing weight from missing terms.

    A term is missing when its score is None. With no present terms the result
    is the neutral score, never zero.
    """
    available = [(s, w) for s, w in items if s is not None and w > 0]
    if not available:
        return NEUTRAL_SCORE
    total_weight = sum(w for _, w in available)
    return clamp(sum(s * (w / total_weight) for s, w in available))


def round_score(score: float) -> float:
    return round(clamp(score), SCORE_PRECISION)
