"""
Fundamentals sub-score.

Weighted mean of six terms (weights in app.analysis.policy):
- Revenue growth (3-year CAGR) 20%, ROCE 20%
- EBITDA margin 15%, PAT margin 15%, ROE 15%
- Debt/Equity 15%, inverse: lower leverage scores higher

Growth, margin and return metrics go through threshold ladders; leverage is
interpolated. When a metric is missing its weight is redistributed among the
metrics that do have data, and with no data at all the sub-score is neutral.
"""
from app.analysis import policy
from app.analysis.grading import interpolate, ladder, weighted_average
from app.schemas.ipo import FinancialRecord
from app.schemas.scorecard import MetricScore


def _quality(score: float) -> str:
    if score >= 10:
        return "Excellent"
    elif score >= 7.5:
        return "Strong"
    elif score >= 5:
        return "Average"
    elif score >= 3:
        return "Weak"
    return "Poor"


def _score_ladder(
    name: str,
    label: str,
    value: float | None,
    steps: tuple[tuple[float, float], ...],
    floor: float,
    weight: float,
    data_gaps: list,
) -> MetricScore:
    if value is None:
        data_gaps.append(name)
        return MetricScore(name=name, weight=weight, description="Not available")

    score = ladder(value, steps, floor)
    return MetricScore(
        name=name,
        value=round(value, 2),
        score=score,
        weight=weight,
        description=f"{label} {value:.1f}%: {_quality(score)}",
    )


def _score_debt_to_equity(value: float | None, data_gaps: list) -> MetricScore:
    weight = policy.FUNDAMENTALS_WEIGHTS["debt_to_equity"]
    if value is None:
        data_gaps.append("Debt/Equity")
        return MetricScore(name="Debt/Equity", weight=weight, description="Not available")

    score = interpolate(value, policy.DEBT_TO_EQUITY_BREAKPOINTS)
    if value <= 0.5:
        context = "Low leverage"
    elif value <= 1.0:
        context = "Moderate leverage"
    elif value <= policy.HIGH_DEBT_TO_EQUITY:
        context = "Elevated leverage"
    else:
        context = "High leverage"
    return MetricScore(
        name="Debt/Equity",
        value=round(value, 2),
        score=round(score, policy.SCORE_PRECISION),
        weight=weight,
        description=f"D/E {value:.2f}: {context}",
    )


def score_fundamentals(record: FinancialRecord, data_gaps: list) -> tuple[float, list[MetricScore]]:
    """Return (sub-score, per-metric breakdown). Missing metrics are appended to data_gaps."""
    w = policy.FUNDAMENTALS_WEIGHTS
    metrics = [
        _score_ladder(
            "Revenue Growth", "Revenue CAGR", record.revenue_growth,
            policy.REVENUE_GROWTH_LADDER, policy.REVENUE_GROWTH_FLOOR, w["revenue_growth"], data_gaps,
        ),
        _score_ladder(
            "EBITDA Margin", "EBITDA margin", record.ebitda_margin,
            policy.EBITDA_MARGIN_LADDER, policy.EBITDA_MARGIN_FLOOR, w["ebitda_margin"], data_gaps,
        ),
        _score_ladder(
            "PAT Margin", "PAT margin", record.pat_margin,
            policy.PAT_MARGIN_LADDER, policy.PAT_MARGIN_FLOOR, w["pat_margin"], data_gaps,
        ),
        _score_ladder(
            "ROE", "ROE", record.roe,
            policy.ROE_LADDER, policy.ROE_FLOOR, w["roe"], data_gaps,
        ),
        _score_ladder(
            "ROCE", "ROCE", record.roce,
            policy.ROCE_LADDER, policy.ROCE_FLOOR, w["roce"], data_gaps,
        ),
        _score_debt_to_equity(record.debt_to_equity, data_gaps),
    ]
    composite = weighted_average([(m.score, m.weight) for m in metrics])
    return composite, metrics
