"""
Valuation sub-score: P/E 70%, P/B 30%.

P/E is scored relative to the sector median when both sides are known and on an
absolute table when only the P/E is. P/B has no peer benchmark in an offer
document and is always absolute. Missing terms hand their weight to the other
one; with neither present the sub-score is neutral.
"""
import logging

from app.analysis import policy
from app.analysis.grading import interpolate, weighted_average
from app.analysis.sector_benchmarks import describe_relative, score_pe
from app.schemas.ipo import FinancialRecord
from app.schemas.scorecard import MetricScore

logger = logging.getLogger(__name__)


def _score_pe_term(record: FinancialRecord, data_gaps: list) -> MetricScore:
    weight = policy.VALUATION_WEIGHTS["pe_ratio"]
    pe = record.pe_ratio
    if pe is None:
        data_gaps.append("P/E Ratio")
        return MetricScore(name="P/E Ratio", weight=weight, description="Not available")

    score, basis = score_pe(pe, record.sector_pe_median)
    if basis == "sector":
        desc = describe_relative(pe, record.sector_pe_median)
    else:
        logger.debug(f"No sector median for P/E {pe}, using absolute table")
        desc = f"P/E {pe:.1f} (no sector median, absolute scale)"
    return MetricScore(
        name="P/E Ratio",
        value=round(pe, 2),
        score=round(score, policy.SCORE_PRECISION),
        weight=weight,
        description=desc,
    )


def _score_pb_term(record: FinancialRecord, data_gaps: list) -> MetricScore:
    weight = policy.VALUATION_WEIGHTS["pb_ratio"]
    pb = record.pb_ratio
    if pb is None:
        data_gaps.append("P/B Ratio")
        return MetricScore(name="P/B Ratio", weight=weight, description="Not available")

    score = interpolate(pb, policy.PB_BREAKPOINTS)
    return MetricScore(
        name="P/B Ratio",
        value=round(pb, 2),
        score=round(score, policy.SCORE_PRECISION),
        weight=weight,
        description=f"P/B {pb:.1f}",
    )


def score_valuation(record: FinancialRecord, data_gaps: list) -> tuple[float, list[MetricScore]]:
    metrics = [_score_pe_term(record, data_gaps), _score_pb_term(record, data_gaps)]
    composite = weighted_average([(m.score, m.weight) for m in metrics])
    return composite, metrics
