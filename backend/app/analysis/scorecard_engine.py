"""
Scorecard engine - combines fundamentals, valuation and governance sub-scores into
an overall IPO score, a risk level and red flags / positives.

overall_score = fundamentals*0.45 + valuation*0.30 + governance*0.25

Risk override: a high overall score with weak governance is never classified
conservative, so profitable but promoter-unfriendly offerings don't get a
false-safe label.

compute_score is a pure function of the record: no I/O, no shared state, and
no exceptions for any well-typed input.
"""
import logging

from app.analysis import policy
from app.analysis.fundamental_analyzer import score_fundamentals
from app.analysis.governance_analyzer import score_governance
from app.analysis.grading import round_score
from app.analysis.red_flags import detect_pros, detect_red_flags
from app.analysis.valuation_analyzer import score_valuation
from app.schemas.ipo import FinancialRecord
from app.schemas.scorecard import RiskLevel, ScoreBreakdown, ScoreSummary

logger = logging.getLogger(__name__)

TOTAL_TERMS = (
    len(policy.FUNDAMENTALS_WEIGHTS) + len(policy.VALUATION_WEIGHTS) + len(policy.GOVERNANCE_WEIGHTS)
)


def combine_overall(fundamentals: float, valuation: float, governance: float) -> float:
    w = policy.OVERALL_WEIGHTS
    overall = (
        fundamentals * w["fundamentals"]
        + valuation * w["valuation"]
        + governance * w["governance"]
    )
    return round_score(overall)


def classify_risk(overall: float, governance: float) -> RiskLevel:
    if overall >= policy.CONSERVATIVE_MIN_OVERALL and governance >= policy.CONSERVATIVE_MIN_GOVERNANCE:
        return RiskLevel.CONSERVATIVE
    elif overall >= policy.MODERATE_MIN_OVERALL:
        return RiskLevel.MODERATE
    return RiskLevel.AGGRESSIVE


def compute_score(record: FinancialRecord) -> ScoreSummary:
    data_gaps = []

    fundamentals, fundamental_metrics = score_fundamentals(record, data_gaps)
    valuation, valuation_metrics = score_valuation(record, data_gaps)
    governance, governance_metrics = score_governance(record, data_gaps)

    fundamentals = round_score(fundamentals)
    valuation = round_score(valuation)
    governance = round_score(governance)
    overall = combine_overall(fundamentals, valuation, governance)

    confidence = (TOTAL_TERMS - len(data_gaps)) / TOTAL_TERMS

    summary = ScoreSummary(
        fundamentals_score=fundamentals,
        valuation_score=valuation,
        governance_score=governance,
        overall_score=overall,
        risk_level=classify_risk(overall, governance),
        red_flags=detect_red_flags(record),
        pros=detect_pros(record),
        breakdown=ScoreBreakdown(
            fundamentals=fundamental_metrics,
            valuation=valuation_metrics,
            governance=governance_metrics,
            data_gaps=data_gaps,
            confidence=round(confidence, 2),
        ),
    )
    logger.debug(
        f"Scored record: F={fundamentals} V={valuation} G={governance} "
        f"overall={overall} risk={summary.risk_level.value} gaps={len(data_gaps)}"
    )
    return summary
