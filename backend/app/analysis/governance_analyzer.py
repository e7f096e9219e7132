"""
Governance sub-score: offer mix 60%, promoter dilution 40%.

Offer mix rewards fresh-issue-heavy offerings, where proceeds go to the company,
over offer-for-sale-heavy ones, where existing holders cash out. The OFS share
is read from ofs_ratio, or derived as 1 - fresh_issue when only that is known.

Promoter dilution is the holding given up in the offering (pre minus post, in
percentage points). An increase in holding counts as zero dilution.
"""
from app.analysis import policy
from app.analysis.grading import interpolate, weighted_average
from app.schemas.ipo import FinancialRecord
from app.schemas.scorecard import MetricScore


def offer_for_sale_share(record: FinancialRecord) -> float | None:
    if record.ofs_ratio is not None:
        return record.ofs_ratio
    if record.fresh_issue is not None:
        return 1.0 - record.fresh_issue
    return None


def _score_offer_mix(record: FinancialRecord, data_gaps: list) -> MetricScore:
    weight = policy.GOVERNANCE_WEIGHTS["offer_mix"]
    ofs = offer_for_sale_share(record)
    if ofs is None:
        data_gaps.append("Offer Mix")
        return MetricScore(name="Offer Mix", weight=weight, description="Not available")

    score = interpolate(ofs, policy.OFFER_MIX_BREAKPOINTS)
    source = "" if record.ofs_ratio is not None else " (derived from fresh issue)"
    return MetricScore(
        name="Offer Mix",
        value=round(ofs, 4),
        score=round(score, policy.SCORE_PRECISION),
        weight=weight,
        description=f"Offer-for-sale {ofs * 100:.0f}% of issue{source}",
    )


def _score_promoter_dilution(record: FinancialRecord, data_gaps: list) -> MetricScore:
    weight = policy.GOVERNANCE_WEIGHTS["promoter_dilution"]
    dilution = record.promoter_dilution
    if dilution is None:
        data_gaps.append("Promoter Dilution")
        return MetricScore(name="Promoter Dilution", weight=weight, description="Not available")

    dilution = max(0.0, dilution)
    score = interpolate(dilution, policy.PROMOTER_DILUTION_BREAKPOINTS)
    return MetricScore(
        name="Promoter Dilution",
        value=round(dilution, 2),
        score=round(score, policy.SCORE_PRECISION),
        weight=weight,
        description=(
            f"Promoter holding {record.promoter_holding:.1f}% → "
            f"{record.post_ipo_promoter_holding:.1f}% ({dilution:.1f} pp)"
        ),
    )


def score_governance(record: FinancialRecord, data_gaps: list) -> tuple[float, list[MetricScore]]:
    metrics = [_score_offer_mix(record, data_gaps), _score_promoter_dilution(record, data_gaps)]
    composite = weighted_average([(m.score, m.weight) for m in metrics])
    return composite, metrics
