"""
Red flag and positive detection.

Rules run in a fixed order against the raw record, not the normalized scores.
Each rule appends at most one string and skips silently when its inputs are
missing. The strings are consumed verbatim by alert formatting, so they are
part of the output contract.
"""
from app.analysis import policy
from app.schemas.ipo import FinancialRecord

HIGH_OFS_FLAG = "High Offer-for-Sale ratio — promoters/investors cashing out heavily"
RICH_VALUATION_FLAG = "Valuation rich vs sector peers"
HIGH_LEVERAGE_FLAG = "High leverage"
PROMOTER_DILUTION_FLAG = "Significant promoter dilution post-offering"

STRONG_GROWTH_PRO = "Strong revenue growth"
HIGH_ROCE_PRO = "High capital efficiency (ROCE)"
FRESH_ISSUE_PRO = "Majority fresh issue — proceeds fund growth, not exits"


def detect_red_flags(record: FinancialRecord) -> list[str]:
    flags = []

    if record.ofs_ratio is not None and record.ofs_ratio > policy.HIGH_OFS_RATIO:
        flags.append(HIGH_OFS_FLAG)

    if (
        record.pe_ratio is not None
        and record.sector_pe_median is not None
        and record.pe_ratio > policy.RICH_PE_MULTIPLE * record.sector_pe_median
    ):
        flags.append(RICH_VALUATION_FLAG)

    if record.debt_to_equity is not None and record.debt_to_equity > policy.HIGH_DEBT_TO_EQUITY:
        flags.append(HIGH_LEVERAGE_FLAG)

    dilution = record.promoter_dilution
    if dilution is not None and dilution > policy.SIGNIFICANT_DILUTION_PP:
        flags.append(PROMOTER_DILUTION_FLAG)

    return flags


def detect_pros(record: FinancialRecord) -> list[str]:
    pros = []

    if record.revenue_growth is not None and record.revenue_growth >= policy.STRONG_REVENUE_GROWTH:
        pros.append(STRONG_GROWTH_PRO)

    if record.roce is not None and record.roce >= policy.HIGH_ROCE:
        pros.append(HIGH_ROCE_PRO)

    if record.fresh_issue is not None and record.fresh_issue >= policy.MAJORITY_FRESH_ISSUE:
        pros.append(FRESH_ISSUE_PRO)

    return pros
