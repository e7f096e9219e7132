"""Red flag / positive rules: thresholds, ordering, missing inputs."""
import pytest

from app.analysis.red_flags import (
    FRESH_ISSUE_PRO,
    HIGH_LEVERAGE_FLAG,
    HIGH_OFS_FLAG,
    HIGH_ROCE_PRO,
    PROMOTER_DILUTION_FLAG,
    RICH_VALUATION_FLAG,
    STRONG_GROWTH_PRO,
    detect_pros,
    detect_red_flags,
)
from app.schemas.ipo import FinancialRecord


def test_flag_texts_are_fixed():
    assert HIGH_OFS_FLAG == "High Offer-for-Sale ratio — promoters/investors cashing out heavily"
    assert FRESH_ISSUE_PRO == "Majority fresh issue — proceeds fund growth, not exits"


@pytest.mark.parametrize(
    "fields, flagged",
    [
        ({"ofs_ratio": 0.75}, False),
        ({"ofs_ratio": 0.76}, True),
        ({"pe_ratio": 33, "sector_pe_median": 22}, False),
        ({"pe_ratio": 33.1, "sector_pe_median": 22}, True),
        ({"pe_ratio": 99}, False),
        ({"debt_to_equity": 2.0}, False),
        ({"debt_to_equity": 2.01}, True),
        ({"promoter_holding": 80, "post_ipo_promoter_holding": 60}, False),
        ({"promoter_holding": 80, "post_ipo_promoter_holding": 59.9}, True),
        ({"promoter_holding": 80}, False),
    ],
)
def test_red_flag_thresholds_are_strict(fields, flagged):
    assert bool(detect_red_flags(FinancialRecord(**fields))) is flagged


@pytest.mark.parametrize(
    "fields, expected",
    [
        ({"revenue_growth": 24.9}, []),
        ({"revenue_growth": 25}, [STRONG_GROWTH_PRO]),
        ({"roce": 19.9}, []),
        ({"roce": 20}, [HIGH_ROCE_PRO]),
        ({"fresh_issue": 0.69}, []),
        ({"fresh_issue": 0.7}, [FRESH_ISSUE_PRO]),
    ],
)
def test_pro_thresholds_are_inclusive(fields, expected):
    assert detect_pros(FinancialRecord(**fields)) == expected


def test_ofs_only_record_raises_just_the_ofs_flag():
    record = FinancialRecord(ofs_ratio=0.9)
    assert detect_red_flags(record) == [HIGH_OFS_FLAG]
    assert detect_pros(record) == []


def test_rules_keep_detection_order():
    record = FinancialRecord(
        ofs_ratio=0.9,
        pe_ratio=218,
        sector_pe_median=42,
        debt_to_equity=2.85,
        promoter_holding=100,
        post_ipo_promoter_holding=70,
        revenue_growth=85,
        roce=30,
        fresh_issue=0.8,
    )
    assert detect_red_flags(record) == [
        HIGH_OFS_FLAG,
        RICH_VALUATION_FLAG,
        HIGH_LEVERAGE_FLAG,
        PROMOTER_DILUTION_FLAG,
    ]
    assert detect_pros(record) == [STRONG_GROWTH_PRO, HIGH_ROCE_PRO, FRESH_ISSUE_PRO]


def test_empty_record_has_no_flags():
    assert detect_red_flags(FinancialRecord()) == []
    assert detect_pros(FinancialRecord()) == []


def test_derived_ofs_does_not_raise_ofs_flag():
    # the OFS rule reads the disclosed ratio only
    assert detect_red_flags(FinancialRecord(fresh_issue=0.0)) == []
