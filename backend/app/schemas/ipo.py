import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _finite(value: float | None) -> float | None:
    if value is None or math.isnan(value) or math.isinf(value):
        return None
    return value


class FinancialRecord(BaseModel):
    """
    Sparse financial metrics for one IPO offering.

    Every field is optional and absence means "unknown", not zero. Values are
    sanitized on construction: non-finite numbers become absent, fractions and
    holdings are clamped to their valid range, non-positive multiples become
    absent. Accepts both snake_case and the camelCase wire names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    # Percentages
    revenue_growth: float | None = None  # 3-year CAGR
    ebitda_margin: float | None = None
    pat_margin: float | None = None
    roe: float | None = None
    roce: float | None = None

    debt_to_equity: float | None = None

    # Multiples
    pe_ratio: float | None = None  # absent when earnings are negative
    pb_ratio: float | None = None
    sector_pe_median: float | None = None

    # Offer structure, fractions of the issue
    fresh_issue: float | None = None
    ofs_ratio: float | None = None

    # Promoter holding, percent
    promoter_holding: float | None = None
    post_ipo_promoter_holding: float | None = None

    # Demand signals, informational only
    subscription_qib: float | None = None
    subscription_hni: float | None = None
    subscription_retail: float | None = None
    gmp: float | None = None

    @field_validator("revenue_growth", "ebitda_margin", "pat_margin", "roe", "roce", "gmp")
    @classmethod
    def _drop_non_finite(cls, v: float | None) -> float | None:
        return _finite(v)

    @field_validator("debt_to_equity", "subscription_qib", "subscription_hni", "subscription_retail")
    @classmethod
    def _non_negative(cls, v: float | None) -> float | None:
        v = _finite(v)
        return None if v is None else max(0.0, v)

    @field_validator("pe_ratio", "pb_ratio", "sector_pe_median")
    @classmethod
    def _positive_multiple(cls, v: float | None) -> float | None:
        v = _finite(v)
        if v is None or v <= 0:
            return None
        return v

    @field_validator("fresh_issue", "ofs_ratio")
    @classmethod
    def _fraction(cls, v: float | None) -> float | None:
        v = _finite(v)
        return None if v is None else max(0.0, min(1.0, v))

    @field_validator("promoter_holding", "post_ipo_promoter_holding")
    @classmethod
    def _percentage(cls, v: float | None) -> float | None:
        v = _finite(v)
        return None if v is None else max(0.0, min(100.0, v))

    @property
    def promoter_dilution(self) -> float | None:
        """Promoter holding given up in the offering (pp), None unless both holdings are known."""
        if self.promoter_holding is None or self.post_ipo_promoter_holding is None:
            return None
        return self.promoter_holding - self.post_ipo_promoter_holding


class IpoProfile(BaseModel):
    """Descriptive offering details used only for text formatting."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    symbol: str = ""
    company_name: str = ""
    sector: str | None = None
    price_range: str | None = None
    status: Literal["upcoming", "open", "closed"] | None = None


class IpoAnalysisRequest(IpoProfile):
    record: FinancialRecord = Field(default_factory=FinancialRecord)
