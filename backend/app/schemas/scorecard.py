from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RiskLevel(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MetricScore(_CamelModel):
    name: str
    value: float | None = None
    score: float | None = None  # 0-10, None when the input was missing
    weight: float = 0
    description: str = ""


class ScoreBreakdown(_CamelModel):
    fundamentals: list[MetricScore] = []
    valuation: list[MetricScore] = []
    governance: list[MetricScore] = []
    data_gaps: list[str] = []
    confidence: float = 0  # 0-1, share of scoring terms that had data


class ScoreSummary(_CamelModel):
    fundamentals_score: float
    valuation_score: float
    governance_score: float
    overall_score: float
    risk_level: RiskLevel
    red_flags: list[str] = []
    pros: list[str] = []
    breakdown: ScoreBreakdown = ScoreBreakdown()


class ScoreStats(_CamelModel):
    count: int = 0
    average_overall: float | None = None
    by_risk_level: dict[str, int] = {}
    with_red_flags: int = 0


class BatchScoreItem(_CamelModel):
    index: int
    symbol: str | None = None
    summary: ScoreSummary
    dropped_fields: list[str] = []


class BatchScoreResult(_CamelModel):
    items: list[BatchScoreItem] = []
    stats: ScoreStats = ScoreStats()


class IpoAnalysis(_CamelModel):
    symbol: str
    company_name: str = ""
    score: ScoreSummary
    summary_text: str = ""
    recommendation_text: str = ""


class AlertMessage(_CamelModel):
    symbol: str
    alert_type: str
    message: str
