from typing import Any

from fastapi import APIRouter, Body, Depends

from app.analysis.narrative import (
    build_recommendation_text,
    build_summary_text,
    format_alert_message,
)
from app.api.validation import validate_batch_size, validate_symbol
from app.schemas.ipo import FinancialRecord, IpoAnalysisRequest
from app.schemas.scorecard import AlertMessage, BatchScoreResult, IpoAnalysis, ScoreSummary
from app.services.scoring_service import ScoringService

router = APIRouter(prefix="/api/ipo", tags=["scoring"])


def get_scoring_service() -> ScoringService:
    return ScoringService()


@router.post("/score", response_model=ScoreSummary)
async def score_record(
    record: FinancialRecord,
    service: ScoringService = Depends(get_scoring_service),
):
    return service.score(record)


@router.post("/score/batch", response_model=BatchScoreResult)
async def score_batch(
    records: list[Any] = Body(...),
    service: ScoringService = Depends(get_scoring_service),
):
    """Score raw records for ingestion. Invalid fields are dropped per record, never per batch."""
    validate_batch_size(len(records))
    return service.score_records(records)


@router.post("/{symbol}/analysis", response_model=IpoAnalysis)
async def get_analysis(
    symbol: str,
    request: IpoAnalysisRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    symbol = validate_symbol(symbol)
    profile = request.model_copy(update={"symbol": symbol})
    summary = service.score(request.record)
    return IpoAnalysis(
        symbol=symbol,
        company_name=profile.company_name,
        score=summary,
        summary_text=build_summary_text(summary, profile),
        recommendation_text=build_recommendation_text(summary),
    )


@router.post("/{symbol}/alert", response_model=AlertMessage)
async def get_alert(
    symbol: str,
    request: IpoAnalysisRequest,
    alert_type: str = "new_ipo",
    service: ScoringService = Depends(get_scoring_service),
):
    symbol = validate_symbol(symbol)
    profile = request.model_copy(update={"symbol": symbol})
    summary = service.score(request.record)
    message = format_alert_message(summary, profile, alert_type, gmp=request.record.gmp)
    return AlertMessage(symbol=symbol, alert_type=alert_type, message=message)
