"""
Scoring service used by ingestion and recompute callers.

Callers hand over raw mappings straight from a scraper transform, seed file or
admin edit. A field that fails validation is dropped and reported rather than
failing its record, and a record never fails its batch: the worst case is the
neutral all-absent score.
"""
import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from app.analysis.scorecard_engine import compute_score
from app.schemas.ipo import FinancialRecord
from app.schemas.scorecard import (
    BatchScoreItem,
    BatchScoreResult,
    RiskLevel,
    ScoreStats,
    ScoreSummary,
)

logger = logging.getLogger(__name__)

WHOLE_RECORD = "<record>"


def _field_keys() -> dict[str, set[str]]:
    """Field name -> every key (attribute name and camelCase alias) that can carry it."""
    keys = {}
    for name, info in FinancialRecord.model_fields.items():
        keys[name] = {name, info.alias or name}
    return keys


def coerce_record(raw: Any) -> tuple[FinancialRecord, list[str]]:
    """
    Build a FinancialRecord from a raw mapping, dropping fields that don't validate.

    Returns (record, dropped_keys). A non-mapping input yields the all-absent
    record with WHOLE_RECORD reported as dropped.
    """
    if isinstance(raw, FinancialRecord):
        return raw, []
    if not isinstance(raw, Mapping):
        return FinancialRecord(), [WHOLE_RECORD]

    data = {k: v for k, v in raw.items() if isinstance(k, str)}
    dropped = []
    field_keys = _field_keys()

    # Each pass removes at least one key, so this terminates
    while True:
        try:
            return FinancialRecord.model_validate(data), dropped
        except ValidationError as e:
            bad_locs = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}

        removed = False
        for keys in field_keys.values():
            if keys & bad_locs:
                for key in sorted(keys & set(data)):
                    data.pop(key)
                    dropped.append(key)
                    removed = True
        if not removed:
            return FinancialRecord(), [WHOLE_RECORD]


def summarize(summaries: list[ScoreSummary]) -> ScoreStats:
    by_risk = {level.value: 0 for level in RiskLevel}
    for s in summaries:
        by_risk[s.risk_level.value] += 1

    average = None
    if summaries:
        average = round(sum(s.overall_score for s in summaries) / len(summaries), 2)

    return ScoreStats(
        count=len(summaries),
        average_overall=average,
        by_risk_level=by_risk,
        with_red_flags=sum(1 for s in summaries if s.red_flags),
    )


class ScoringService:
    def score(self, record: FinancialRecord) -> ScoreSummary:
        return compute_score(record)

    def score_raw(self, raw: Any) -> tuple[ScoreSummary, list[str]]:
        record, dropped = coerce_record(raw)
        return compute_score(record), dropped

    def score_records(self, raws: Iterable[Any]) -> BatchScoreResult:
        start = time.perf_counter()
        items = []

        for index, raw in enumerate(raws):
            summary, dropped = self.score_raw(raw)
            symbol = raw.get("symbol") if isinstance(raw, Mapping) else None
            if not isinstance(symbol, str):
                symbol = None
            if dropped:
                logger.warning(f"Record {index} ({symbol or 'no symbol'}): dropped invalid fields {dropped}")
            items.append(BatchScoreItem(index=index, symbol=symbol, summary=summary, dropped_fields=dropped))

        stats = summarize([item.summary for item in items])
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Scored batch of {stats.count} records in {elapsed_ms:.1f}ms "
            f"(avg overall={stats.average_overall}, risk={stats.by_risk_level})"
        )
        return BatchScoreResult(items=items, stats=stats)
