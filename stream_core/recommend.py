from __future__ import annotations
from typing import Iterable, List
import logging
import math
from .types import Answer, Category, CANONICAL_CATEGORIES, Quiz, Recommendation, ScoreResult, StreamScore
from .scoring import score_quiz
from .streams import APTITUDE_STREAM, rank_streams
from .tiers import performance_level, college_tier
from .config import MIN_STREAM_MATCH, TOP_STREAMS

log = logging.getLogger(__name__)


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def percentage_of(result: ScoreResult) -> float:
    if result.max_score <= 0:
        return 0.0
    return result.total_score * 100.0 / result.max_score


def strongest_aptitude(result: ScoreResult) -> Category:
    best = CANONICAL_CATEGORIES[0]
    for cat in CANONICAL_CATEGORIES[1:]:
        if result.category_fraction(cat) > result.category_fraction(best):
            best = cat
    return best


def fallback_stream(result: ScoreResult) -> str:
    apt = strongest_aptitude(result)
    return f"{APTITUDE_STREAM[apt]} (Based on {apt.value} strength)"


def select_streams(ranked: List[StreamScore]) -> List[str]:
    picks = []
    for s in ranked[:TOP_STREAMS]:
        if s.match_fraction > MIN_STREAM_MATCH:
            picks.append(f"{s.stream} ({round_half_up(round(s.match_fraction * 100, 6))}% match)")
    return picks


def score_breakdown(result: ScoreResult) -> dict:
    out: dict = {}
    for cat in CANONICAL_CATEGORIES:
        key = cat.value.lower()
        out[f"{key}Score"] = result.per_category_score.get(cat, 0)
        out[f"{key}Max"] = result.per_category_max.get(cat, 0)
    out["dominantAptitude"] = result.dominant_aptitude.value
    return out


def format_recommendation(result: ScoreResult, ranked: List[StreamScore]) -> Recommendation:
    pct = percentage_of(result)
    streams = select_streams(ranked)
    if not streams:
        streams = [fallback_stream(result)]
        log.debug("no stream above %.2f, fallback=%s", MIN_STREAM_MATCH, streams[0])
    return Recommendation(
        total_score=result.total_score,
        max_score=result.max_score,
        percentage=pct,
        performance_level=performance_level(pct),
        college_tier=college_tier(pct),
        recommended_streams=streams,
        score_breakdown=score_breakdown(result),
        stream_scores=list(ranked),
    )


def evaluate(quiz: Quiz, answers: Iterable[Answer]) -> Recommendation:
    """Scorer -> stream ranker -> formatter, for one submission."""
    result = score_quiz(quiz, answers)
    return format_recommendation(result, rank_streams(result))
