from __future__ import annotations
from typing import Dict, Iterable, Optional
import logging
from .types import Answer, Category, CANONICAL_CATEGORIES, Quiz, ScoreResult
from . import config

log = logging.getLogger(__name__)

_CATEGORY_ALIASES: Dict[str, Category] = {
    "mathematical": Category.MATHEMATICAL,
    "mathematics": Category.MATHEMATICAL,
    "numerical": Category.MATHEMATICAL,
    "verbal": Category.VERBAL,
    "language": Category.VERBAL,
    "english": Category.VERBAL,
    "analytical": Category.ANALYTICAL,
    "logical": Category.ANALYTICAL,
    "reasoning": Category.ANALYTICAL,
    "technical": Category.TECHNICAL,
    "science": Category.TECHNICAL,
    "physics": Category.TECHNICAL,
    "chemistry": Category.TECHNICAL,
}

VALID_OPTIONS = frozenset("ABCD")


def parse_category(label) -> Category:
    if isinstance(label, Category):
        return label
    if not isinstance(label, str):
        return Category.UNRECOGNIZED
    return _CATEGORY_ALIASES.get(label.strip().lower(), Category.UNRECOGNIZED)


def normalize_option(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    v = value.upper()
    return v if v in VALID_OPTIONS else None


def answer_map(answers: Iterable[Answer]) -> Dict[int, Optional[str]]:
    """question_id -> selected option; a repeated question id keeps the last answer."""
    out: Dict[int, Optional[str]] = {}
    for ans in answers:
        out[ans.question_id] = ans.selected_option
    return out


def score_quiz(quiz: Quiz, answers: Iterable[Answer]) -> ScoreResult:
    """
    Match a submission against the quiz answer key.
    Unanswered or malformed options count as incorrect; questions outside the
    four canonical categories count toward total/max only.
    """
    chosen = answer_map(answers)
    total = 0; max_score = 0
    earned = {c: 0 for c in CANONICAL_CATEGORIES}
    maxima = {c: 0 for c in CANONICAL_CATEGORIES}

    for q in quiz.questions:
        pts = int(q.points)
        max_score += pts
        cat = parse_category(q.category)
        bucketed = cat in maxima
        if bucketed:
            maxima[cat] += pts

        picked = normalize_option(chosen.get(q.id))
        correct = picked is not None and picked == normalize_option(q.correct_option)
        if correct:
            total += pts
            if bucketed:
                earned[cat] += pts
        if config.DEBUG_TRACE:
            log.debug("trace quiz=%s q=%s cat=%s picked=%s correct=%s pts=%d",
                      quiz.id, q.id, cat.value, picked, correct, pts)

    log.debug("scored quiz=%s total=%d/%d", quiz.id, total, max_score)
    return ScoreResult(
        total_score=total,
        max_score=max_score,
        per_category_score=earned,
        per_category_max=maxima,
    )
