from __future__ import annotations
from typing import List
from .types import Quiz, Category
from .scoring import VALID_OPTIONS, parse_category
def validate_quiz(quiz: Quiz) -> List[str]:
    issues = []
    seen = set()
    if not quiz.questions:
        issues.append(f"quiz {quiz.id}: no questions")
    for q in quiz.questions:
        if q.id in seen: issues.append(f"quiz {quiz.id}: duplicate question id {q.id}")
        seen.add(q.id)
        if str(q.correct_option or "").strip().upper() not in VALID_OPTIONS:
            issues.append(f"quiz {quiz.id} q{q.id}: correct option {q.correct_option!r} not in A-D")
        if int(q.points) <= 0:
            issues.append(f"quiz {quiz.id} q{q.id}: points must be positive, got {q.points}")
        if parse_category(q.category) is Category.UNRECOGNIZED:
            issues.append(f"quiz {quiz.id} q{q.id}: unrecognized category {q.category_label!r}")
        if q.options and str(q.correct_option).strip().upper() not in {k.upper() for k in q.options}:
            issues.append(f"quiz {quiz.id} q{q.id}: correct option has no label")
    return issues
