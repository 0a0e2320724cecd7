from __future__ import annotations
import json, pathlib
from typing import Any, Dict, List, Optional
from .types import Question, Quiz
from .scoring import parse_category

DATA_PATH = pathlib.Path(__file__).resolve().parent / "data" / "quizzes.json"

def question_from_dict(raw: Dict[str, Any]) -> Question:
    label = str(raw.get("category", ""))
    return Question(
        id=int(raw["id"]),
        category=parse_category(label),
        correct_option=str(raw["correctAnswer"]).strip().upper(),
        points=int(raw.get("points", 1)),
        text=str(raw.get("question", "")),
        options={str(k).upper(): str(v) for k, v in (raw.get("options") or {}).items()},
        category_label=label,
    )

def quiz_from_dict(raw: Dict[str, Any]) -> Quiz:
    qs = raw.get("questions") or []
    if not isinstance(qs, list):
        raise ValueError(f"quiz {raw.get('id')}: questions must be a list")
    return Quiz(
        id=int(raw["id"]),
        title=str(raw.get("title", "")),
        description=str(raw.get("description", "")),
        class_level=raw.get("classLevel"),
        questions=tuple(question_from_dict(q) for q in qs),
    )

def load_quizzes() -> List[Quiz]:
    data = DATA_PATH.read_text(encoding="utf-8")
    raw = json.loads(data)
    return [quiz_from_dict(r) for r in raw]

def get_quiz(quiz_id: int) -> Optional[Quiz]:
    return next((q for q in load_quizzes() if q.id == int(quiz_id)), None)

def quizzes_for_class(class_level: str | None) -> List[Quiz]:
    want = (class_level or "").strip().lower()
    out = []
    for q in load_quizzes():
        lvl = (q.class_level or "").strip().lower()
        if not lvl or not want or lvl == want:
            out.append(q)
    return out
