from __future__ import annotations
from typing import Dict, List, Tuple
from .types import Category, ScoreResult, StreamScore

# stream -> category weights; row order is the tie-break priority
STREAM_WEIGHTS: Tuple[Tuple[str, Dict[Category, float]], ...] = (
    ("Science", {Category.MATHEMATICAL: 0.4, Category.TECHNICAL: 0.4, Category.ANALYTICAL: 0.2}),
    ("Commerce", {Category.MATHEMATICAL: 0.3, Category.ANALYTICAL: 0.4, Category.VERBAL: 0.3}),
    ("Arts", {Category.VERBAL: 0.6, Category.ANALYTICAL: 0.4}),
)

APTITUDE_STREAM: Dict[Category, str] = {
    Category.MATHEMATICAL: "Science",
    Category.TECHNICAL: "Science",
    Category.ANALYTICAL: "Commerce",
    Category.VERBAL: "Arts",
}

STREAM_INFO: Dict[str, str] = {
    "Science": "Mathematics, Physics, Chemistry, Biology - leads to Engineering, Medical, Research",
    "Commerce": "Mathematics, Economics, Accounting, Business Studies - leads to CA, MBA, Finance",
    "Arts": "Languages, Social Sciences, History, Psychology - leads to Literature, Law, Social Work",
}


def stream_match(result: ScoreResult, weights: Dict[Category, float]) -> float:
    # rounded so that mathematically equal matches compare equal
    return round(sum(w * result.category_fraction(cat) for cat, w in weights.items()), 10)


def rank_streams(result: ScoreResult) -> List[StreamScore]:
    scores = [StreamScore(name, stream_match(result, weights)) for name, weights in STREAM_WEIGHTS]
    # sorted() is stable, so equal matches keep Science > Commerce > Arts
    return sorted(scores, key=lambda s: s.match_fraction, reverse=True)


def scoring_formulas() -> Dict[str, str]:
    out = {}
    for name, weights in STREAM_WEIGHTS:
        out[name] = " + ".join(f"{round(w * 100)}% {cat.value}" for cat, w in weights.items())
    return out
