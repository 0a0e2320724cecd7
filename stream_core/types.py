from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Category(str, Enum):
    MATHEMATICAL = "Mathematical"
    VERBAL = "Verbal"
    ANALYTICAL = "Analytical"
    TECHNICAL = "Technical"
    UNRECOGNIZED = "Unrecognized"


# listed order doubles as the tie-break order
CANONICAL_CATEGORIES: Tuple[Category, ...] = (
    Category.MATHEMATICAL,
    Category.VERBAL,
    Category.ANALYTICAL,
    Category.TECHNICAL,
)


@dataclass(frozen=True)
class Question:
    id: int; category: Category; correct_option: str
    points: int = 1
    text: str = ""
    options: Dict[str, str] = field(default_factory=dict)
    category_label: str = ""


@dataclass(frozen=True)
class Quiz:
    id: int; title: str
    questions: Tuple[Question, ...] = ()
    description: str = ""
    class_level: Optional[str] = None


@dataclass(frozen=True)
class Answer:
    question_id: int; selected_option: Optional[str]; time_spent: Optional[int] = None


@dataclass(frozen=True)
class ScoreResult:
    total_score: int
    max_score: int
    per_category_score: Dict[Category, int]
    per_category_max: Dict[Category, int]

    def category_fraction(self, cat: Category) -> float:
        mx = self.per_category_max.get(cat, 0)
        if mx <= 0:
            return 0.0
        return self.per_category_score.get(cat, 0) / mx

    @property
    def dominant_aptitude(self) -> Category:
        """Canonical category with the most raw points earned."""
        best = CANONICAL_CATEGORIES[0]
        for cat in CANONICAL_CATEGORIES[1:]:
            if self.per_category_score.get(cat, 0) > self.per_category_score.get(best, 0):
                best = cat
        return best


@dataclass(frozen=True)
class StreamScore:
    stream: str
    match_fraction: float


@dataclass(frozen=True)
class Recommendation:
    total_score: int
    max_score: int
    percentage: float
    performance_level: str
    college_tier: str
    recommended_streams: List[str]
    score_breakdown: Dict[str, object] = field(default_factory=dict)
    stream_scores: List[StreamScore] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "totalScore": self.total_score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "performanceLevel": self.performance_level,
            "collegeTier": self.college_tier,
            "recommendedStreams": list(self.recommended_streams),
            "scoreBreakdown": dict(self.score_breakdown),
            "streamScores": [
                {"stream": s.stream, "matchFraction": round(s.match_fraction, 4)}
                for s in self.stream_scores
            ],
        }


@dataclass(frozen=True)
class College:
    id: int
    name: str
    district: str
    state: str
    college_type: str = "Government"
    college_tier: str = "Good"
    streams_offered: Tuple[str, ...] = ()
    pincode: str = ""
    address: str = ""
    establishment_year: Optional[int] = None
    website: str = ""
    phone: str = ""
    email: str = ""
    fees_range: str = ""
    placement_rate: float = 0.0

    def offers(self, stream: str) -> bool:
        want = stream.strip().lower()
        return any(want in s.lower() for s in self.streams_offered)
