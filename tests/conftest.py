from __future__ import annotations

import pytest

from stream_core.quiz_bank import get_quiz
from stream_core.scoring import parse_category
from stream_core.types import Answer, Question, Quiz


def build_quiz(
    rows: list[tuple[str, str, int]],
    *,
    quiz_id: int = 99,
    title: str = "Synthetic quiz",
) -> Quiz:
    """Build a quiz from (category, correct option, points) rows; ids start at 1."""

    questions = tuple(
        Question(
            id=idx,
            category=parse_category(cat),
            correct_option=correct,
            points=pts,
            text=f"{cat} question #{idx}",
            options={"A": "a", "B": "b", "C": "c", "D": "d"},
            category_label=cat,
        )
        for idx, (cat, correct, pts) in enumerate(rows, start=1)
    )
    return Quiz(id=quiz_id, title=title, questions=questions, class_level="12th")


def answers_for(*options: str | None) -> list[Answer]:
    return [Answer(question_id=idx, selected_option=opt) for idx, opt in enumerate(options, start=1)]


def perfect_answers(quiz: Quiz) -> list[Answer]:
    return [Answer(question_id=q.id, selected_option=q.correct_option) for q in quiz.questions]


@pytest.fixture
def math_quiz() -> Quiz:
    return build_quiz([("Mathematical", "A", 2), ("Mathematical", "B", 2), ("Mathematical", "A", 2)])


@pytest.fixture
def mixed_quiz() -> Quiz:
    return build_quiz(
        [
            ("Mathematical", "A", 2),
            ("Verbal", "B", 2),
            ("Analytical", "C", 3),
            ("Technical", "D", 1),
            ("Verbal", "A", 2),
        ]
    )


@pytest.fixture
def aptitude_quiz() -> Quiz:
    quiz = get_quiz(1)
    assert quiz is not None
    return quiz
