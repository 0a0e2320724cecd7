from __future__ import annotations

import pytest

from stream_core import quiz_bank
from stream_core.quiz_bank import get_quiz, load_quizzes, quiz_from_dict, quizzes_for_class
from stream_core.types import Category, Quiz
from stream_core.validators import validate_quiz

from conftest import build_quiz


def test_seed_quizzes_load_and_validate():
    quizzes = load_quizzes()
    assert [q.title for q in quizzes] == ["General Aptitude Assessment", "Career Interest Assessment"]
    for quiz in quizzes:
        assert validate_quiz(quiz) == []


def test_aptitude_quiz_shape(aptitude_quiz):
    assert len(aptitude_quiz.questions) == 12
    assert sum(q.points for q in aptitude_quiz.questions) == 26
    assert {q.category for q in aptitude_quiz.questions} == {
        Category.MATHEMATICAL, Category.VERBAL, Category.ANALYTICAL, Category.TECHNICAL,
    }


def test_get_quiz_missing_returns_none():
    assert get_quiz(404) is None


def test_seed_data_loads_from_any_working_directory(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert quiz_bank.DATA_PATH.is_file()
    assert quiz_bank.DATA_PATH.parent.parent.name == "stream_core"
    assert get_quiz(1).title == "General Aptitude Assessment"


def test_quizzes_for_class():
    assert len(quizzes_for_class("12th")) == 2
    assert len(quizzes_for_class("12TH")) == 2
    assert quizzes_for_class("10th") == []
    assert len(quizzes_for_class(None)) == 2


def test_quiz_from_dict_defaults_points_and_normalizes():
    quiz = quiz_from_dict({
        "id": "5",
        "title": "Mini",
        "questions": [
            {"id": 1, "category": "Numerical", "question": "1+1?", "options": {"a": "2", "b": "3"}, "correctAnswer": "a"},
        ],
    })
    q = quiz.questions[0]
    assert quiz.id == 5
    assert quiz.class_level is None
    assert q.points == 1
    assert q.category is Category.MATHEMATICAL
    assert q.category_label == "Numerical"
    assert q.correct_option == "A"
    assert q.options == {"A": "2", "B": "3"}


def test_quiz_from_dict_rejects_bad_input():
    with pytest.raises(KeyError):
        quiz_from_dict({"title": "no id", "questions": []})
    with pytest.raises(ValueError):
        quiz_from_dict({"id": 1, "questions": {"id": 1}})


def test_validate_quiz_reports_issues():
    quiz = build_quiz([("Mathematical", "A", 1), ("Poetry", "E", 0)])
    dup = build_quiz([("Verbal", "A", 1)])
    issues = validate_quiz(quiz)
    assert any("not in A-D" in i for i in issues)
    assert any("points must be positive" in i for i in issues)
    assert any("unrecognized category 'Poetry'" in i for i in issues)

    doubled = Quiz(id=dup.id, title=dup.title, questions=dup.questions * 2)
    assert any("duplicate question id 1" in i for i in validate_quiz(doubled))
    assert validate_quiz(Quiz(id=3, title="empty")) == ["quiz 3: no questions"]
