"""Tests for loading builder quiz exports."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from quiz_preview.core.models import QuestionType
from quiz_preview.core.quiz_loader import QuizImportError, load_quiz_from_file, parse_quiz_payload
from quiz_preview.core.services.quiz_session import create_session

DATA_DIR = Path(__file__).parent / "data"


def test_builder_export_is_loaded():
    quiz = load_quiz_from_file(DATA_DIR / "builder_quiz.json")

    assert quiz.title == "General knowledge"
    assert quiz.time_limit_seconds == 20
    assert quiz.points_per_question == 5
    assert [q.type for q in quiz.questions] == [
        QuestionType.SELECT,
        QuestionType.TRUE_FALSE,
        QuestionType.ORDERING,
        QuestionType.SLIDER,
        QuestionType.FREE_TEXT,
    ]
    assert quiz.questions[0].image_urls == ["https://example.com/primes.png"]
    assert quiz.questions[4].image_urls == []


def test_numeric_ids_become_strings():
    quiz = load_quiz_from_file(DATA_DIR / "builder_quiz.json")
    slider = quiz.questions[3]

    assert slider.id == "4"
    assert slider.choices[0].id == "1"
    assert slider.choices[0].correct_value == 8


def test_loaded_quiz_can_be_played():
    quiz = load_quiz_from_file(DATA_DIR / "builder_quiz.json")
    session = create_session(quiz)
    session.submit_answer("q1", ["c1", "c3"])
    session.submit_answer("q2", "t")
    session.submit_answer("q3", ["mercury", "venus", "earth"])
    session.submit_answer("4", "10")
    session.submit_answer("q5", "paris")
    while session.advance():
        pass

    # slider: 5 * (1 - 2/20) = 4.5; 20 + 4.5 = 24.5 -> 25
    assert session.result.total_score == 25
    assert session.result.total_possible_points == 25
    assert session.result.percentage_correct == 100


def test_english_type_names_are_accepted():
    quiz = parse_quiz_payload(
        {"questions": [{"id": "q", "type": "Free-Text", "choices": [{"id": "a", "text": "x"}]}]}
    )
    assert quiz.questions[0].type is QuestionType.FREE_TEXT
    assert quiz.time_limit_seconds is None
    assert quiz.points_per_question is None


def test_unknown_type_is_rejected():
    with pytest.raises(QuizImportError, match="unknown question type"):
        parse_quiz_payload({"questions": [{"id": "q", "type": "essay", "choices": []}]})


def test_missing_question_id_is_rejected():
    with pytest.raises(QuizImportError):
        parse_quiz_payload({"questions": [{"type": "quiz", "choices": []}]})


def test_invalid_json_is_reported(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(QuizImportError):
        load_quiz_from_file(path)


def test_top_level_must_be_an_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(QuizImportError):
        load_quiz_from_file(path)


def test_missing_file_is_reported(tmp_path):
    with pytest.raises(QuizImportError):
        load_quiz_from_file(tmp_path / "nope.json")
