"""Grading rules, one per question type.

Every rule is a pure function of the question, the submitted answer and the
quiz-wide point value. Grades are not rounded here; the result aggregator
rounds the total once so slider partial credit does not accumulate rounding
error.
"""

from __future__ import annotations

from typing import Callable

from quiz_preview.core.answers import parse_slider_value
from quiz_preview.core.models import (
    Answer,
    FreeTextAnswer,
    OrderingAnswer,
    Question,
    QuestionGrade,
    QuestionType,
    SelectAnswer,
    SliderAnswer,
    TrueFalseAnswer,
)


def grade(question: Question, answer: Answer | None, points_per_question: float) -> float:
    """Return the points awarded for ``answer``, between 0 and ``points_per_question``.

    An unanswered question (``answer is None``) scores 0. An answer whose
    variant does not belong to the question type also scores 0.
    """
    if answer is None or answer.type is not question.type:
        return 0.0
    return _RULES[question.type](question, answer, points_per_question)


def grade_question(
    question: Question, answer: Answer | None, points_per_question: float
) -> QuestionGrade:
    awarded = grade(question, answer, points_per_question)
    return QuestionGrade(
        question_id=question.id,
        awarded_points=awarded,
        is_full_credit=awarded >= points_per_question,
    )


def _grade_select(question: Question, answer: SelectAnswer, points: float) -> float:
    correct_ids = {c.id for c in question.choices if c.is_correct}
    return float(points) if set(answer.choice_ids) == correct_ids else 0.0


def _grade_true_false(question: Question, answer: TrueFalseAnswer, points: float) -> float:
    correct = next((c for c in question.choices if c.is_correct), None)
    if correct is None:
        return 0.0
    return float(points) if answer.choice_id == correct.id else 0.0


def _grade_ordering(question: Question, answer: OrderingAnswer, points: float) -> float:
    # An incomplete arrangement is simply wrong.
    if len(answer.choice_ids) != len(question.choices):
        return 0.0
    for position, choice_id in enumerate(answer.choice_ids):
        choice = question.get_choice(choice_id)
        if choice is None or choice.order != position:
            return 0.0
    return float(points)


def _grade_slider(question: Question, answer: SliderAnswer, points: float) -> float:
    choice = next((c for c in question.choices if c.correct_value is not None), None)
    value = parse_slider_value(answer.raw_value)
    if choice is None or value is None:
        return 0.0
    if value == choice.correct_value:
        return float(points)

    value_range = (choice.max or 0) - (choice.min or 0)
    if value_range <= 0:
        return 0.0
    accuracy = max(0.0, 1 - abs(value - choice.correct_value) / value_range)
    return points * accuracy


def _grade_free_text(question: Question, answer: FreeTextAnswer, points: float) -> float:
    submitted = _normalize_text(answer.text)
    if not submitted:
        return 0.0
    accepted = {_normalize_text(c.text) for c in question.choices}
    return float(points) if submitted in accepted else 0.0


def _normalize_text(text: str) -> str:
    return text.strip().lower()


_RULES: dict[QuestionType, Callable[[Question, Answer, float], float]] = {
    QuestionType.SELECT: _grade_select,
    QuestionType.TRUE_FALSE: _grade_true_false,
    QuestionType.ORDERING: _grade_ordering,
    QuestionType.SLIDER: _grade_slider,
    QuestionType.FREE_TEXT: _grade_free_text,
}
