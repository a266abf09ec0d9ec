"""Validation and normalization of quizzes before they are played."""

from __future__ import annotations

from quiz_preview.constants.quiz_constants import (
    DEFAULT_POINTS_PER_QUESTION,
    DEFAULT_TIME_LIMIT_SECONDS,
)
from quiz_preview.core.errors import InvalidQuizError
from quiz_preview.core.models import Question, QuestionType, Quiz


def prepare_quiz(quiz: Quiz) -> Quiz:
    """Validate ``quiz`` and return a copy with quiz-level defaults applied.

    Raises:
        InvalidQuizError: if the quiz cannot be played.
    """
    if not quiz.questions:
        raise InvalidQuizError("Quiz must contain at least one question.")

    seen_ids: set[str] = set()
    for question in quiz.questions:
        if question.id in seen_ids:
            raise InvalidQuizError(f"Duplicate question id '{question.id}'.")
        seen_ids.add(question.id)
        _validate_question(question)

    return Quiz(
        questions=list(quiz.questions),
        title=quiz.title.strip(),
        time_limit_seconds=_normalize_time_limit(quiz.time_limit_seconds),
        points_per_question=_normalize_points(quiz.points_per_question),
    )


def _validate_question(question: Question) -> None:
    if not question.choices:
        raise InvalidQuizError(f"Question '{question.id}' has no choices.")

    choice_ids = [c.id for c in question.choices]
    if len(set(choice_ids)) != len(choice_ids):
        raise InvalidQuizError(f"Question '{question.id}' has duplicate choice ids.")

    if question.type is QuestionType.TRUE_FALSE:
        correct_count = sum(1 for c in question.choices if c.is_correct)
        if correct_count != 1:
            raise InvalidQuizError(
                f"True/false question '{question.id}' needs exactly one correct choice, "
                f"found {correct_count}."
            )
    elif question.type is QuestionType.SLIDER:
        _validate_slider(question)


def _validate_slider(question: Question) -> None:
    configured = [
        c for c in question.choices
        if c.min is not None and c.max is not None and c.correct_value is not None
    ]
    if len(configured) != 1:
        raise InvalidQuizError(
            f"Slider question '{question.id}' needs exactly one choice with min, max "
            "and correct value."
        )
    choice = configured[0]
    # Slider answers are whole numbers, so fractional settings are unreachable.
    for label, value in (
        ("min", choice.min),
        ("max", choice.max),
        ("correct value", choice.correct_value),
    ):
        if not _is_whole_number(value):
            raise InvalidQuizError(
                f"Slider question '{question.id}' has a fractional {label} ({value})."
            )
    if choice.min > choice.max:
        raise InvalidQuizError(
            f"Slider question '{question.id}' has min {choice.min} above max {choice.max}."
        )


def _normalize_time_limit(time_limit_seconds: int | None) -> int:
    if not time_limit_seconds:
        return DEFAULT_TIME_LIMIT_SECONDS
    if not isinstance(time_limit_seconds, int) or isinstance(time_limit_seconds, bool):
        raise InvalidQuizError("Time limit must be provided as an integer number of seconds.")
    if time_limit_seconds < 0:
        raise InvalidQuizError("Time limit must be a positive integer.")
    return time_limit_seconds


def _normalize_points(points_per_question: float | None) -> int:
    if not points_per_question:
        return DEFAULT_POINTS_PER_QUESTION
    if not _is_whole_number(points_per_question):
        raise InvalidQuizError("Points per question must be a whole number.")
    if points_per_question < 0:
        raise InvalidQuizError("Points per question must be positive.")
    return int(points_per_question)


def _is_whole_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return float(value).is_integer()
