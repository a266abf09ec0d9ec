"""Exceptions raised by the quiz engine."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all quiz engine errors."""


class InvalidQuizError(QuizError):
    """Raised when a quiz definition cannot be played."""


class UnknownQuestionError(QuizError):
    """Raised when an answer targets a question id that is not in the quiz."""

    def __init__(self, question_id: str) -> None:
        super().__init__(f"Question '{question_id}' is not part of this quiz.")
        self.question_id = question_id


class MalformedAnswerError(QuizError):
    """Raised when a submitted value does not fit the question type."""


class SessionClosedError(QuizError):
    """Raised when an answer is submitted after the session was graded."""
