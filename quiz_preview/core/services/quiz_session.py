"""Service for managing the progression and answers of one quiz session."""

from __future__ import annotations

from enum import Enum, auto
import logging
from typing import Any

from quiz_preview.core.answers import coerce_answer
from quiz_preview.core.errors import SessionClosedError, UnknownQuestionError
from quiz_preview.core.grading import grade_question
from quiz_preview.core.models import Answer, Question, Quiz, QuizResult
from quiz_preview.core.quiz_validation import prepare_quiz
from quiz_preview.core.services.result_aggregator import ResultAggregator

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle state of a quiz session."""

    ACTIVE = auto()
    TERMINAL = auto()


class QuizSession:
    """Forward-only walk through a quiz.

    The session starts on the first question with a full countdown. Each
    ``advance()`` moves to the next question; advancing past the last one
    grades every question exactly once and makes the session terminal.
    """

    def __init__(self, quiz: Quiz) -> None:
        self._quiz = prepare_quiz(quiz)
        self._state = SessionState.ACTIVE
        self._index: int = 0
        self._answers: dict[str, Answer] = {}
        self._remaining_seconds: int = self._quiz.time_limit_seconds
        self._result: QuizResult | None = None
        self._aggregator = ResultAggregator(
            points_per_question=self._quiz.points_per_question,
            question_count=len(self._quiz.questions),
        )

    # --- Read accessors ---

    @property
    def quiz(self) -> Quiz:
        return self._quiz

    @property
    def state(self) -> SessionState:
        return self._state

    def is_terminal(self) -> bool:
        return self._state is SessionState.TERMINAL

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def result(self) -> QuizResult | None:
        return self._result

    def get_current_question(self) -> Question:
        return self._quiz.questions[self._index]

    def get_question_count(self) -> int:
        return len(self._quiz.questions)

    def get_question_number(self) -> int:
        """1-based position of the current question."""
        return self._index + 1

    def is_last_question(self) -> bool:
        return self._index == len(self._quiz.questions) - 1

    def get_answer(self, question_id: str) -> Answer | None:
        return self._answers.get(question_id)

    def get_answers(self) -> dict[str, Answer]:
        return dict(self._answers)

    # --- Transitions ---

    def submit_answer(self, question_id: str, value: Any) -> Answer:
        """Store the answer for ``question_id``, replacing any earlier one.

        Raises:
            SessionClosedError: if the session has already been graded.
            UnknownQuestionError: if the quiz has no such question.
            MalformedAnswerError: if ``value`` does not fit the question type.
        """
        if self.is_terminal():
            raise SessionClosedError("Answers cannot be changed after the quiz is graded.")
        question = self._quiz.get_question(question_id)
        if question is None:
            raise UnknownQuestionError(question_id)

        answer = coerce_answer(question, value)
        self._answers[question_id] = answer
        logger.debug("Recorded answer for question %s: %r", question_id, answer)
        return answer

    def advance(self) -> bool:
        """Move to the next question, or grade the quiz on the last one.

        Returns False (and changes nothing) once the session is terminal.
        """
        if self.is_terminal():
            logger.debug("Ignoring advance on a graded session.")
            return False

        if self.is_last_question():
            self._finish()
            return True

        self._index += 1
        self._remaining_seconds = self._quiz.time_limit_seconds
        logger.info(
            "Moved to question %d of %d", self.get_question_number(), self.get_question_count()
        )
        return True

    def tick(self) -> bool:
        """Take one second off the current question's clock.

        When the clock would reach zero the question expires and the session
        advances exactly as a manual "next" would. Returns True when the tick
        caused such a transition; does nothing once the session is terminal.
        """
        if self.is_terminal():
            return False
        if self._remaining_seconds <= 1:
            logger.info("Time ran out on question %d", self.get_question_number())
            return self.advance()
        self._remaining_seconds -= 1
        return False

    def _finish(self) -> None:
        points = self._quiz.points_per_question
        grades = [
            grade_question(question, self._answers.get(question.id), points)
            for question in self._quiz.questions
        ]
        self._result = self._aggregator.aggregate(grades)
        self._state = SessionState.TERMINAL
        self._remaining_seconds = 0
        logger.info(
            "Quiz graded: %d/%g points (%d%%)",
            self._result.total_score,
            self._result.total_possible_points,
            self._result.percentage_correct,
        )


def create_session(quiz: Quiz) -> QuizSession:
    """Start a session on the first question of ``quiz``.

    Raises:
        InvalidQuizError: if the quiz has no questions or a question has no choices.
    """
    return QuizSession(quiz)


def submit_answer(session: QuizSession, question_id: str, value: Any) -> QuizSession:
    session.submit_answer(question_id, value)
    return session


def advance(session: QuizSession) -> QuizSession:
    session.advance()
    return session


def current_result(session: QuizSession) -> QuizResult | None:
    """Return the graded result, or None while the session is still active."""
    return session.result
