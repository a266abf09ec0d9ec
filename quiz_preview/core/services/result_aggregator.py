"""Service for turning per-question grades into a final quiz result."""

from __future__ import annotations

from collections.abc import Sequence
import math

from quiz_preview.core.models import QuestionGrade, QuizResult


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (``round()`` rounds to even)."""
    return math.floor(value + 0.5)


class ResultAggregator:
    """Sums grades for a quiz with a fixed point value per question."""

    def __init__(self, points_per_question: float, question_count: int) -> None:
        self._points_per_question = points_per_question
        self._question_count = question_count

    @property
    def total_possible_points(self) -> float:
        return self._points_per_question * self._question_count

    def aggregate(self, grades: Sequence[QuestionGrade]) -> QuizResult:
        """Return the result for ``grades``.

        The raw sum is rounded once, half-up, and never exceeds the whole
        points on offer. The percentage is 0 when the quiz is worth no points
        at all.
        """
        total_possible = self.total_possible_points
        total_score = min(
            round_half_up(sum(g.awarded_points for g in grades)),
            math.floor(total_possible),
        )
        if total_possible > 0:
            percentage = round_half_up(100 * total_score / total_possible)
        else:
            percentage = 0

        return QuizResult(
            total_score=total_score,
            total_possible_points=total_possible,
            percentage_correct=percentage,
            grades=tuple(grades),
        )
