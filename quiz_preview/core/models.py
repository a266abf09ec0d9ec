"""Domain models for the quiz engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from quiz_preview.constants.quiz_constants import (
    DEFAULT_POINTS_PER_QUESTION,
    DEFAULT_TIME_LIMIT_SECONDS,
)


class QuestionType(Enum):
    """Supported question types."""

    SELECT = "select"
    TRUE_FALSE = "true-false"
    ORDERING = "ordering"
    SLIDER = "slider"
    FREE_TEXT = "free-text"


@dataclass(slots=True)
class Choice:
    """Answer choice; only the fields relevant to the question type matter."""

    id: str
    text: str = ""
    is_correct: bool = False
    order: int | None = None  # ordering: zero-based target position
    min: float | None = None  # slider bounds and target
    max: float | None = None
    correct_value: float | None = None


@dataclass(slots=True)
class Question:
    """A single quiz question and its choices."""

    id: str
    text: str
    type: QuestionType
    choices: list[Choice] = field(default_factory=list)
    image_urls: list[str] = field(default_factory=list)

    def get_choice(self, choice_id: str) -> Choice | None:
        return next((c for c in self.choices if c.id == choice_id), None)

    def choice_ids(self) -> set[str]:
        return {c.id for c in self.choices}


@dataclass(slots=True)
class Quiz:
    """An assembled quiz ready to be played.

    ``time_limit_seconds`` and ``points_per_question`` apply to every
    question. Unset (``None``) or zero values fall back to the defaults when
    a session is created.
    """

    questions: list[Question]
    title: str = ""
    time_limit_seconds: int | None = DEFAULT_TIME_LIMIT_SECONDS
    points_per_question: float | None = DEFAULT_POINTS_PER_QUESTION

    def get_question(self, question_id: str) -> Question | None:
        return next((q for q in self.questions if q.id == question_id), None)


# --- Answers -----------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SelectAnswer:
    """Set of selected choice ids for a select question."""

    choice_ids: frozenset[str]
    type: QuestionType = field(default=QuestionType.SELECT, init=False)


@dataclass(frozen=True, slots=True)
class TrueFalseAnswer:
    """The single choice id picked for a true/false question."""

    choice_id: str
    type: QuestionType = field(default=QuestionType.TRUE_FALSE, init=False)


@dataclass(frozen=True, slots=True)
class OrderingAnswer:
    """Choice ids in the order the user arranged them."""

    choice_ids: tuple[str, ...]
    type: QuestionType = field(default=QuestionType.ORDERING, init=False)


@dataclass(frozen=True, slots=True)
class SliderAnswer:
    """Slider position as submitted by the input widget (a numeric string)."""

    raw_value: str
    type: QuestionType = field(default=QuestionType.SLIDER, init=False)


@dataclass(frozen=True, slots=True)
class FreeTextAnswer:
    """Text typed by the user."""

    text: str
    type: QuestionType = field(default=QuestionType.FREE_TEXT, init=False)


Answer = Union[SelectAnswer, TrueFalseAnswer, OrderingAnswer, SliderAnswer, FreeTextAnswer]


# --- Results -----------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class QuestionGrade:
    """Points awarded for one question, before any rounding."""

    question_id: str
    awarded_points: float
    is_full_credit: bool


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Immutable snapshot of a graded session."""

    total_score: int
    total_possible_points: float
    percentage_correct: int
    grades: tuple[QuestionGrade, ...] = ()
