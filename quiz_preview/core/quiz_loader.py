"""Loading quizzes exported by the quiz builder.

The builder hands the preview a JSON document shaped like::

    {
      "title": "Capitals",
      "timeLimit": 20,
      "points": 10,
      "questions": [
        {
          "id": "q1",
          "text": "Capital of France?",
          "type": "reponse-libre",
          "imageUrls": [],
          "choices": [{"id": "c1", "text": "Paris"}]
        }
      ]
    }

Question types may use the builder's tags (``quiz``, ``vrai-faux``,
``puzzle``, ``curseur``, ``reponse-libre``) or the engine's own names
(``select``, ``true-false``, ``ordering``, ``slider``, ``free-text``).

Only the structure is checked here. Whether the quiz can actually be played
is decided by ``create_session``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from quiz_preview.core.models import Choice, Question, QuestionType, Quiz

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


_TYPE_ALIASES: dict[str, QuestionType] = {
    "quiz": QuestionType.SELECT,
    "vrai-faux": QuestionType.TRUE_FALSE,
    "puzzle": QuestionType.ORDERING,
    "curseur": QuestionType.SLIDER,
    "reponse-libre": QuestionType.FREE_TEXT,
}
_TYPE_ALIASES.update({question_type.value: question_type for question_type in QuestionType})


def _coerce_id(value: Any) -> Any:
    # builder ids may be numeric
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class ChoicePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    text: str = ""
    is_correct: bool = Field(default=False, alias="isCorrect")
    order: int | None = None
    min: float | None = None
    max: float | None = None
    correct_value: float | None = Field(default=None, alias="correctValue")

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return _coerce_id(value)


class QuestionPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    text: str = ""
    type: QuestionType
    choices: list[ChoicePayload] = Field(default_factory=list)
    image_urls: list[str] = Field(default_factory=list, alias="imageUrls")

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator("type", mode="before")
    @classmethod
    def resolve_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            resolved = _TYPE_ALIASES.get(value.strip().lower())
            if resolved is None:
                raise ValueError(f"unknown question type '{value}'")
            return resolved
        return value

    @field_validator("image_urls", mode="before")
    @classmethod
    def drop_missing_images(cls, value: Any) -> Any:
        return value or []


class QuizPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = ""
    time_limit_seconds: int | None = Field(default=None, alias="timeLimit")
    points_per_question: float | None = Field(default=None, alias="points")
    questions: list[QuestionPayload] = Field(default_factory=list)

    def to_quiz(self) -> Quiz:
        return Quiz(
            title=self.title,
            time_limit_seconds=self.time_limit_seconds,
            points_per_question=self.points_per_question,
            questions=[
                Question(
                    id=question.id,
                    text=question.text,
                    type=question.type,
                    image_urls=list(question.image_urls),
                    choices=[
                        Choice(
                            id=choice.id,
                            text=choice.text,
                            is_correct=choice.is_correct,
                            order=choice.order,
                            min=choice.min,
                            max=choice.max,
                            correct_value=choice.correct_value,
                        )
                        for choice in question.choices
                    ],
                )
                for question in self.questions
            ],
        )


def parse_quiz_payload(payload: dict[str, Any]) -> Quiz:
    """Convert a builder payload (already decoded from JSON) into a ``Quiz``."""
    try:
        parsed = QuizPayload.model_validate(payload)
    except ValidationError as exc:
        raise QuizImportError(f"Quiz definition is invalid:\n{exc}") from exc
    return parsed.to_quiz()


def load_quiz_from_file(file_path: Path) -> Quiz:
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise QuizImportError(f"Could not read {file_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise QuizImportError(f"{file_path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise QuizImportError(f"{file_path} must contain a JSON object.")

    quiz = parse_quiz_payload(payload)
    logger.info("Loaded quiz '%s' with %d question(s) from %s",
                quiz.title, len(quiz.questions), file_path)
    return quiz
