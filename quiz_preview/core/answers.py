"""Conversion of raw submitted values into typed answers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from quiz_preview.core.errors import MalformedAnswerError
from quiz_preview.core.models import (
    Answer,
    FreeTextAnswer,
    OrderingAnswer,
    Question,
    QuestionType,
    SelectAnswer,
    SliderAnswer,
    TrueFalseAnswer,
)

_ANSWER_TYPES = (SelectAnswer, TrueFalseAnswer, OrderingAnswer, SliderAnswer, FreeTextAnswer)


def coerce_answer(question: Question, value: Any) -> Answer:
    """Return the answer variant for ``question`` built from ``value``.

    ``value`` may already be an answer variant, or the raw value an input
    widget produces: an iterable of choice ids (select), a choice id
    (true-false), a sequence of choice ids (ordering), a numeric string or
    integer (slider), or text (free-text).

    Raises:
        MalformedAnswerError: if the value does not fit the question type.
    """
    if isinstance(value, _ANSWER_TYPES):
        if value.type is not question.type:
            raise MalformedAnswerError(
                f"Question '{question.id}' expects a {question.type.value} answer, "
                f"got a {value.type.value} answer."
            )
        _COERCERS[question.type](question, _unwrap(value))
        return value
    return _COERCERS[question.type](question, value)


def parse_slider_value(raw_value: str) -> int | None:
    """Parse a slider value, returning None when it is not an integer."""
    try:
        return int(raw_value.strip())
    except ValueError:
        return None


def _unwrap(answer: Answer) -> Any:
    if isinstance(answer, (SelectAnswer, OrderingAnswer)):
        return answer.choice_ids
    if isinstance(answer, TrueFalseAnswer):
        return answer.choice_id
    if isinstance(answer, SliderAnswer):
        return answer.raw_value
    return answer.text


def _to_select(question: Question, value: Any) -> SelectAnswer:
    ids = _choice_id_list(question, value)
    return SelectAnswer(choice_ids=frozenset(ids))


def _to_true_false(question: Question, value: Any) -> TrueFalseAnswer:
    if not isinstance(value, str):
        raise MalformedAnswerError(
            f"Question '{question.id}' expects a single choice id."
        )
    _require_known_choices(question, [value])
    return TrueFalseAnswer(choice_id=value)


def _to_ordering(question: Question, value: Any) -> OrderingAnswer:
    ids = _choice_id_list(question, value)
    if len(set(ids)) != len(ids):
        raise MalformedAnswerError(
            f"Question '{question.id}' ordering lists a choice more than once."
        )
    return OrderingAnswer(choice_ids=tuple(ids))


def _to_slider(question: Question, value: Any) -> SliderAnswer:
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or parse_slider_value(value) is None:
        raise MalformedAnswerError(
            f"Question '{question.id}' expects an integer slider value, got {value!r}."
        )
    return SliderAnswer(raw_value=value)


def _to_free_text(question: Question, value: Any) -> FreeTextAnswer:
    if not isinstance(value, str):
        raise MalformedAnswerError(f"Question '{question.id}' expects text.")
    return FreeTextAnswer(text=value)


def _choice_id_list(question: Question, value: Any) -> list[str]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise MalformedAnswerError(
            f"Question '{question.id}' expects a collection of choice ids."
        )
    ids = list(value)
    if any(not isinstance(choice_id, str) for choice_id in ids):
        raise MalformedAnswerError(f"Question '{question.id}': choice ids must be strings.")
    _require_known_choices(question, ids)
    return ids


def _require_known_choices(question: Question, ids: Iterable[str]) -> None:
    unknown = sorted(set(ids) - question.choice_ids())
    if unknown:
        raise MalformedAnswerError(
            f"Question '{question.id}' has no choice(s) {', '.join(unknown)}."
        )


_COERCERS: dict[QuestionType, Callable[[Question, Any], Answer]] = {
    QuestionType.SELECT: _to_select,
    QuestionType.TRUE_FALSE: _to_true_false,
    QuestionType.ORDERING: _to_ordering,
    QuestionType.SLIDER: _to_slider,
    QuestionType.FREE_TEXT: _to_free_text,
}
