"""Builders for quizzes and questions used across the tests."""

from __future__ import annotations

from quiz_preview.core.models import Choice, Question, QuestionType


def make_select_question(question_id: str = "select") -> Question:
    return Question(
        id=question_id,
        text="Which of these are primes?",
        type=QuestionType.SELECT,
        choices=[
            Choice(id="two", text="2", is_correct=True),
            Choice(id="three", text="3", is_correct=True),
            Choice(id="four", text="4"),
        ],
    )


def make_true_false_question(question_id: str = "tf") -> Question:
    return Question(
        id=question_id,
        text="The earth is round.",
        type=QuestionType.TRUE_FALSE,
        choices=[Choice(id="a", text="True", is_correct=True), Choice(id="b", text="False")],
    )


def make_ordering_question(question_id: str = "order") -> Question:
    return Question(
        id=question_id,
        text="Sort from smallest to largest.",
        type=QuestionType.ORDERING,
        choices=[
            Choice(id="ten", text="10", order=2),
            Choice(id="one", text="1", order=0),
            Choice(id="five", text="5", order=1),
        ],
    )


def make_slider_question(
    question_id: str = "slider", minimum: float = 0, maximum: float = 10, correct: float = 5
) -> Question:
    return Question(
        id=question_id,
        text="Pick the middle.",
        type=QuestionType.SLIDER,
        choices=[Choice(id="range", min=minimum, max=maximum, correct_value=correct)],
    )


def make_free_text_question(question_id: str = "text", *accepted: str) -> Question:
    return Question(
        id=question_id,
        text="Capital of France?",
        type=QuestionType.FREE_TEXT,
        choices=[
            Choice(id=f"accepted-{idx}", text=text)
            for idx, text in enumerate(accepted or ("Paris",))
        ],
    )

