"""Shared fixtures for the quiz preview tests."""

from __future__ import annotations

import os

import pytest

# Qt must not try to open a display while tests run.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from quiz_preview.core.models import Quiz  # noqa: E402

from quiz_factories import (  # noqa: E402
    make_free_text_question,
    make_ordering_question,
    make_select_question,
    make_slider_question,
    make_true_false_question,
)


@pytest.fixture
def two_question_quiz() -> Quiz:
    """True/false question followed by a 0-10 slider, 10 points each."""
    return Quiz(
        title="Scenario",
        questions=[make_true_false_question("q1"), make_slider_question("q2")],
        time_limit_seconds=30,
        points_per_question=10,
    )


@pytest.fixture
def mixed_quiz() -> Quiz:
    return Quiz(
        title="Everything",
        questions=[
            make_select_question(),
            make_true_false_question(),
            make_ordering_question(),
            make_slider_question(),
            make_free_text_question(),
        ],
        time_limit_seconds=20,
        points_per_question=10,
    )
