"""Tests for the session state machine."""

from __future__ import annotations

import pytest

from quiz_preview.core.errors import (
    InvalidQuizError,
    MalformedAnswerError,
    SessionClosedError,
    UnknownQuestionError,
)
from quiz_preview.core.models import Quiz, TrueFalseAnswer
from quiz_preview.core.services.quiz_session import (
    QuizSession,
    SessionState,
    advance,
    create_session,
    current_result,
    submit_answer,
)


def test_new_session_starts_on_first_question(two_question_quiz):
    session = create_session(two_question_quiz)

    assert session.state is SessionState.ACTIVE
    assert session.current_index == 0
    assert session.get_question_number() == 1
    assert session.remaining_seconds == 30
    assert session.get_answers() == {}
    assert current_result(session) is None


def test_create_session_rejects_empty_quiz():
    with pytest.raises(InvalidQuizError):
        create_session(Quiz(questions=[]))


def test_two_question_scenario(two_question_quiz):
    session = create_session(two_question_quiz)
    submit_answer(session, "q1", "a")
    submit_answer(session, "q2", "7")

    advance(session)
    assert current_result(session) is None
    advance(session)

    result = current_result(session)
    assert session.is_terminal()
    assert result.total_score == 18
    assert result.total_possible_points == 20
    assert result.percentage_correct == 90
    assert [g.awarded_points for g in result.grades] == pytest.approx([10, 8])


def test_submit_answer_does_not_move_index_or_timer(two_question_quiz):
    session = QuizSession(two_question_quiz)
    session.tick()
    session.submit_answer("q1", "a")

    assert session.current_index == 0
    assert session.remaining_seconds == 29


def test_resubmitting_replaces_only_that_answer(two_question_quiz):
    session = QuizSession(two_question_quiz)
    session.submit_answer("q1", "a")
    session.submit_answer("q2", "3")
    session.submit_answer("q1", "b")

    assert session.get_answer("q1") == TrueFalseAnswer("b")
    assert session.get_answer("q2").raw_value == "3"


def test_answers_may_target_any_question(two_question_quiz):
    session = QuizSession(two_question_quiz)
    session.submit_answer("q2", "5")
    assert session.current_index == 0
    assert session.get_answer("q2") is not None


def test_unknown_question_is_rejected(two_question_quiz):
    session = QuizSession(two_question_quiz)
    with pytest.raises(UnknownQuestionError):
        session.submit_answer("nope", "a")


def test_malformed_answer_is_rejected_and_not_stored(two_question_quiz):
    session = QuizSession(two_question_quiz)
    with pytest.raises(MalformedAnswerError):
        session.submit_answer("q2", "lots")
    assert session.get_answer("q2") is None


def test_advance_resets_the_clock(two_question_quiz):
    session = QuizSession(two_question_quiz)
    for _ in range(10):
        session.tick()

    assert session.advance()
    assert session.current_index == 1
    assert session.remaining_seconds == 30
    assert session.is_last_question()


def test_grading_happens_exactly_once(two_question_quiz):
    session = QuizSession(two_question_quiz)
    session.submit_answer("q1", "a")
    session.advance()
    session.advance()
    first = session.result

    assert not session.advance()
    assert session.result is first
    assert session.result.total_score == 10


def test_no_answers_after_grading(two_question_quiz):
    session = QuizSession(two_question_quiz)
    session.advance()
    session.advance()
    with pytest.raises(SessionClosedError):
        session.submit_answer("q1", "a")


def test_unanswered_quiz_scores_zero(mixed_quiz):
    session = QuizSession(mixed_quiz)
    while not session.is_terminal():
        session.advance()

    assert session.result.total_score == 0
    assert session.result.percentage_correct == 0
    assert len(session.result.grades) == 5


def test_perfect_mixed_quiz(mixed_quiz):
    session = QuizSession(mixed_quiz)
    session.submit_answer("select", {"two", "three"})
    session.submit_answer("tf", "a")
    session.submit_answer("order", ["one", "five", "ten"])
    session.submit_answer("slider", "5")
    session.submit_answer("text", "paris")
    while session.advance():
        pass

    assert session.result.total_score == 50
    assert session.result.total_possible_points == 50
    assert session.result.percentage_correct == 100
    assert all(g.is_full_credit for g in session.result.grades)


def test_score_stays_within_bounds(mixed_quiz):
    session = QuizSession(mixed_quiz)
    session.submit_answer("select", ["two"])
    session.submit_answer("slider", "9")
    while session.advance():
        pass

    result = session.result
    assert 0 <= result.total_score <= result.total_possible_points
    assert result.total_score == 6


def test_tick_counts_down_until_the_last_second(two_question_quiz):
    two_question_quiz.time_limit_seconds = 3
    session = QuizSession(two_question_quiz)

    assert not session.tick()
    assert not session.tick()
    assert session.remaining_seconds == 1
    assert session.current_index == 0


def test_expiring_tick_advances_like_next(two_question_quiz):
    two_question_quiz.time_limit_seconds = 2
    session = QuizSession(two_question_quiz)
    session.tick()

    assert session.tick()
    assert session.current_index == 1
    assert session.remaining_seconds == 2


def test_expiring_tick_on_last_question_grades(two_question_quiz):
    two_question_quiz.time_limit_seconds = 1
    session = QuizSession(two_question_quiz)
    session.submit_answer("q1", "a")

    assert session.tick()
    assert session.tick()
    assert session.is_terminal()
    assert session.result.total_score == 10
    assert session.remaining_seconds == 0


def test_tick_after_grading_does_nothing(two_question_quiz):
    session = QuizSession(two_question_quiz)
    session.advance()
    session.advance()
    first = session.result

    assert not session.tick()
    assert session.result is first
    assert session.remaining_seconds == 0
