"""Facade that runs one quiz session together with its countdown."""

from __future__ import annotations

import logging
from typing import Any, Callable

from quiz_preview.constants.quiz_constants import COUNTDOWN_TICK_INTERVAL_MS
from quiz_preview.core.errors import QuizError
from quiz_preview.core.models import Answer, Question, Quiz, QuizResult
from quiz_preview.core.services.countdown import CountdownController
from quiz_preview.core.services.quiz_session import QuizSession, create_session

logger = logging.getLogger(__name__)

TickListener = Callable[[int], None]
TransitionListener = Callable[[QuizSession], None]


class QuizRunner:
    """Facade for the session and countdown services used by the preview UI.

    Use it as a context manager (or call ``close()``) so the countdown is
    cancelled however the caller leaves the quiz::

        with QuizRunner(quiz) as runner:
            runner.submit_answer("q1", "a")
            runner.advance()
    """

    def __init__(self, quiz: Quiz, *, tick_interval_ms: int = COUNTDOWN_TICK_INTERVAL_MS) -> None:
        self._session = create_session(quiz)
        self._countdown = CountdownController(
            self._session,
            interval_ms=tick_interval_ms,
            on_tick=self._notify_tick,
            on_expired=self._notify_transition,
        )
        self._tick_listeners: list[TickListener] = []
        self._transition_listeners: list[TransitionListener] = []
        self._closed = False

    def __enter__(self) -> QuizRunner:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- Lifecycle ---

    def start(self) -> None:
        """Start the countdown on the current question."""
        if self._closed:
            return
        self._countdown.restart()
        logger.info(
            "Quiz '%s' started: %d question(s), %ds per question",
            self._session.quiz.title,
            self._session.get_question_count(),
            self._session.quiz.time_limit_seconds,
        )

    def close(self) -> None:
        """Stop the countdown for good. Safe to call more than once."""
        self._countdown.cancel()
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def is_countdown_running(self) -> bool:
        return self._countdown.is_running()

    # --- Listeners ---

    def add_tick_listener(self, listener: TickListener) -> None:
        self._tick_listeners.append(listener)

    def add_transition_listener(self, listener: TransitionListener) -> None:
        self._transition_listeners.append(listener)

    # --- Session delegation ---

    @property
    def session(self) -> QuizSession:
        return self._session

    def get_current_question(self) -> Question:
        return self._session.get_current_question()

    def get_remaining_seconds(self) -> int:
        return self._session.remaining_seconds

    def get_answer(self, question_id: str) -> Answer | None:
        return self._session.get_answer(question_id)

    def submit_answer(self, question_id: str, value: Any) -> Answer:
        return self._session.submit_answer(question_id, value)

    def advance(self) -> bool:
        """Go to the next question (or finish) on a manual "next"."""
        advanced = self._session.advance()
        if not advanced:
            return False
        if not self._closed:
            self._countdown.sync()
        self._notify_transition()
        return True

    def current_result(self) -> QuizResult | None:
        return self._session.result

    # --- Notifications ---

    # Only QuizError is contained here; anything else from a view propagates.

    def _notify_tick(self, remaining_seconds: int) -> None:
        for listener in list(self._tick_listeners):
            try:
                listener(remaining_seconds)
            except QuizError:
                logger.exception("Tick listener failed")

    def _notify_transition(self) -> None:
        for listener in list(self._transition_listeners):
            try:
                listener(self._session)
            except QuizError:
                logger.exception("Transition listener failed")
