"""Per-question countdown driven by a Qt timer."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QTimer

from quiz_preview.constants.quiz_constants import COUNTDOWN_TICK_INTERVAL_MS
from quiz_preview.core.errors import QuizError
from quiz_preview.core.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


class CountdownHandle:
    """One scheduled, repeating tick source. Once cancelled it never fires again."""

    def __init__(self, interval_ms: int, callback: Callable[[CountdownHandle], None]) -> None:
        self._timer = QTimer()
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(lambda: callback(self))
        self._cancelled = False

    def start(self) -> None:
        if not self._cancelled:
            self._timer.start()

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.stop()

    def is_active(self) -> bool:
        return not self._cancelled and self._timer.isActive()

    def is_cancelled(self) -> bool:
        return self._cancelled


class CountdownController:
    """Ticks the active question's clock once per interval.

    The controller owns at most one ``CountdownHandle``. ``restart()`` always
    cancels the current handle before scheduling a new one, and ticks coming
    from a handle that is no longer current are dropped.

    Each tick goes through ``QuizSession.tick()``. When that expires the
    question, the controller rebinds itself to the new state and then calls
    ``on_expired`` so views can follow the transition.
    """

    def __init__(
        self,
        session: QuizSession,
        *,
        interval_ms: int = COUNTDOWN_TICK_INTERVAL_MS,
        on_tick: Callable[[int], None] | None = None,
        on_expired: Callable[[], object] | None = None,
    ) -> None:
        self._session = session
        self._interval_ms = interval_ms
        self._on_tick = on_tick
        self._on_expired = on_expired
        self._handle: CountdownHandle | None = None

    def restart(self) -> None:
        """Start counting for the session's current question."""
        self.cancel()
        if self._session.is_terminal():
            return
        self._handle = CountdownHandle(self._interval_ms, self._on_timeout)
        self._handle.start()
        logger.debug(
            "Countdown started for question %d (%ds)",
            self._session.get_question_number(),
            self._session.remaining_seconds,
        )

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def is_running(self) -> bool:
        return self._handle is not None and self._handle.is_active()

    def sync(self) -> None:
        """Restart for a new active question, or stop once the session is graded."""
        if self._session.is_terminal():
            self.cancel()
        else:
            self.restart()

    def tick(self) -> None:
        """Handle one elapsed interval."""
        if self._session.is_terminal():
            self.cancel()
            return

        question_number = self._session.get_question_number()
        if self._session.tick():
            self.sync()
            if self._on_expired is not None:
                try:
                    self._on_expired()
                except QuizError:
                    logger.exception("Expiry listener failed after question %d", question_number)
            return

        if self._on_tick is not None:
            try:
                self._on_tick(self._session.remaining_seconds)
            except QuizError:
                logger.exception("Countdown listener failed")

    def _on_timeout(self, handle: CountdownHandle) -> None:
        if handle is not self._handle or handle.is_cancelled():
            logger.debug("Dropping tick from a cancelled countdown.")
            return
        self.tick()
