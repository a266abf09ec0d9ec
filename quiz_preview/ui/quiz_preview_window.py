"""Qt main window that plays a quiz one question at a time."""

from __future__ import annotations

import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_preview.constants.quiz_constants import TIME_LIMIT_WARNING_WINDOW_SECONDS
from quiz_preview.constants.ui_constants import (
    ANSWER_ERROR_TITLE,
    COUNTDOWN_TEMPLATE,
    FINISH_BUTTON,
    NEXT_BUTTON,
    POINTS_TEMPLATE,
    QUESTION_PROGRESS_TEMPLATE,
    UNTITLED_QUIZ,
    WINDOW_TITLE_TEMPLATE,
)
from quiz_preview.core.errors import QuizError
from quiz_preview.core.markdown_renderer import renderer
from quiz_preview.core.quiz_runner import QuizRunner
from quiz_preview.core.services.quiz_session import QuizSession
from quiz_preview.styling.styles import Styles
from quiz_preview.ui.components.answer_inputs import create_answer_input
from quiz_preview.ui.components.result_panel import ResultPanel
from quiz_preview.ui.dialog_helpers import confirm_leave_quiz, show_error

logger = logging.getLogger(__name__)


class QuizPreviewWindow(QMainWindow):
    """Walks the user through a running quiz and shows the final result."""

    def __init__(self, runner: QuizRunner, font_size: int = 14) -> None:
        super().__init__()
        self.runner = runner
        self._font_size = font_size
        self._answer_input: QWidget | None = None

        title = runner.session.quiz.title or UNTITLED_QUIZ
        self.setWindowTitle(WINDOW_TITLE_TEMPLATE.format(title=title))

        self._build_ui(title)
        self.setStyleSheet(Styles.get_main_window_style())

        self.runner.add_tick_listener(self._update_countdown)
        self.runner.add_transition_listener(self._handle_transition)
        self._display_current_question()
        self.runner.start()

    def _build_ui(self, title: str) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        # Header: quiz title and countdown
        header_row = QHBoxLayout()
        title_label = QLabel(WINDOW_TITLE_TEMPLATE.format(title=title), self)
        title_label.setStyleSheet(Styles.get_heading_style())
        header_row.addWidget(title_label)
        header_row.addStretch()
        self.countdown_label = QLabel("", self)
        header_row.addWidget(self.countdown_label)
        root_layout.addLayout(header_row)

        self.page_stack = QStackedWidget(self)
        root_layout.addWidget(self.page_stack, stretch=1)

        # Question page
        self.question_page = QWidget(self)
        question_layout = QVBoxLayout()
        self.question_page.setLayout(question_layout)

        progress_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        progress_row.addWidget(self.progress_label)
        progress_row.addStretch()
        self.points_label = QLabel("", self)
        self.points_label.setStyleSheet(Styles.get_accent_label_style())
        progress_row.addWidget(self.points_label)
        question_layout.addLayout(progress_row)

        self.question_view = QWebEngineView(self)
        question_layout.addWidget(self.question_view, stretch=1)

        self.answer_container = QVBoxLayout()
        question_layout.addLayout(self.answer_container)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next)
        button_row.addWidget(self.next_button)
        question_layout.addLayout(button_row)

        self.page_stack.addWidget(self.question_page)

        self.result_panel = ResultPanel(on_close=self.close, parent=self)
        self.page_stack.addWidget(self.result_panel)

    def _display_current_question(self) -> None:
        session = self.runner.session
        question = session.get_current_question()

        self.progress_label.setText(
            QUESTION_PROGRESS_TEMPLATE.format(
                number=session.get_question_number(), count=session.get_question_count()
            )
        )
        self.points_label.setText(
            POINTS_TEMPLATE.format(points=f"{session.quiz.points_per_question:g}")
        )
        html = renderer.render_document(
            renderer.render_question(question), font_size=self._font_size
        )
        self.question_view.setHtml(html)

        self._replace_answer_input(question)
        self.next_button.setText(FINISH_BUTTON if session.is_last_question() else NEXT_BUTTON)
        self._update_countdown(session.remaining_seconds)

    def _replace_answer_input(self, question) -> None:
        if self._answer_input is not None:
            self.answer_container.removeWidget(self._answer_input)
            self._answer_input.deleteLater()

        def submit(value: object) -> None:
            try:
                self.runner.submit_answer(question.id, value)
            except QuizError as exc:
                logger.warning("Rejected answer for question %s: %s", question.id, exc)
                show_error(self, ANSWER_ERROR_TITLE, str(exc))

        self._answer_input = create_answer_input(
            question, self.runner.get_answer(question.id), submit, self
        )
        self.answer_container.addWidget(self._answer_input)

    def _update_countdown(self, remaining_seconds: int) -> None:
        self.countdown_label.setText(COUNTDOWN_TEMPLATE.format(seconds=remaining_seconds))
        self.countdown_label.setStyleSheet(
            Styles.get_countdown_style(warning=remaining_seconds <= TIME_LIMIT_WARNING_WINDOW_SECONDS)
        )

    def _handle_next(self) -> None:
        self.runner.advance()

    def _handle_transition(self, session: QuizSession) -> None:
        if session.is_terminal():
            self.countdown_label.setText("")
            self.result_panel.show_result(session.result, session.quiz.points_per_question)
            self.page_stack.setCurrentWidget(self.result_panel)
            return
        self._display_current_question()

    def closeEvent(self, event: QCloseEvent) -> None:
        if not self.runner.session.is_terminal() and not confirm_leave_quiz(self):
            event.ignore()
            return
        self.runner.close()
        super().closeEvent(event)
