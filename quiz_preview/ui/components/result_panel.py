"""Component shown once the quiz has been graded."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QListWidget, QPushButton, QVBoxLayout, QWidget

from quiz_preview.constants.ui_constants import (
    CLOSE_BUTTON,
    RESULT_BREAKDOWN_TEMPLATE,
    RESULT_HEADING,
    RESULT_PERCENTAGE_TEMPLATE,
    RESULT_SCORE_TEMPLATE,
)
from quiz_preview.core.models import QuizResult
from quiz_preview.styling.styles import Styles


class ResultPanel(QWidget):
    """Final score, percentage and a per-question breakdown."""

    def __init__(self, on_close: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_close = on_close
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        heading = QLabel(RESULT_HEADING, self)
        heading.setAlignment(Qt.AlignCenter)
        heading.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(heading)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.percentage_label = QLabel("", self)
        self.percentage_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.percentage_label)

        self.breakdown_list = QListWidget(self)
        layout.addWidget(self.breakdown_list, stretch=1)

        close_button = QPushButton(CLOSE_BUTTON, self)
        close_button.clicked.connect(self.on_close)
        layout.addWidget(close_button)

    def show_result(self, result: QuizResult, points_per_question: float) -> None:
        self.score_label.setText(RESULT_SCORE_TEMPLATE.format(score=result.total_score))
        self.percentage_label.setText(
            RESULT_PERCENTAGE_TEMPLATE.format(percentage=result.percentage_correct)
        )
        self.breakdown_list.clear()
        for number, grade in enumerate(result.grades, start=1):
            self.breakdown_list.addItem(
                RESULT_BREAKDOWN_TEMPLATE.format(
                    number=number,
                    awarded=round(grade.awarded_points, 2),
                    points=points_per_question,
                )
            )
