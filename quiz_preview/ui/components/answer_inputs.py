"""Input widgets for each question type.

Every widget reports the raw value a user produced through ``on_change``;
turning that value into a typed answer is left to the quiz runner.
"""

from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QButtonGroup,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QRadioButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from quiz_preview.constants.ui_constants import (
    FREE_TEXT_PLACEHOLDER,
    ORDERING_HINT,
    SLIDER_RANGE_TEMPLATE,
    SLIDER_VALUE_TEMPLATE,
)
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

ChangeCallback = Callable[[Any], None]


class SelectInput(QWidget):
    """One checkbox per choice; any number may be ticked."""

    def __init__(self, question: Question, answer: Answer | None, on_change: ChangeCallback,
                 parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_change = on_change
        selected = answer.choice_ids if isinstance(answer, SelectAnswer) else frozenset()

        layout = QVBoxLayout()
        self.setLayout(layout)
        self._boxes: list[tuple[str, QCheckBox]] = []
        for choice in question.choices:
            box = QCheckBox(choice.text, self)
            box.setChecked(choice.id in selected)
            box.toggled.connect(self._emit)
            layout.addWidget(box)
            self._boxes.append((choice.id, box))

    def _emit(self, *_args: object) -> None:
        self._on_change([choice_id for choice_id, box in self._boxes if box.isChecked()])


class TrueFalseInput(QWidget):
    """Radio buttons; exactly one choice can be picked."""

    def __init__(self, question: Question, answer: Answer | None, on_change: ChangeCallback,
                 parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_change = on_change
        picked = answer.choice_id if isinstance(answer, TrueFalseAnswer) else None

        layout = QVBoxLayout()
        self.setLayout(layout)
        self._group = QButtonGroup(self)
        self._ids: dict[int, str] = {}
        for idx, choice in enumerate(question.choices):
            button = QRadioButton(choice.text, self)
            button.setChecked(choice.id == picked)
            self._group.addButton(button, idx)
            self._ids[idx] = choice.id
            layout.addWidget(button)
        self._group.idClicked.connect(self._emit)

    def _emit(self, button_id: int) -> None:
        self._on_change(self._ids[button_id])


class OrderingInput(QWidget):
    """Drag-to-reorder list of choices."""

    def __init__(self, question: Question, answer: Answer | None, on_change: ChangeCallback,
                 parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_change = on_change
        if isinstance(answer, OrderingAnswer):
            ordered_ids = list(answer.choice_ids)
        else:
            ordered_ids = [choice.id for choice in question.choices]

        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addWidget(QLabel(ORDERING_HINT, self))

        self._list = QListWidget(self)
        self._list.setDragDropMode(QAbstractItemView.InternalMove)
        self._list.setDefaultDropAction(Qt.MoveAction)
        for choice_id in ordered_ids:
            choice = question.get_choice(choice_id)
            item = QListWidgetItem(choice.text if choice else choice_id)
            item.setData(Qt.UserRole, choice_id)
            self._list.addItem(item)
        self._list.model().rowsMoved.connect(self._emit)
        layout.addWidget(self._list)

    def _emit(self, *_args: object) -> None:
        ids = [self._list.item(row).data(Qt.UserRole) for row in range(self._list.count())]
        self._on_change(ids)


class SliderInput(QWidget):
    """Integer slider between the question's min and max."""

    def __init__(self, question: Question, answer: Answer | None, on_change: ChangeCallback,
                 parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_change = on_change
        choice = next(c for c in question.choices if c.correct_value is not None)
        minimum, maximum = int(choice.min), int(choice.max)
        current = minimum
        if isinstance(answer, SliderAnswer):
            current = int(answer.raw_value.strip())

        layout = QVBoxLayout()
        self.setLayout(layout)

        range_row = QHBoxLayout()
        range_row.addWidget(QLabel(SLIDER_RANGE_TEMPLATE.format(min=minimum, max=maximum), self))
        layout.addLayout(range_row)

        self._slider = QSlider(Qt.Horizontal, self)
        self._slider.setRange(minimum, maximum)
        self._slider.setValue(current)
        self._slider.valueChanged.connect(self._emit)
        layout.addWidget(self._slider)

        self._value_label = QLabel(SLIDER_VALUE_TEMPLATE.format(value=current), self)
        self._value_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._value_label)

    def _emit(self, value: int) -> None:
        self._value_label.setText(SLIDER_VALUE_TEMPLATE.format(value=value))
        self._on_change(str(value))


class FreeTextInput(QWidget):
    """Single-line text answer."""

    def __init__(self, question: Question, answer: Answer | None, on_change: ChangeCallback,
                 parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        self.setLayout(layout)
        self._line_edit = QLineEdit(self)
        self._line_edit.setPlaceholderText(FREE_TEXT_PLACEHOLDER)
        if isinstance(answer, FreeTextAnswer):
            self._line_edit.setText(answer.text)
        self._line_edit.textChanged.connect(on_change)
        layout.addWidget(self._line_edit)


_INPUTS: dict[QuestionType, type[QWidget]] = {
    QuestionType.SELECT: SelectInput,
    QuestionType.TRUE_FALSE: TrueFalseInput,
    QuestionType.ORDERING: OrderingInput,
    QuestionType.SLIDER: SliderInput,
    QuestionType.FREE_TEXT: FreeTextInput,
}


def create_answer_input(
    question: Question,
    answer: Answer | None,
    on_change: ChangeCallback,
    parent: QWidget | None = None,
) -> QWidget:
    """Build the input widget matching ``question.type``."""
    return _INPUTS[question.type](question, answer, on_change, parent)
