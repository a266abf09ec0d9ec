"""Tests for the per-type answer widgets."""

from __future__ import annotations

from PySide6.QtWidgets import QCheckBox, QLineEdit, QListWidget, QRadioButton, QSlider

from quiz_preview.core.models import SliderAnswer, TrueFalseAnswer
from quiz_preview.ui.components.answer_inputs import (
    OrderingInput,
    SelectInput,
    SliderInput,
    TrueFalseInput,
    create_answer_input,
)

from quiz_factories import (
    make_free_text_question,
    make_ordering_question,
    make_select_question,
    make_slider_question,
    make_true_false_question,
)


def test_factory_picks_widget_by_type(qtbot):
    widget = create_answer_input(make_ordering_question(), None, lambda _value: None)
    qtbot.addWidget(widget)
    assert isinstance(widget, OrderingInput)


def test_select_reports_ticked_ids(qtbot):
    values = []
    widget = SelectInput(make_select_question(), None, values.append)
    qtbot.addWidget(widget)

    boxes = widget.findChildren(QCheckBox)
    boxes[0].setChecked(True)
    boxes[2].setChecked(True)

    assert values[-1] == ["two", "four"]


def test_true_false_restores_previous_answer(qtbot):
    widget = TrueFalseInput(make_true_false_question(), TrueFalseAnswer("b"), lambda _value: None)
    qtbot.addWidget(widget)

    checked = [button.text() for button in widget.findChildren(QRadioButton) if button.isChecked()]
    assert checked == ["False"]


def test_ordering_lists_choices_in_authored_order(qtbot):
    widget = OrderingInput(make_ordering_question(), None, lambda _value: None)
    qtbot.addWidget(widget)

    items = widget.findChild(QListWidget)
    assert [items.item(row).text() for row in range(items.count())] == ["10", "1", "5"]


def test_slider_reports_value_as_text(qtbot):
    values = []
    widget = SliderInput(make_slider_question(), SliderAnswer("3"), values.append)
    qtbot.addWidget(widget)

    slider = widget.findChild(QSlider)
    assert slider.value() == 3
    slider.setValue(7)
    assert values == ["7"]


def test_free_text_reports_typed_text(qtbot):
    values = []
    widget = create_answer_input(make_free_text_question(), None, values.append)
    qtbot.addWidget(widget)

    widget.findChild(QLineEdit).setText("Paris")
    assert values[-1] == "Paris"
