"""Card widget showing one question and its selectable options."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_app.constants.ui_constants import (
    QUESTION_NUMBER_TEMPLATE,
    SELECTED_MARK,
    UNSELECTED_MARK,
)
from quiz_app.core.markdown_renderer import renderer
from quiz_app.core.models import Question, Selected, Selection
from quiz_app.styling.color_palette import Theme
from quiz_app.styling.styles import Styles


def option_button_text(option_text: str, is_selected: bool) -> str:
    """Button label with a selection mark; '&' is doubled so Qt shows it literally."""
    mark = SELECTED_MARK if is_selected else UNSELECTED_MARK
    return f"{mark}  {option_text.replace('&', '&&')}"


class QuestionCard(QFrame):
    """Displays a question with one checkable button per option."""

    def __init__(
        self,
        question_index: int,
        question: Question,
        on_select: Callable[[int, int], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("questionCard")
        self.question_index = question_index
        self.question = question
        self.on_select = on_select
        self.option_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.number_label = QLabel(
            QUESTION_NUMBER_TEMPLATE.format(number=self.question_index + 1), self
        )
        self.number_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.number_label)

        self.text_label = QLabel(self)
        self.text_label.setTextFormat(Qt.RichText)
        self.text_label.setWordWrap(True)
        self.text_label.setText(renderer.render_fragment(self.question.text))
        layout.addWidget(self.text_label)

        self.button_group = QButtonGroup(self)
        self.button_group.setExclusive(True)
        for option_index, _option in enumerate(self.question.options):
            button = QPushButton(self)
            button.setCheckable(True)
            button.clicked.connect(
                lambda _checked=False, idx=option_index: self.on_select(self.question_index, idx)
            )
            self.button_group.addButton(button, option_index)
            self.option_buttons.append(button)
            layout.addWidget(button)

        self.show_selection(None)

    def show_selection(self, selection: Selection | None) -> None:
        """Check the button matching ``selection``; clear all when unanswered."""
        selected_index = selection.option_index if isinstance(selection, Selected) else None

        # An exclusive group refuses to uncheck its last checked button.
        self.button_group.setExclusive(False)
        for option_index, button in enumerate(self.option_buttons):
            is_selected = option_index == selected_index
            button.setChecked(is_selected)
            button.setText(option_button_text(self.question.options[option_index], is_selected))
        self.button_group.setExclusive(True)

    def apply_theme(self, theme: Theme) -> None:
        style = Styles.get_option_button_style(theme)
        for button in self.option_buttons:
            button.setStyleSheet(style)

    def apply_font_size(self, font_size: int) -> None:
        self.number_label.setStyleSheet(f"font-size: {font_size}pt; font-weight: bold;")
        self.text_label.setStyleSheet(f"font-size: {font_size + 2}pt;")
        for button in self.option_buttons:
            font = button.font()
            font.setPointSize(font_size)
            button.setFont(font)
