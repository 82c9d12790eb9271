"""Component for the quiz-taking screen."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from quiz_app.constants.ui_constants import (
    PROGRESS_TEMPLATE,
    QUIZ_HEADER,
    SUBMIT_BUTTON,
)
from quiz_app.core.models import Question
from quiz_app.core.quiz_controller import QuizScreen
from quiz_app.styling.color_palette import Theme
from quiz_app.styling.styles import Styles
from quiz_app.ui.components.question_card import QuestionCard


class QuizPanel(QWidget):
    """UI component listing every question with a submit button at the end."""

    def __init__(self, questions: tuple[Question, ...], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.questions = questions
        self.question_cards: list[QuestionCard] = []
        self._screen: QuizScreen | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.header_label = QLabel(QUIZ_HEADER, self)
        self.header_label.setAlignment(Qt.AlignCenter)
        self.header_label.setStyleSheet(Styles.get_title_label_style())
        layout.addWidget(self.header_label)

        self.progress_label = QLabel(
            PROGRESS_TEMPLATE.format(answered=0, total=len(self.questions)), self
        )
        self.progress_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.progress_label)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        scroll_content = QWidget(self.scroll_area)
        cards_layout = QVBoxLayout()
        scroll_content.setLayout(cards_layout)
        for index, question in enumerate(self.questions):
            card = QuestionCard(index, question, self._handle_select, scroll_content)
            cards_layout.addWidget(card)
            self.question_cards.append(card)
        cards_layout.addStretch()
        self.scroll_area.setWidget(scroll_content)
        layout.addWidget(self.scroll_area, stretch=1)

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.setEnabled(False)
        self.submit_button.clicked.connect(self._handle_submit)
        layout.addWidget(self.submit_button)

    def apply_screen(self, screen: QuizScreen) -> None:
        """Sync checked options, progress and the submit button with ``screen``."""
        self._screen = screen
        for card, selection in zip(self.question_cards, screen.selections):
            card.show_selection(selection)
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(answered=screen.answered_count, total=screen.total_questions)
        )
        self.submit_button.setEnabled(screen.ready_to_submit)

    def scroll_to_top(self) -> None:
        self.scroll_area.verticalScrollBar().setValue(0)

    def _handle_select(self, question_index: int, option_index: int) -> None:
        if self._screen is None:
            return
        self._screen.select_answer(question_index, option_index)

    def _handle_submit(self) -> None:
        if self._screen is None or not self._screen.ready_to_submit:
            return
        self._screen.submit()

    def apply_theme(self, theme: Theme) -> None:
        self.submit_button.setStyleSheet(Styles.get_primary_button_style(theme))
        for card in self.question_cards:
            card.apply_theme(theme)

    def apply_font_size(self, font_size: int) -> None:
        self.progress_label.setStyleSheet(f"font-size: {font_size}pt;")
        for card in self.question_cards:
            card.apply_font_size(font_size)
