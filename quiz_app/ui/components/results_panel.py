"""Component for the results screen shown after submission."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_app.constants.ui_constants import (
    RESULTS_HEADER,
    RESULTS_ICON_FONT_SIZE,
    RESULTS_SCORE_LABEL,
    RESULTS_SCORE_TEMPLATE,
    TRY_AGAIN_BUTTON,
)
from quiz_app.core.quiz_controller import ResultsScreen
from quiz_app.styling.color_palette import ColorPalette, Theme
from quiz_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """Shows the score, a tier icon and an encouraging message."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._screen: ResultsScreen | None = None
        self._theme = Theme.LIGHT

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.header_label = QLabel(RESULTS_HEADER, self)
        self.header_label.setAlignment(Qt.AlignCenter)
        self.header_label.setStyleSheet(Styles.get_title_label_style())
        layout.addWidget(self.header_label)

        layout.addStretch()

        self.icon_label = QLabel(self)
        self.icon_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.icon_label)

        self.score_caption_label = QLabel(RESULTS_SCORE_LABEL, self)
        self.score_caption_label.setAlignment(Qt.AlignCenter)
        self.score_caption_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_caption_label)

        self.score_label = QLabel(self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.message_label = QLabel(self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        layout.addStretch()

        self.try_again_button = QPushButton(TRY_AGAIN_BUTTON, self)
        self.try_again_button.setMinimumWidth(200)
        self.try_again_button.clicked.connect(self._handle_try_again)
        layout.addWidget(self.try_again_button, alignment=Qt.AlignHCenter)

    def apply_screen(self, screen: ResultsScreen) -> None:
        self._screen = screen
        self.icon_label.setText(screen.feedback.icon)
        self.score_label.setText(
            RESULTS_SCORE_TEMPLATE.format(score=screen.score, total=screen.total_questions)
        )
        self.message_label.setText(screen.feedback.message)
        self._apply_tier_colors()

    def _apply_tier_colors(self) -> None:
        if self._screen is None:
            return
        color = ColorPalette.for_tier(self._screen.feedback.tier).get(self._theme)
        self.icon_label.setStyleSheet(f"font-size: {RESULTS_ICON_FONT_SIZE}pt; color: {color};")
        self.score_label.setStyleSheet(f"font-size: 32pt; font-weight: bold; color: {color};")

    def _handle_try_again(self) -> None:
        if self._screen is None:
            return
        self._screen.reset()

    def apply_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.try_again_button.setStyleSheet(Styles.get_primary_button_style(theme))
        self._apply_tier_colors()

    def apply_font_size(self, font_size: int) -> None:
        self.message_label.setStyleSheet(f"font-size: {font_size + 2}pt;")
