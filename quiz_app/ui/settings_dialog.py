"""Settings dialog for configuring Quiz Time preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSpinBox,
    QPushButton,
    QGroupBox,
    QCheckBox,
)

from quiz_app.constants.ui_constants import (
    DEFAULT_QUIZ_FONT_SIZE,
    MAX_QUIZ_FONT_SIZE,
    MIN_QUIZ_FONT_SIZE,
)
from quiz_app.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        quiz_font_size: int = DEFAULT_QUIZ_FONT_SIZE,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)

        self._quiz_font_size = max(MIN_QUIZ_FONT_SIZE, min(MAX_QUIZ_FONT_SIZE, quiz_font_size))
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Quiz font size (questions, answers):")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(MIN_QUIZ_FONT_SIZE, MAX_QUIZ_FONT_SIZE)
        self.font_spinbox.setValue(self._quiz_font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        display_layout.addLayout(font_row)

        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._theme == Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_quiz_font_size(self) -> int:
        """Get the selected quiz font size."""
        return self.font_spinbox.value()

    def get_theme(self) -> Theme:
        """Get the selected colour theme."""
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT
