"""Qt main window switching between the quiz and results screens."""

from __future__ import annotations

import logging
from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quiz_app.constants.ui_constants import (
    ABOUT_BUTTON,
    DEFAULT_QUIZ_FONT_SIZE,
    HELP_BUTTON,
    SETTINGS_BUTTON,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from quiz_app.core.quiz_controller import QuizController, QuizScreen, ResultsScreen
from quiz_app.core.services.quiz_session import QuizStateError
from quiz_app.styling.color_palette import Theme
from quiz_app.styling.styles import Styles
from quiz_app.ui.components.quiz_panel import QuizPanel
from quiz_app.ui.components.results_panel import ResultsPanel
from quiz_app.ui.dialog_helpers import show_info, show_warning
from quiz_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class ActiveScreen(Enum):
    """Pages of the stacked widget."""

    QUIZ = auto()
    RESULTS = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window rendering whatever the controller reports as active."""

    def __init__(self, controller: QuizController) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.controller = controller
        self._quiz_font_size: int = DEFAULT_QUIZ_FONT_SIZE
        self._theme: Theme = Theme.LIGHT
        self._showing: ActiveScreen | None = None

        self._build_ui()
        self._apply_styles()
        self.controller.set_on_change(self.refresh)
        self.refresh()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_top_buttons(root_layout)

        self.screen_stack = QStackedWidget(self)
        self.quiz_panel = QuizPanel(self.controller.session.questions, self)
        self.results_panel = ResultsPanel(self)
        self.screen_stack.addWidget(self.quiz_panel)
        self.screen_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.screen_stack, stretch=1)

    def _build_top_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def refresh(self) -> None:
        """Re-render from the controller's current screen snapshot."""
        screen = self.controller.render()
        if isinstance(screen, ResultsScreen):
            self.results_panel.apply_screen(screen)
            self._set_screen(ActiveScreen.RESULTS)
        else:
            self.quiz_panel.apply_screen(self._guard_submit(screen))
            self._set_screen(ActiveScreen.QUIZ)

    def _guard_submit(self, screen: QuizScreen) -> QuizScreen:
        """Wrap the submit action so a rejected submission shows a warning."""

        def submit() -> None:
            try:
                screen.submit()
            except QuizStateError as exc:
                logger.warning("Submission rejected: %s", exc)
                show_warning(self, "Quiz incomplete", str(exc))

        return QuizScreen(
            questions=screen.questions,
            selections=screen.selections,
            ready_to_submit=screen.ready_to_submit,
            answered_count=screen.answered_count,
            select_answer=screen.select_answer,
            submit=submit,
        )

    def _set_screen(self, screen: ActiveScreen) -> None:
        if screen == self._showing:
            return
        previous = self._showing
        self._showing = screen
        index_map = {
            ActiveScreen.QUIZ: 0,
            ActiveScreen.RESULTS: 1,
        }
        self.screen_stack.setCurrentIndex(index_map[screen])
        if previous == ActiveScreen.RESULTS and screen == ActiveScreen.QUIZ:
            self.quiz_panel.scroll_to_top()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._quiz_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._quiz_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._quiz_font_size, self._theme)
        if dialog.exec():
            self._quiz_font_size = dialog.get_quiz_font_size()
            self._theme = dialog.get_theme()
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.quiz_panel.apply_theme(self._theme)
        self.quiz_panel.apply_font_size(self._quiz_font_size)
        self.results_panel.apply_theme(self._theme)
        self.results_panel.apply_font_size(self._quiz_font_size)
