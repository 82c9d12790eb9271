"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz App"
WINDOW_MIN_WIDTH: int = 560
WINDOW_MIN_HEIGHT: int = 640

QUIZ_HEADER: str = "Quiz Time!"
QUESTION_NUMBER_TEMPLATE: str = "Question {number}:"
PROGRESS_TEMPLATE: str = "{answered} of {total} answered"
SUBMIT_BUTTON: str = "Submit Answers"
SELECTED_MARK: str = "●"
UNSELECTED_MARK: str = "○"

RESULTS_HEADER: str = "Quiz Results"
RESULTS_SCORE_LABEL: str = "Your Score"
RESULTS_SCORE_TEMPLATE: str = "{score} out of {total}"
TRY_AGAIN_BUTTON: str = "Try Again"

ABOUT_BUTTON: str = "About"
HELP_BUTTON: str = "Help"
SETTINGS_BUTTON: str = "Settings"

DEFAULT_QUIZ_FONT_SIZE: int = 12
MIN_QUIZ_FONT_SIZE: int = 9
MAX_QUIZ_FONT_SIZE: int = 24
RESULTS_ICON_FONT_SIZE: int = 64
