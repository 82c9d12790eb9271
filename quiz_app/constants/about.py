"""Static metadata describing Quiz Time."""

APP_NAME = "Quiz Time"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Time is a small multiple-choice quiz built with Qt. "
    "Answer every question, submit, and see how you did."
)

HELP_TEXT = (
    "Pick one answer for every question, then press 'Submit Answers'. "
    "The button stays disabled until all questions are answered.\n\n"
    "To use your own questions, start the app with --questions <file> or put a "
    "quiz_questions.txt next to where you launch it. File format:\n\n"
    "Q: What is the capital of France?\n"
    "A: London\nB: Berlin\nC: Paris\nD: Madrid\n"
    "CORRECT: C\n\n"
    "Q: Which planet is known as the Red Planet?\n"
    "A: Venus\nB: Mars\n"
    "CORRECT: B"
)
