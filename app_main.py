"""Application entry point for Quiz Time."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from quiz_app.constants.quiz_constants import DEFAULT_QUIZ_FILE_NAME
from quiz_app.core.default_quiz import default_questions
from quiz_app.core.models import Question
from quiz_app.core.quiz_controller import QuizController
from quiz_app.core.quiz_importer import QuizImportError, load_quiz_from_file
from quiz_app.core.services.quiz_session import QuizSession
from quiz_app.ui.dialog_helpers import show_error
from quiz_app.ui.quiz_main_window import QuizMainWindow
from quiz_app.utils.logging_config import configure_logging, resolve_log_level


def _log_level(value: str) -> int:
    try:
        return resolve_log_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(description="Multiple-choice quiz.")
    parser.add_argument(
        "--questions",
        type=Path,
        default=None,
        help=f"Plain-text quiz file (defaults to ./{DEFAULT_QUIZ_FILE_NAME} if present).",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default="INFO",
        help="Logging level name, e.g. DEBUG or WARNING.",
    )
    # Anything unknown belongs to Qt.
    return parser.parse_known_args(argv)


def _load_questions(
    requested_path: Path | None, logger: logging.Logger
) -> tuple[tuple[Question, ...], str | None]:
    """Return the question set and an error message if a requested file failed."""
    if requested_path is None:
        candidate = Path(DEFAULT_QUIZ_FILE_NAME)
        if not candidate.exists():
            logger.info("Using built-in quiz")
            return default_questions(), None
    else:
        candidate = requested_path

    try:
        imported = load_quiz_from_file(candidate)
    except (OSError, QuizImportError) as exc:
        logger.error("Could not load quiz from %s: %s", candidate, exc)
        return default_questions(), f"Could not load {candidate}:\n{exc}\n\nUsing the built-in quiz instead."
    return tuple(imported.questions), None


def main() -> None:
    """Initialize logging, load questions, and launch the Qt UI."""
    args, qt_args = _parse_args(sys.argv[1:])
    logger = configure_logging(args.log_level)
    logger.info("Starting Quiz Time…")

    questions, load_error = _load_questions(args.questions, logger)
    controller = QuizController(QuizSession(questions))

    app = QApplication([sys.argv[0], *qt_args])
    window = QuizMainWindow(controller)
    window.show()
    if load_error:
        show_error(window, "Quiz file rejected", load_error)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
