"""Utilities for importing quizzes from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text (supports markdown). Additional lines until the
       next marker are treated as part of the question.
    A: First option text
    B: Second option text
    ...                (at least two options, lettered contiguously from A)
    CORRECT: letter of the correct option

Example:

    Q: What is the chemical symbol for gold?
    A: Go
    B: Gd
    C: Au
    D: Ag
    CORRECT: C

Architecture note:
    Plain text keeps quizzes easy to write by hand. The parser only produces
    ``Question`` values, so the session never needs to know where its
    questions came from.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from pathlib import Path

from quiz_app.constants.quiz_constants import MAX_OPTIONS_PER_QUESTION
from quiz_app.core.models import Question

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    questions: list[Question]


_OPTION_LETTERS = string.ascii_uppercase[:MAX_OPTIONS_PER_QUESTION]


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    logger.info("Loaded %d questions from %s", len(questions), file_path)
    return ImportedQuiz(source_path=file_path, questions=questions)


def parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            # Blank line encountered after content - finalize current block
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    questions: list[Question] = []
    for number, block in enumerate(blocks, start=1):
        try:
            questions.append(_parse_block(block))
        except QuizImportError as exc:
            raise QuizImportError(f"Question {number}: {exc}") from exc
    return questions


def _parse_block(block: str) -> Question:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        # Once options have started, "Q:" is the seventeenth option letter.
        if upper.startswith("Q:") and not options:
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_LETTERS and line[1] == ":":
            letter = line[0].upper()
            if letter in options:
                raise QuizImportError(f"Option {letter} is defined twice.")
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in options:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    if not question_lines:
        raise QuizImportError("Question text missing (Q: ...)")

    expected_letters = list(_OPTION_LETTERS[: len(options)])
    if sorted(options) != expected_letters:
        raise QuizImportError("Options must be lettered contiguously starting at A.")
    if len(options) < 2:
        raise QuizImportError("Each question must define at least two options.")

    option_list = [options[letter].strip() for letter in expected_letters]
    if any(not opt for opt in option_list):
        raise QuizImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError("CORRECT line missing.")
    if correct_letter not in expected_letters:
        raise QuizImportError(
            f"CORRECT must be one of {', '.join(expected_letters)}."
        )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text cannot be empty.")

    return Question(
        text=question_text,
        options=tuple(option_list),
        correct_answer_index=expected_letters.index(correct_letter),
    )
