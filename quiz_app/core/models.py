"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a single correct option."""

    text: str
    options: tuple[str, ...]
    correct_answer_index: int

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("Question text must not be empty.")
        # Accept any sequence from callers but always store a tuple.
        object.__setattr__(self, "options", tuple(self.options))
        if len(self.options) < 2:
            raise ValueError("Each question must have at least two options.")
        if any(not option.strip() for option in self.options):
            raise ValueError("Option text cannot be empty.")
        if not 0 <= self.correct_answer_index < len(self.options):
            raise ValueError(
                f"Correct answer index {self.correct_answer_index} is out of range "
                f"for {len(self.options)} options."
            )

    @property
    def option_count(self) -> int:
        return len(self.options)


@dataclass(frozen=True, slots=True)
class Unanswered:
    """Marker for a question the user has not answered yet."""


@dataclass(frozen=True, slots=True)
class Selected:
    """The option index the user picked for a question."""

    option_index: int


Selection = Unanswered | Selected

UNANSWERED = Unanswered()


class QuizPhase(Enum):
    """Which screen the quiz is on."""

    TAKING = auto()
    RESULTS = auto()
