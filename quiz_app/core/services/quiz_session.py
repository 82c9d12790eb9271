"""Service holding the questions, answer selections and score of one quiz run."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from quiz_app.core.models import UNANSWERED, Question, QuizPhase, Selected, Selection, Unanswered

logger = logging.getLogger(__name__)


class QuizStateError(RuntimeError):
    """Raised when an action is not allowed in the current quiz phase."""


class QuizNotCompleteError(QuizStateError):
    """Raised when submitting while some questions are still unanswered."""

    def __init__(self, unanswered_numbers: list[int]) -> None:
        self.unanswered_numbers = unanswered_numbers
        numbers = ", ".join(str(number) for number in unanswered_numbers)
        super().__init__(f"Cannot submit: question(s) {numbers} not answered yet.")


class QuizSession:
    """Mutable state of a single quiz run.

    The question list is fixed at construction. Selections, score and phase
    are mutated in place by ``select_answer``, ``submit`` and ``reset``.
    """

    def __init__(self, questions: Sequence[Question]) -> None:
        if not questions:
            raise ValueError("Quiz must contain at least one question.")
        self._questions: tuple[Question, ...] = tuple(questions)
        self._selections: list[Selection] = [UNANSWERED] * len(self._questions)
        self._score: int = 0
        self._phase: QuizPhase = QuizPhase.TAKING

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def selections(self) -> tuple[Selection, ...]:
        return tuple(self._selections)

    @property
    def score(self) -> int:
        return self._score

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def show_results(self) -> bool:
        return self._phase is QuizPhase.RESULTS

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    def selection_for(self, question_index: int) -> Selection:
        self._check_question_index(question_index)
        return self._selections[question_index]

    def select_answer(self, question_index: int, option_index: int) -> None:
        """Record the chosen option for a question, replacing any earlier choice."""
        self._check_question_index(question_index)
        option_count = self._questions[question_index].option_count
        if not 0 <= option_index < option_count:
            raise IndexError(
                f"Option index {option_index} out of range for question {question_index + 1}"
            )
        if self._phase is not QuizPhase.TAKING:
            raise QuizStateError("Answers cannot be changed after the quiz was submitted.")

        self._selections[question_index] = Selected(option_index)
        logger.debug("Question %d: selected option %d", question_index + 1, option_index)

    def all_answered(self) -> bool:
        return not any(isinstance(selection, Unanswered) for selection in self._selections)

    def answered_count(self) -> int:
        return sum(1 for selection in self._selections if isinstance(selection, Selected))

    def unanswered_numbers(self) -> list[int]:
        """Return the 1-based numbers of questions without a selection."""
        return [
            index + 1
            for index, selection in enumerate(self._selections)
            if isinstance(selection, Unanswered)
        ]

    def is_correct(self, question_index: int) -> bool:
        selection = self.selection_for(question_index)
        if isinstance(selection, Unanswered):
            return False
        return selection.option_index == self._questions[question_index].correct_answer_index

    def submit(self) -> int:
        """Score the quiz and switch to the results phase.

        Raises:
            QuizNotCompleteError: if any question is still unanswered.

        Returns:
            The freshly computed score.
        """
        missing = self.unanswered_numbers()
        if missing:
            raise QuizNotCompleteError(missing)

        self._score = sum(1 for index in range(len(self._questions)) if self.is_correct(index))
        self._phase = QuizPhase.RESULTS
        logger.info("Quiz submitted: %d of %d correct", self._score, len(self._questions))
        return self._score

    def reset(self) -> None:
        """Clear all selections and return to the quiz-taking phase."""
        self._selections = [UNANSWERED] * len(self._questions)
        self._score = 0
        self._phase = QuizPhase.TAKING
        logger.debug("Quiz reset")

    def _check_question_index(self, question_index: int) -> None:
        if not 0 <= question_index < len(self._questions):
            raise IndexError(f"Question index {question_index} out of range")
