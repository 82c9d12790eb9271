"""Presentation logic deciding which screen is shown and wiring user actions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from quiz_app.core.feedback import ResultFeedback, build_feedback
from quiz_app.core.models import Question, QuizPhase, Selection
from quiz_app.core.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuizScreen:
    """Snapshot handed to the quiz-taking view."""

    questions: tuple[Question, ...]
    selections: tuple[Selection, ...]
    ready_to_submit: bool
    answered_count: int
    select_answer: Callable[[int, int], None]
    submit: Callable[[], None]

    @property
    def total_questions(self) -> int:
        return len(self.questions)


@dataclass(frozen=True, slots=True)
class ResultsScreen:
    """Snapshot handed to the results view."""

    score: int
    total_questions: int
    feedback: ResultFeedback
    reset: Callable[[], None]


class QuizController:
    """Facade between the rendering layer and the quiz session."""

    def __init__(
        self,
        session: QuizSession,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._session = session
        self._on_change = on_change

    @property
    def session(self) -> QuizSession:
        return self._session

    @property
    def phase(self) -> QuizPhase:
        return self._session.phase

    def set_on_change(self, callback: Callable[[], None] | None) -> None:
        self._on_change = callback

    def render(self) -> QuizScreen | ResultsScreen:
        """Build the snapshot for whichever screen is currently active."""
        session = self._session
        if session.show_results:
            return ResultsScreen(
                score=session.score,
                total_questions=session.total_questions,
                feedback=build_feedback(session.score, session.total_questions),
                reset=self.reset,
            )
        return QuizScreen(
            questions=session.questions,
            selections=session.selections,
            ready_to_submit=session.all_answered(),
            answered_count=session.answered_count(),
            select_answer=self.select_answer,
            submit=self.submit,
        )

    def select_answer(self, question_index: int, option_index: int) -> None:
        self._session.select_answer(question_index, option_index)
        self._notify()

    def submit(self) -> None:
        self._session.submit()
        self._notify()

    def reset(self) -> None:
        self._session.reset()
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
