from __future__ import annotations

import pytest

from quiz_app.core.default_quiz import default_questions
from quiz_app.core.quiz_controller import QuizController
from quiz_app.core.services.quiz_session import QuizSession


@pytest.fixture
def session() -> QuizSession:
    return QuizSession(default_questions())


@pytest.fixture
def controller(session: QuizSession) -> QuizController:
    return QuizController(session)
