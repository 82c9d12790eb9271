from __future__ import annotations

from quiz_app.core.services.quiz_session import QuizSession

# Correct option per question in the built-in quiz.
CORRECT_ANSWERS = [2, 1, 3, 1, 2]


def answer_with_score(session: QuizSession, score: int) -> None:
    """Answer every question so that exactly ``score`` are correct."""
    for index, correct in enumerate(CORRECT_ANSWERS):
        option = correct if index < score else (correct + 1) % 4
        session.select_answer(index, option)
