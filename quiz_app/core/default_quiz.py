"""Built-in general knowledge quiz used when no quiz file is supplied."""

from __future__ import annotations

from quiz_app.core.models import Question


def default_questions() -> tuple[Question, ...]:
    return (
        Question(
            text="What is the capital of France?",
            options=("London", "Berlin", "Paris", "Madrid"),
            correct_answer_index=2,
        ),
        Question(
            text="Which planet is known as the Red Planet?",
            options=("Venus", "Mars", "Jupiter", "Saturn"),
            correct_answer_index=1,
        ),
        Question(
            text="What is the largest ocean on Earth?",
            options=("Atlantic Ocean", "Indian Ocean", "Arctic Ocean", "Pacific Ocean"),
            correct_answer_index=3,
        ),
        Question(
            text="Who wrote 'Romeo and Juliet'?",
            options=("Charles Dickens", "William Shakespeare", "Jane Austen", "Mark Twain"),
            correct_answer_index=1,
        ),
        Question(
            text="What is the chemical symbol for gold?",
            options=("Go", "Gd", "Au", "Ag"),
            correct_answer_index=2,
        ),
    )
