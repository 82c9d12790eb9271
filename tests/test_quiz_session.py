import pytest

from quiz_app.core.models import UNANSWERED, Question, QuizPhase, Selected
from quiz_app.core.services.quiz_session import (
    QuizNotCompleteError,
    QuizSession,
    QuizStateError,
)

from quiz_helpers import CORRECT_ANSWERS, answer_with_score


def test_new_session_starts_unanswered(session):
    assert session.selections == (UNANSWERED,) * 5
    assert session.score == 0
    assert session.phase is QuizPhase.TAKING
    assert not session.show_results
    assert session.total_questions == 5


def test_session_requires_questions():
    with pytest.raises(ValueError):
        QuizSession([])


def test_select_answer_records_and_overwrites(session):
    session.select_answer(0, 1)
    assert session.selection_for(0) == Selected(1)

    session.select_answer(0, 3)
    assert session.selection_for(0) == Selected(3)

    session.select_answer(0, 3)
    assert session.selection_for(0) == Selected(3)
    assert len(session.selections) == len(session.questions)


@pytest.mark.parametrize("question_index, option_index", [(-1, 0), (5, 0), (0, -1), (0, 4)])
def test_select_answer_rejects_out_of_range(session, question_index, option_index):
    with pytest.raises(IndexError):
        session.select_answer(question_index, option_index)
    assert session.selections == (UNANSWERED,) * 5


def test_all_answered_needs_every_question(session):
    for index in range(4):
        session.select_answer(index, 0)
    assert not session.all_answered()
    assert session.answered_count() == 4
    assert session.unanswered_numbers() == [5]

    session.select_answer(4, 0)
    assert session.all_answered()
    assert session.unanswered_numbers() == []


def test_all_answered_false_when_only_first_missing(session):
    for index in range(1, 5):
        session.select_answer(index, 0)
    assert not session.all_answered()


def test_submit_counts_matching_selections(session):
    answer_with_score(session, 3)
    assert session.submit() == 3
    assert session.score == 3
    assert session.phase is QuizPhase.RESULTS
    assert session.show_results


def test_submit_all_correct(session):
    for index, correct in enumerate(CORRECT_ANSWERS):
        session.select_answer(index, correct)
    assert session.submit() == 5


def test_submit_refuses_incomplete_quiz(session):
    session.select_answer(0, 2)
    session.select_answer(2, 3)

    with pytest.raises(QuizNotCompleteError) as excinfo:
        session.submit()

    assert excinfo.value.unanswered_numbers == [2, 4, 5]
    assert "2, 4, 5" in str(excinfo.value)
    assert session.phase is QuizPhase.TAKING
    assert session.score == 0


def test_submit_recomputes_score_from_scratch(session):
    answer_with_score(session, 5)
    session.submit()
    session.reset()
    answer_with_score(session, 1)
    assert session.submit() == 1


def test_selection_blocked_after_submit(session):
    answer_with_score(session, 2)
    session.submit()
    with pytest.raises(QuizStateError):
        session.select_answer(0, 0)
    assert session.score == 2


def test_is_correct_ignores_unanswered(session):
    assert not session.is_correct(0)
    session.select_answer(0, 2)
    assert session.is_correct(0)


def test_reset_restores_initial_state(session):
    answer_with_score(session, 4)
    session.submit()

    session.reset()

    assert session.selections == (UNANSWERED,) * 5
    assert session.score == 0
    assert session.phase is QuizPhase.TAKING
    assert len(session.questions) == 5


def test_reset_is_idempotent(session):
    session.select_answer(1, 1)
    session.reset()
    once = (session.selections, session.score, session.phase)
    session.reset()
    assert (session.selections, session.score, session.phase) == once


def test_questions_are_not_rebuilt_on_reset(session):
    questions = session.questions
    session.reset()
    assert session.questions is questions


def test_two_option_question():
    session = QuizSession([Question(text="True?", options=("Yes", "No"), correct_answer_index=0)])
    with pytest.raises(IndexError):
        session.select_answer(0, 2)
    session.select_answer(0, 0)
    assert session.submit() == 1
