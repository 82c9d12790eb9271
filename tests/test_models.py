import pytest

from quiz_app.core.default_quiz import default_questions
from quiz_app.core.models import UNANSWERED, Question, Selected, Unanswered


def test_question_stores_options_as_tuple():
    question = Question(text="2 + 2?", options=["3", "4"], correct_answer_index=1)
    assert question.options == ("3", "4")
    assert question.option_count == 2


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_question_rejects_out_of_range_correct_index(index):
    with pytest.raises(ValueError, match="out of range"):
        Question(text="2 + 2?", options=("3", "4"), correct_answer_index=index)


def test_question_requires_two_options():
    with pytest.raises(ValueError, match="at least two"):
        Question(text="Only one?", options=("yes",), correct_answer_index=0)


def test_question_rejects_blank_text_and_options():
    with pytest.raises(ValueError):
        Question(text="   ", options=("a", "b"), correct_answer_index=0)
    with pytest.raises(ValueError):
        Question(text="Pick", options=("a", " "), correct_answer_index=0)


def test_question_is_immutable():
    question = Question(text="Pick", options=("a", "b"), correct_answer_index=0)
    with pytest.raises(AttributeError):
        question.correct_answer_index = 1


def test_selection_values():
    assert isinstance(UNANSWERED, Unanswered)
    assert Selected(2) == Selected(2)
    assert Selected(2) != Selected(3)
    assert Selected(0) != UNANSWERED


def test_default_quiz_matches_reference_answers():
    questions = default_questions()
    assert len(questions) == 5
    assert [q.correct_answer_index for q in questions] == [2, 1, 3, 1, 2]
    assert questions[0].options[2] == "Paris"
    assert questions[4].options[2] == "Au"
