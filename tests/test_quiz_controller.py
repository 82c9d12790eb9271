import pytest

from quiz_app.core.feedback import FeedbackTier
from quiz_app.core.models import UNANSWERED, QuizPhase, Selected
from quiz_app.core.quiz_controller import QuizController, QuizScreen, ResultsScreen
from quiz_app.core.services.quiz_session import QuizNotCompleteError

from quiz_helpers import answer_with_score


def test_initial_render_is_quiz_screen(controller):
    screen = controller.render()
    assert isinstance(screen, QuizScreen)
    assert screen.total_questions == 5
    assert screen.selections == (UNANSWERED,) * 5
    assert not screen.ready_to_submit
    assert screen.answered_count == 0


def test_screen_actions_update_session(controller):
    screen = controller.render()
    screen.select_answer(1, 1)
    assert controller.session.selection_for(1) == Selected(1)
    assert controller.render().answered_count == 1


def test_ready_to_submit_follows_session(controller):
    answer_with_score(controller.session, 3)
    assert controller.render().ready_to_submit


def test_submit_switches_to_results(controller):
    answer_with_score(controller.session, 3)
    controller.render().submit()

    screen = controller.render()
    assert isinstance(screen, ResultsScreen)
    assert controller.phase is QuizPhase.RESULTS
    assert screen.score == 3
    assert screen.total_questions == 5
    assert screen.feedback.tier is FeedbackTier.MID


def test_reset_from_results_returns_to_quiz(controller):
    answer_with_score(controller.session, 5)
    controller.submit()

    results = controller.render()
    results.reset()

    screen = controller.render()
    assert isinstance(screen, QuizScreen)
    assert screen.selections == (UNANSWERED,) * 5
    assert controller.session.score == 0


def test_incomplete_submit_keeps_quiz_screen(controller):
    controller.select_answer(0, 2)
    with pytest.raises(QuizNotCompleteError):
        controller.submit()
    assert isinstance(controller.render(), QuizScreen)


def test_on_change_called_after_each_action(session):
    calls = []
    controller = QuizController(session, on_change=lambda: calls.append(session.phase))

    answer_with_score(session, 4)
    controller.select_answer(0, 2)
    controller.submit()
    controller.reset()

    assert calls == [QuizPhase.TAKING, QuizPhase.RESULTS, QuizPhase.TAKING]


def test_on_change_not_called_for_rejected_action(session):
    calls = []
    controller = QuizController(session, on_change=lambda: calls.append(True))
    with pytest.raises(IndexError):
        controller.select_answer(9, 0)
    assert calls == []


def test_set_on_change_replaces_callback(controller):
    calls = []
    controller.set_on_change(lambda: calls.append("second"))
    controller.reset()
    controller.set_on_change(None)
    controller.reset()
    assert calls == ["second"]
