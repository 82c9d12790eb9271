import pytest

from quiz_app.constants.quiz_constants import (
    HIGH_TIER_ICON,
    LOW_TIER_ICON,
    MID_TIER_ICON,
)
from quiz_app.core.feedback import (
    FeedbackTier,
    build_feedback,
    classify_ratio,
    feedback_message,
    score_ratio,
)
from quiz_app.styling.color_palette import ColorPalette


def test_perfect_score():
    feedback = build_feedback(5, 5)
    assert feedback.ratio == 1.0
    assert feedback.tier is FeedbackTier.HIGH
    assert feedback.icon == HIGH_TIER_ICON
    assert feedback.message == "Perfect! You got all the answers right!"


def test_four_of_five_is_high_but_not_perfect():
    feedback = build_feedback(4, 5)
    assert feedback.ratio == pytest.approx(0.8)
    assert feedback.tier is FeedbackTier.HIGH
    assert feedback.icon == HIGH_TIER_ICON
    assert feedback.message == "Great job! You really know your stuff!"


def test_three_of_five_is_mid():
    feedback = build_feedback(3, 5)
    assert feedback.tier is FeedbackTier.MID
    assert feedback.icon == MID_TIER_ICON
    assert feedback.message == "Not bad! Keep learning and try again!"


def test_two_of_five_is_low():
    feedback = build_feedback(2, 5)
    assert feedback.tier is FeedbackTier.LOW
    assert feedback.icon == LOW_TIER_ICON
    assert feedback.message == "Keep studying and you'll improve!"


def test_zero_score_has_its_own_message():
    zero = build_feedback(0, 5)
    low = build_feedback(2, 5)
    assert zero.tier is FeedbackTier.LOW
    assert zero.icon == LOW_TIER_ICON
    assert zero.message == "Time to hit the books and try again!"
    assert zero.message != low.message


@pytest.mark.parametrize(
    "ratio, tier",
    [
        (1.0, FeedbackTier.HIGH),
        (0.8, FeedbackTier.HIGH),
        (0.79, FeedbackTier.MID),
        (0.5, FeedbackTier.MID),
        (0.49, FeedbackTier.LOW),
        (0.0, FeedbackTier.LOW),
    ],
)
def test_tier_boundaries(ratio, tier):
    assert classify_ratio(ratio) is tier


def test_mid_boundary_with_even_question_count():
    assert build_feedback(2, 4).tier is FeedbackTier.MID
    assert build_feedback(1, 4).tier is FeedbackTier.LOW


def test_messages_at_boundaries():
    assert feedback_message(1.0).startswith("Perfect")
    assert feedback_message(0.8).startswith("Great job")
    assert feedback_message(0.5).startswith("Not bad")
    assert feedback_message(0.01).startswith("Keep studying")
    assert feedback_message(0.0).startswith("Time to hit the books")


@pytest.mark.parametrize("score, total", [(1, 0), (-1, 5), (6, 5)])
def test_score_ratio_rejects_invalid_input(score, total):
    with pytest.raises(ValueError):
        score_ratio(score, total)


def test_tier_colors_differ():
    colors = {ColorPalette.for_tier(tier) for tier in FeedbackTier}
    assert len(colors) == 3
    assert ColorPalette.for_tier(FeedbackTier.HIGH) is ColorPalette.TIER_HIGH
