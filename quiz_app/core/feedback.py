"""Qualitative feedback for the results screen, derived from the score ratio."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from quiz_app.constants.quiz_constants import (
    HIGH_TIER_ICON,
    HIGH_TIER_MESSAGE,
    HIGH_TIER_MIN_RATIO,
    LOW_TIER_ICON,
    LOW_TIER_MESSAGE,
    MID_TIER_ICON,
    MID_TIER_MESSAGE,
    MID_TIER_MIN_RATIO,
    PERFECT_MESSAGE,
    ZERO_SCORE_MESSAGE,
)


class FeedbackTier(Enum):
    """Performance band used to pick the icon and colour of the results."""

    HIGH = auto()
    MID = auto()
    LOW = auto()


_TIER_ICONS: dict[FeedbackTier, str] = {
    FeedbackTier.HIGH: HIGH_TIER_ICON,
    FeedbackTier.MID: MID_TIER_ICON,
    FeedbackTier.LOW: LOW_TIER_ICON,
}


@dataclass(frozen=True, slots=True)
class ResultFeedback:
    """Everything the results screen needs besides the raw score."""

    tier: FeedbackTier
    icon: str
    message: str
    ratio: float


def score_ratio(score: int, total_questions: int) -> float:
    if total_questions <= 0:
        raise ValueError("Total question count must be positive.")
    if not 0 <= score <= total_questions:
        raise ValueError(f"Score {score} is outside 0..{total_questions}.")
    return score / total_questions


def classify_ratio(ratio: float) -> FeedbackTier:
    if ratio >= HIGH_TIER_MIN_RATIO:
        return FeedbackTier.HIGH
    if ratio >= MID_TIER_MIN_RATIO:
        return FeedbackTier.MID
    return FeedbackTier.LOW


def feedback_message(ratio: float) -> str:
    if ratio == 1.0:
        return PERFECT_MESSAGE
    if ratio >= HIGH_TIER_MIN_RATIO:
        return HIGH_TIER_MESSAGE
    if ratio >= MID_TIER_MIN_RATIO:
        return MID_TIER_MESSAGE
    if ratio > 0.0:
        return LOW_TIER_MESSAGE
    return ZERO_SCORE_MESSAGE


def tier_icon(tier: FeedbackTier) -> str:
    return _TIER_ICONS[tier]


def build_feedback(score: int, total_questions: int) -> ResultFeedback:
    """Compute tier, icon and message for a submitted quiz."""
    ratio = score_ratio(score, total_questions)
    tier = classify_ratio(ratio)
    return ResultFeedback(
        tier=tier,
        icon=tier_icon(tier),
        message=feedback_message(ratio),
        ratio=ratio,
    )
