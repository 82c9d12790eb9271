"""Quiz-related constants shared across UI and core layers."""

HIGH_TIER_MIN_RATIO: float = 0.8
MID_TIER_MIN_RATIO: float = 0.5

HIGH_TIER_ICON: str = "★"  # star
MID_TIER_ICON: str = "\U0001F44D"  # thumbs up
LOW_TIER_ICON: str = "\U0001F4D6"  # book

PERFECT_MESSAGE: str = "Perfect! You got all the answers right!"
HIGH_TIER_MESSAGE: str = "Great job! You really know your stuff!"
MID_TIER_MESSAGE: str = "Not bad! Keep learning and try again!"
LOW_TIER_MESSAGE: str = "Keep studying and you'll improve!"
ZERO_SCORE_MESSAGE: str = "Time to hit the books and try again!"

DEFAULT_QUIZ_FILE_NAME: str = "quiz_questions.txt"
MAX_OPTIONS_PER_QUESTION: int = 26
