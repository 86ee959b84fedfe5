"""Quiz-related constants shared across UI, server and core layers."""

ROUND_DURATION_SECONDS: int = 20
WARNING_THRESHOLD_SECONDS: int = 5
TICK_INTERVAL_SECONDS: float = 1.0
IDENTIFICATION_REVEAL_DELAY_MS: int = 500
OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")
NO_QUESTIONS_MESSAGE: str = "No questions available for this category. Please add questions first."
