"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TIME_LIMIT_SECONDS: int = 30
DEFAULT_POINTS_PER_QUESTION: float = 10
COUNTDOWN_TICK_INTERVAL_MS: int = 1000
TIME_LIMIT_WARNING_WINDOW_SECONDS: int = 5
