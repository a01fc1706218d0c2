"""Configuration constants for the meal_calories package."""

import os

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_log_level(level: str) -> str:
    """Upper-case a log level name, raising ValueError if it is unknown."""
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level: {name}. Must be one of: {', '.join(LOG_LEVELS)}"
        )
    return name


# Inputs longer than this are truncated before parsing
MAX_INPUT_CHARS: int = int(os.getenv("MEAL_CALORIES_MAX_INPUT_CHARS", "2000"))

if MAX_INPUT_CHARS <= 0:
    raise ValueError(
        f"MEAL_CALORIES_MAX_INPUT_CHARS must be a positive integer, got {MAX_INPUT_CHARS}"
    )

# Default log level for the command-line interface
LOG_LEVEL: str = validate_log_level(os.getenv("MEAL_CALORIES_LOG_LEVEL", "WARNING"))
