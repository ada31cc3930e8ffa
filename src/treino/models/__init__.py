"""Data models for treino."""

from .session import Credentials, Session
from .workout import (
    BLANK_EXERCISE,
    DEFAULT_ENTRY,
    Exercise,
    Workout,
    WorkoutDraft,
    format_date_br,
    normalize_date,
    parse_workout_date,
)

__all__ = [
    "BLANK_EXERCISE",
    "Credentials",
    "DEFAULT_ENTRY",
    "Exercise",
    "format_date_br",
    "normalize_date",
    "parse_workout_date",
    "Session",
    "Workout",
    "WorkoutDraft",
]
