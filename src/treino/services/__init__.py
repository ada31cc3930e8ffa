"""Form logic for treino: sessions, accounts and workouts."""

from .account import (
    AccountController,
    validate_email,
    validate_login,
    validate_password,
    validate_registration,
)
from .drafts import DraftEditor, add_exercise, remove_exercise, validate_draft_for_submission
from .session_guard import SessionGuard
from .submission import SubmissionFlow, SubmissionState, WorkoutSubmissionController
from .workout_list import WorkoutListController, filter_workouts
from .workout_loader import load_for_edit

__all__ = [
    "AccountController",
    "add_exercise",
    "DraftEditor",
    "filter_workouts",
    "load_for_edit",
    "remove_exercise",
    "SessionGuard",
    "SubmissionFlow",
    "SubmissionState",
    "validate_draft_for_submission",
    "validate_email",
    "validate_login",
    "validate_password",
    "validate_registration",
    "WorkoutListController",
    "WorkoutSubmissionController",
]
