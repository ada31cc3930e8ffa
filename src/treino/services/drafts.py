"""Workout draft editing.

Drafts are immutable values: every operation here returns a new draft
and leaves the one it was given untouched.
"""

from dataclasses import replace
from datetime import date

from ..errors import ExerciseIssue, ExerciseValidationError, ValidationError
from ..models.workout import BLANK_EXERCISE, DEFAULT_ENTRY, Exercise, WorkoutDraft

FUTURE_DATE = "A data não pode ser no futuro"
INVALID_DATE = "Data inválida"
TITLE_REQUIRED = "O título do treino é obrigatório"
EXERCISES_REQUIRED = "Adicione pelo menos um exercício"


def check_exercise(candidate: Exercise) -> None:
    """Validate an exercise entry, stopping at the first problem.

    Raises:
        ExerciseValidationError: with the first failing ExerciseIssue
    """
    if not candidate.name.strip():
        raise ExerciseValidationError(ExerciseIssue.EMPTY_NAME)
    if candidate.sets <= 0 or candidate.reps <= 0:
        raise ExerciseValidationError(ExerciseIssue.NON_POSITIVE_SETS_OR_REPS)
    if candidate.weight is not None and candidate.weight < 0:
        raise ExerciseValidationError(ExerciseIssue.NEGATIVE_WEIGHT)


def add_exercise(draft: WorkoutDraft, candidate: Exercise) -> WorkoutDraft:
    """Append a validated exercise."""
    check_exercise(candidate)
    return replace(draft, exercises=draft.exercises + (candidate,))


def append_blank_exercise(draft: WorkoutDraft) -> WorkoutDraft:
    """Append an empty row to fill in later (checked at submission)."""
    return replace(draft, exercises=draft.exercises + (BLANK_EXERCISE,))


def _check_index(draft: WorkoutDraft, index: int) -> None:
    if not 0 <= index < len(draft.exercises):
        raise IndexError(f"Exercise index {index} out of range")


def remove_exercise(draft: WorkoutDraft, index: int) -> WorkoutDraft:
    """Remove the exercise at `index`."""
    _check_index(draft, index)
    return replace(
        draft, exercises=draft.exercises[:index] + draft.exercises[index + 1 :]
    )


def update_exercise(draft: WorkoutDraft, index: int, **changes) -> WorkoutDraft:
    """Replace fields of the exercise at `index`."""
    _check_index(draft, index)
    updated = replace(draft.exercises[index], **changes)
    return replace(
        draft,
        exercises=draft.exercises[:index] + (updated,) + draft.exercises[index + 1 :],
    )


def update_title(draft: WorkoutDraft, title: str) -> WorkoutDraft:
    return replace(draft, title=title)


def parse_date(value: str) -> date | None:
    """Parse a YYYY-MM-DD string, returning None if malformed."""
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def update_date(draft: WorkoutDraft, value: str, today: date | None = None) -> WorkoutDraft:
    """Set the workout date.

    An empty value means today. Malformed and future dates are rejected
    and the draft is left as it was.

    Raises:
        ValidationError: if the date is malformed or after today
    """
    today = today or date.today()
    if not value.strip():
        return replace(draft, date=today.isoformat())

    parsed = parse_date(value)
    if parsed is None:
        raise ValidationError([INVALID_DATE])
    if parsed > today:
        raise ValidationError([FUTURE_DATE])
    return replace(draft, date=parsed.isoformat())


def validate_draft_for_submission(draft: WorkoutDraft) -> list[str]:
    """Collect every problem that blocks submitting `draft`."""
    errors: list[str] = []

    if not draft.title.strip():
        errors.append(TITLE_REQUIRED)
    if draft.date and parse_date(draft.date) is None:
        errors.append(INVALID_DATE)
    if not draft.exercises:
        errors.append(EXERCISES_REQUIRED)

    for position, exercise in enumerate(draft.exercises, 1):
        if not exercise.name.strip():
            errors.append(f"Exercício {position}: Nome é obrigatório")
        if exercise.sets <= 0:
            errors.append(f"Exercício {position}: Número de séries inválido")
        if exercise.reps <= 0:
            errors.append(f"Exercício {position}: Número de repetições inválido")
        if exercise.weight is not None and exercise.weight < 0:
            errors.append(f"Exercício {position}: Peso inválido")

    return errors


class DraftEditor:
    """Holds the draft a form is editing plus the exercise being typed.

    Every mutation that actually changes the draft pushes the previous
    draft onto `history`, which gives undo for free and makes
    `has_unsaved_changes` a simple derived value: there are unsaved
    changes exactly while history is non-empty.
    """

    def __init__(self, draft: WorkoutDraft | None = None, today: date | None = None):
        self._today = today
        self.draft = draft or WorkoutDraft.empty(today)
        self.entry = DEFAULT_ENTRY
        self.history: list[WorkoutDraft] = []

    @property
    def has_unsaved_changes(self) -> bool:
        return bool(self.history)

    def _apply(self, draft: WorkoutDraft) -> WorkoutDraft:
        if draft == self.draft:
            return self.draft
        self.history.append(self.draft)
        self.draft = draft
        return draft

    def update_title(self, title: str) -> WorkoutDraft:
        return self._apply(update_title(self.draft, title))

    def update_date(self, value: str) -> WorkoutDraft:
        return self._apply(update_date(self.draft, value, self._today))

    def add_exercise(self, candidate: Exercise) -> WorkoutDraft:
        return self._apply(add_exercise(self.draft, candidate))

    def append_blank_exercise(self) -> WorkoutDraft:
        return self._apply(append_blank_exercise(self.draft))

    def remove_exercise(self, index: int) -> WorkoutDraft:
        return self._apply(remove_exercise(self.draft, index))

    def update_exercise(self, index: int, **changes) -> WorkoutDraft:
        return self._apply(update_exercise(self.draft, index, **changes))

    def update_entry(self, **changes) -> Exercise:
        """Edit the exercise being typed (not part of the draft yet)."""
        self.entry = replace(self.entry, **changes)
        return self.entry

    def commit_entry(self) -> WorkoutDraft:
        """Add the typed exercise to the draft and start a fresh entry."""
        draft = self.add_exercise(self.entry)
        self.entry = DEFAULT_ENTRY
        return draft

    def undo(self) -> WorkoutDraft:
        """Revert the last mutation."""
        if not self.history:
            return self.draft
        self.draft = self.history.pop()
        return self.draft

    def mark_saved(self) -> None:
        """The server accepted the current draft."""
        self.history.clear()

    def reset(self, draft: WorkoutDraft | None = None) -> None:
        """Start over from `draft` (or an empty one)."""
        self.draft = draft or WorkoutDraft.empty(self._today)
        self.entry = DEFAULT_ENTRY
        self.history.clear()

    def validate(self) -> list[str]:
        return validate_draft_for_submission(self.draft)
