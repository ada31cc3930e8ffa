"""Workout and exercise models."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone


def today_iso() -> str:
    """Return today's date as YYYY-MM-DD."""
    return date.today().isoformat()


def parse_workout_date(value: str) -> datetime | None:
    """Parse a workout date string into an aware UTC datetime.

    Accepts plain dates ("2024-03-01") and ISO timestamps, including the
    "Z" suffix the API uses. Returns None for anything unparseable.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def normalize_date(value: str) -> str:
    """Reduce a date or timestamp to its UTC calendar date (YYYY-MM-DD).

    Unparseable values are returned unchanged.
    """
    parsed = parse_workout_date(value)
    if parsed is None:
        return value
    return parsed.date().isoformat()


def format_date_br(value: str) -> str:
    """Format a workout date the way pt-BR users read it (dd/mm/yyyy)."""
    parsed = parse_workout_date(value)
    if parsed is None:
        return value
    return parsed.strftime("%d/%m/%Y")


@dataclass(frozen=True)
class Exercise:
    """A single exercise entry of a workout."""

    name: str
    sets: int
    reps: int
    weight: float | None = None  # in kg
    notes: str = ""

    def to_dict(self) -> dict:
        """Convert to the API payload shape."""
        data: dict = {"name": self.name, "sets": self.sets, "reps": self.reps}
        if self.weight is not None:
            data["weight"] = self.weight
        if self.notes:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from an API payload."""
        weight = data.get("weight")
        return cls(
            name=data.get("name") or "",
            sets=int(data.get("sets") or 0),
            reps=int(data.get("reps") or 0),
            weight=float(weight) if weight is not None else None,
            notes=data.get("notes") or "",
        )

    def get_summary(self) -> str:
        """Get a one-line description, e.g. "Supino: 3x10 @ 60kg"."""
        summary = f"{self.name}: {self.sets}x{self.reps}"
        if self.weight is not None:
            summary += f" @ {self.weight:g}kg"
        if self.notes:
            summary += f" ({self.notes})"
        return summary


# Defaults for a fresh exercise entry in the creation form
DEFAULT_ENTRY = Exercise(name="", sets=3, reps=10)

# Row appended by the edit form's "add exercise" action
BLANK_EXERCISE = Exercise(name="", sets=0, reps=0, weight=0.0)


@dataclass(frozen=True)
class WorkoutDraft:
    """A workout under construction, not yet confirmed by the server.

    Drafts are immutable; every edit produces a new draft so earlier
    versions stay inspectable.
    """

    title: str = ""
    date: str = field(default_factory=today_iso)
    exercises: tuple[Exercise, ...] = ()

    @classmethod
    def empty(cls, today: "date | None" = None) -> "WorkoutDraft":
        """Create the empty draft the creation flow starts from."""
        return cls(date=(today or date.today()).isoformat())

    def to_payload(self) -> dict:
        """Convert to the request body for create/update."""
        return {
            "title": self.title,
            "date": self.date or today_iso(),
            "exercises": [exercise.to_dict() for exercise in self.exercises],
        }


@dataclass(frozen=True)
class Workout:
    """A workout as stored by the server."""

    id: str
    user_id: str
    title: str
    date: str
    exercises: tuple[Exercise, ...] = ()
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from an API payload (accepts both "_id" and "id")."""
        return cls(
            id=str(data.get("_id") or data.get("id") or ""),
            user_id=str(data.get("userId") or ""),
            title=data.get("title") or "",
            date=data.get("date") or "",
            exercises=tuple(
                Exercise.from_dict(exercise) for exercise in data.get("exercises") or []
            ),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> dict:
        """Convert to the API payload shape."""
        return {
            "_id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "date": self.date,
            "exercises": [exercise.to_dict() for exercise in self.exercises],
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def to_draft(self) -> WorkoutDraft:
        """Create an editable copy for the edit flow."""
        return WorkoutDraft(
            title=self.title,
            date=normalize_date(self.date),
            exercises=self.exercises,
        )

    def get_summary(self) -> str:
        """Get a human-readable multi-line summary."""
        lines = [f"{self.title} ({format_date_br(self.date)})"]
        if not self.exercises:
            lines.append("  Nenhum exercício registrado")
        for index, exercise in enumerate(self.exercises, 1):
            lines.append(f"  {index}. {exercise.get_summary()}")
        return "\n".join(lines)
