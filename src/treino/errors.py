"""Error taxonomy for the treino client.

Every failure that can reach a form is one of these. Controllers turn
them into a single user-facing message; anything else is a bug and
propagates.
"""

from enum import Enum


class TreinoError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(TreinoError):
    """Local validation failed; nothing was sent to the server."""

    def __init__(self, errors: list[str]):
        super().__init__("\n".join(errors))
        self.errors = list(errors)


class ExerciseIssue(str, Enum):
    """Reasons an exercise entry is rejected, in check order."""

    EMPTY_NAME = "empty_name"
    NON_POSITIVE_SETS_OR_REPS = "non_positive_sets_or_reps"
    NEGATIVE_WEIGHT = "negative_weight"

    @property
    def message(self) -> str:
        return _EXERCISE_MESSAGES[self]


_EXERCISE_MESSAGES = {
    ExerciseIssue.EMPTY_NAME: "O nome do exercício é obrigatório",
    ExerciseIssue.NON_POSITIVE_SETS_OR_REPS: "Séries e repetições devem ser maiores que zero",
    ExerciseIssue.NEGATIVE_WEIGHT: "O peso não pode ser negativo",
}


class ExerciseValidationError(ValidationError):
    """An exercise entry failed its fail-fast checks."""

    def __init__(self, issue: ExerciseIssue):
        super().__init__([issue.message])
        self.issue = issue


class ApiError(TreinoError):
    """A failure reported by (or while talking to) the remote API."""

    def __init__(
        self,
        message: str = "",
        status: int | None = None,
        server_message: str | None = None,
    ):
        super().__init__(message or server_message or "")
        self.status = status
        self.server_message = server_message


class AuthError(ApiError):
    """Missing, expired or rejected token. Forces re-authentication."""


class TokenDecodeError(AuthError):
    """The stored token could not be decoded."""


class NotFoundError(ApiError):
    """The referenced resource no longer exists."""


class ConflictError(ApiError):
    """The resource already exists."""


class ServerMessageError(ApiError):
    """The server rejected the request and explained why."""


class TransportError(ApiError):
    """No response was received."""


class UnexpectedError(ApiError):
    """A response arrived but its shape was not recognized."""
