"""Client for the Treino REST API."""

import logging

from ..config import DEFAULT_API_URL
from ..errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    ServerMessageError,
    UnexpectedError,
)
from ..models.session import Credentials, Session
from ..models.workout import Workout, WorkoutDraft
from .base import HttpClient, HttpResponse

logger = logging.getLogger(__name__)

# Sent by the edit flow so it never works from a stale copy
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Expires": "0",
}


def raise_for_status(response: HttpResponse) -> None:
    """Raise the matching API error for a non-2xx response."""
    if response.ok:
        return

    status = response.status
    server_message = response.message

    if status == 401:
        raise AuthError("Unauthorized", status=status, server_message=server_message)
    if status == 404:
        raise NotFoundError("Not found", status=status, server_message=server_message)
    if status == 409:
        raise ConflictError("Conflict", status=status, server_message=server_message)
    if server_message:
        raise ServerMessageError(status=status, server_message=server_message)
    raise UnexpectedError(f"HTTP {status} without message", status=status)


def unwrap_envelope(response: HttpResponse) -> dict:
    """Return the body of a successful `{success: true, ...}` response.

    A 2xx response without `success: true` is an application-level
    failure.
    """
    raise_for_status(response)
    body = response.data
    if not isinstance(body, dict):
        raise UnexpectedError("Response body is not an object", status=response.status)
    if body.get("success") is not True:
        server_message = response.message
        if server_message:
            raise ServerMessageError(status=response.status, server_message=server_message)
        raise UnexpectedError("Response without success flag", status=response.status)
    return body


def parse_workout(data: dict, status: int) -> Workout:
    """Build a Workout, reporting malformed fields as an unexpected response."""
    try:
        return Workout.from_dict(data)
    except (TypeError, ValueError) as e:
        raise UnexpectedError(f"Malformed workout payload: {e}", status=status) from e


class TreinoApi:
    """Typed access to the endpoints the client uses.

    Failures are raised as `treino.errors` exceptions carrying the HTTP
    status and any server-supplied message.
    """

    def __init__(self, http: HttpClient, base_url: str = DEFAULT_API_URL):
        self.http = http
        self.base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def register(self, credentials: Credentials) -> dict:
        """Create an account. Returns the response body."""
        response = await self.http.request(
            "POST", self._url("/users/register"), json=credentials.to_register_payload()
        )
        raise_for_status(response)
        if response.status not in (200, 201):
            raise UnexpectedError(
                f"Unexpected status {response.status}", status=response.status
            )
        return response.data if isinstance(response.data, dict) else {}

    async def login(self, credentials: Credentials) -> str:
        """Authenticate and return the bearer token."""
        response = await self.http.request(
            "POST", self._url("/auth/login"), json=credentials.to_login_payload()
        )
        raise_for_status(response)
        body = response.data if isinstance(response.data, dict) else {}
        token = body.get("token")
        if response.status not in (200, 201) or not isinstance(token, str) or not token:
            raise UnexpectedError("Login response without token", status=response.status)
        return token

    async def get_workout(self, session: Session, workout_id: str) -> Workout:
        """Fetch a single workout."""
        response = await self.http.request(
            "GET",
            self._url(f"/Workout/{workout_id}"),
            headers={**session.auth_header, **NO_CACHE_HEADERS},
        )
        body = unwrap_envelope(response)
        data = body.get("data")
        if not isinstance(data, dict):
            raise UnexpectedError("Workout payload missing", status=response.status)
        return parse_workout(data, response.status)

    async def create_workout(self, session: Session, draft: WorkoutDraft) -> Workout | None:
        """Create a workout. Returns the stored copy when the server sends it."""
        response = await self.http.request(
            "POST",
            self._url("/Workout/"),
            json=draft.to_payload(),
            headers=session.auth_header,
        )
        body = unwrap_envelope(response)
        data = body.get("data")
        return parse_workout(data, response.status) if isinstance(data, dict) else None

    async def update_workout(
        self, session: Session, workout_id: str, draft: WorkoutDraft
    ) -> Workout | None:
        """Replace a workout's title, date and exercises."""
        response = await self.http.request(
            "PUT",
            self._url(f"/Workout/{workout_id}"),
            json=draft.to_payload(),
            headers={**session.auth_header, **NO_CACHE_HEADERS},
        )
        body = unwrap_envelope(response)
        data = body.get("data")
        return parse_workout(data, response.status) if isinstance(data, dict) else None

    async def list_workouts(self, session: Session, user_id: str) -> list[Workout]:
        """List the workouts owned by `user_id`."""
        response = await self.http.request(
            "GET",
            self._url(f"/Workout/user/{user_id}"),
            headers=session.auth_header,
        )
        body = unwrap_envelope(response)
        items = body.get("data") or body.get("workouts") or []
        if not isinstance(items, list):
            raise UnexpectedError("Workout list payload is not a list", status=response.status)
        return [parse_workout(item, response.status) for item in items if isinstance(item, dict)]

    async def delete_workout(self, session: Session, workout_id: str) -> None:
        """Delete a workout."""
        response = await self.http.request(
            "DELETE",
            self._url(f"/Workout/{workout_id}"),
            headers=session.auth_header,
        )
        unwrap_envelope(response)
        logger.info("Deleted workout %s", workout_id)
