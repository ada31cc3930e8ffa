"""Collaborator protocols used by the treino services."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass
class HttpResponse:
    """A response received from the API."""

    status: int
    data: Any = None  # decoded JSON body, None if absent or not JSON

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def message(self) -> str | None:
        """Server-supplied `message` field, if the body carries one."""
        if isinstance(self.data, dict):
            message = self.data.get("message")
            if isinstance(message, str) and message:
                return message
        return None


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP transports."""

    async def request(
        self,
        method: str,
        url: str,
        json: dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """Send a request and return the response, whatever its status.

        Raises:
            TransportError: if no response was received
        """
        ...


@runtime_checkable
class TokenCodec(Protocol):
    """Protocol for bearer token decoders."""

    def decode(self, token: str) -> dict:
        """Decode a token into its claims.

        Raises:
            TokenDecodeError: if the token is malformed
        """
        ...


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for the persisted key-value slot holding the session."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


@runtime_checkable
class Navigator(Protocol):
    """Protocol for navigation between views."""

    def go_to(self, path: str) -> None:
        ...
