"""Pytest configuration and fixtures."""

import time

import jwt
import pytest
import questionary

from treino.clients.api import TreinoApi
from treino.clients.base import HttpResponse
from treino.clients.token_codec import JwtTokenCodec
from treino.config import TOKEN_KEY
from treino.models.workout import Exercise, WorkoutDraft
from treino.services.session_guard import SessionGuard

API_URL = "https://api.test"
NOW = 1_700_000_000.0


def make_token(**claims) -> str:
    """Mint an HS256 token with the given claims."""
    return jwt.encode(claims, "test-secret", algorithm="HS256")


class MemoryStore:
    """In-memory stand-in for the persisted key-value slot."""

    def __init__(self, data: dict | None = None):
        self.data = dict(data or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def remove(self, key):
        self.data.pop(key, None)


class RecordingNavigator:
    """Navigator that remembers every path it was sent to."""

    def __init__(self):
        self.paths: list[str] = []

    def go_to(self, path):
        self.paths.append(path)


class FakeHttpClient:
    """HTTP client returning queued responses and recording requests.

    Queue items are HttpResponse objects or exceptions to raise.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: list[dict] = []

    def queue(self, status, data=None):
        self.responses.append(HttpResponse(status=status, data=data))

    async def request(self, method, url, json=None, headers=None):
        self.calls.append({"method": method, "url": url, "json": json, "headers": headers})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


# Answer placeholder: accept whatever default the prompt offers
DEFAULT = object()


class _Answer:
    def __init__(self, value):
        self.value = value

    async def ask_async(self):
        return self.value


class ScriptedPrompts:
    """Replaces questionary prompts with a fixed script of answers.

    The script is a list of `(kind, answer)` pairs where kind is
    "select", "text" or "confirm". Every prompt shown is recorded in
    `asked` as `(kind, message, kwargs)`.
    """

    def __init__(self, monkeypatch, script):
        self.script = list(script)
        self.asked: list[tuple[str, str, dict]] = []
        for kind in ("select", "text", "confirm"):
            monkeypatch.setattr(questionary, kind, self._prompt(kind))

    def _prompt(self, kind):
        def prompt(message, **kwargs):
            self.asked.append((kind, message, kwargs))
            assert self.script, f"unexpected {kind} prompt: {message}"
            expected, answer = self.script.pop(0)
            assert expected == kind, f"expected a {expected} prompt, got {kind}: {message}"
            if answer is DEFAULT:
                answer = kwargs.get("default")
            return _Answer(answer)

        return prompt

    def menus(self) -> list[dict]:
        """Map choice value to its disabled reason, one dict per menu shown."""
        return [
            {choice.value: choice.disabled for choice in kwargs["choices"]}
            for kind, _, kwargs in self.asked
            if kind == "select" and any(choice.value == "save" for choice in kwargs["choices"])
        ]

    def confirms(self) -> list[str]:
        return [message for kind, message, _ in self.asked if kind == "confirm"]


@pytest.fixture
def scripted_prompts(monkeypatch):
    """Factory installing a ScriptedPrompts script."""

    def _install(*script):
        return ScriptedPrompts(monkeypatch, script)

    return _install


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def http():
    return FakeHttpClient()


@pytest.fixture
def api(http):
    return TreinoApi(http, API_URL)


@pytest.fixture
def guard(store, navigator):
    return SessionGuard(store, JwtTokenCodec(), navigator, clock=lambda: NOW)


@pytest.fixture
def valid_token():
    return make_token(userId="user-1", exp=int(NOW) + 3600, iat=int(NOW))


@pytest.fixture
def logged_in(store, valid_token):
    """Store a valid session token."""
    store.set(TOKEN_KEY, valid_token)
    return valid_token


@pytest.fixture
def sample_draft():
    return WorkoutDraft(
        title="Peito e tríceps",
        date="2024-03-01",
        exercises=(
            Exercise(name="Supino reto", sets=4, reps=8, weight=60.0),
            Exercise(name="Tríceps corda", sets=3, reps=12),
        ),
    )


@pytest.fixture
def real_clock_token():
    """A token valid against the real clock."""
    return make_token(userId="user-1", exp=int(time.time()) + 3600)
