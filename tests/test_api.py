"""Tests for the HTTP transport and API wrapper."""

import json

import httpx
import pytest
from conftest import API_URL, make_token

from treino.clients.api import TreinoApi, raise_for_status, unwrap_envelope
from treino.clients.base import HttpResponse
from treino.clients.http_client import HttpxClient
from treino.clients.token_codec import JwtTokenCodec
from treino.errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    ServerMessageError,
    TokenDecodeError,
    TransportError,
    UnexpectedError,
)
from treino.models.session import Credentials, Session
from treino.models.workout import Exercise, WorkoutDraft


class TestRaiseForStatus:
    """Tests for status classification."""

    def test_success_passes(self):
        raise_for_status(HttpResponse(201, {}))

    @pytest.mark.parametrize(
        "status,error",
        [(401, AuthError), (404, NotFoundError), (409, ConflictError)],
    )
    def test_special_statuses(self, status, error):
        with pytest.raises(error) as exc_info:
            raise_for_status(HttpResponse(status, {"message": "detalhe"}))
        assert exc_info.value.status == status
        assert exc_info.value.server_message == "detalhe"

    def test_server_message(self):
        with pytest.raises(ServerMessageError) as exc_info:
            raise_for_status(HttpResponse(400, {"message": "Campo inválido"}))
        assert exc_info.value.message == "Campo inválido"

    def test_no_message(self):
        with pytest.raises(UnexpectedError):
            raise_for_status(HttpResponse(502, None))

    def test_envelope_requires_success_true(self):
        with pytest.raises(UnexpectedError):
            unwrap_envelope(HttpResponse(200, {"data": []}))
        with pytest.raises(UnexpectedError):
            unwrap_envelope(HttpResponse(200, ["not", "an", "object"]))
        assert unwrap_envelope(HttpResponse(200, {"success": True}))["success"] is True


class TestHttpxClient:
    """Tests for the httpx transport."""

    @pytest.mark.asyncio
    async def test_returns_error_statuses(self):
        def handler(request):
            return httpx.Response(404, json={"message": "nada"})

        client = HttpxClient(transport=httpx.MockTransport(handler))
        response = await client.request("GET", f"{API_URL}/Workout/1")
        assert response.status == 404
        assert response.message == "nada"

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client = HttpxClient(transport=httpx.MockTransport(lambda r: httpx.Response(500, text="oops")))
        response = await client.request("GET", f"{API_URL}/x")
        assert response.data is None

    @pytest.mark.asyncio
    async def test_no_response_raises_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = HttpxClient(transport=httpx.MockTransport(handler))
        with pytest.raises(TransportError):
            await client.request("GET", f"{API_URL}/x")


class TestJwtTokenCodec:
    """Tests for token decoding."""

    def test_decodes_without_key(self):
        claims = JwtTokenCodec().decode(make_token(userId="u1", exp=1))
        assert claims["userId"] == "u1"
        assert claims["exp"] == 1

    def test_malformed(self):
        with pytest.raises(TokenDecodeError):
            JwtTokenCodec().decode("abc")


class TestTreinoApi:
    """End-to-end API calls over a mock transport."""

    @pytest.fixture
    def requests(self):
        return []

    @pytest.fixture
    def live_api(self, requests):
        def handler(request):
            requests.append(request)
            if request.url.path == "/auth/login":
                return httpx.Response(200, json={"token": "tok"})
            if request.url.path == "/users/register":
                return httpx.Response(409, json={"message": "exists"})
            if request.method == "GET" and request.url.path == "/Workout/w1":
                return httpx.Response(
                    200,
                    json={
                        "success": True,
                        "data": {
                            "_id": "w1",
                            "userId": "u1",
                            "title": "Ombros",
                            "date": "2024-02-02T00:00:00.000Z",
                            "exercises": [{"name": "Desenvolvimento", "sets": 4, "reps": 10, "weight": 20}],
                        },
                    },
                )
            if request.method == "POST" and request.url.path == "/Workout/":
                body = json.loads(request.content)
                return httpx.Response(201, json={"success": True, "data": {"_id": "new", **body}})
            return httpx.Response(404, json={"success": False, "message": "not found"})

        return TreinoApi(HttpxClient(transport=httpx.MockTransport(handler)), API_URL + "/")

    @pytest.mark.asyncio
    async def test_login(self, live_api, requests):
        token = await live_api.login(Credentials(email="a@b.co", password="Segura123"))
        assert token == "tok"
        assert json.loads(requests[0].content) == {"email": "a@b.co", "password": "Segura123"}

    @pytest.mark.asyncio
    async def test_register_conflict(self, live_api):
        with pytest.raises(ConflictError):
            await live_api.register(Credentials(email="a@b.co", password="Segura123", name="A"))

    @pytest.mark.asyncio
    async def test_get_workout(self, live_api, requests):
        workout = await live_api.get_workout(Session("tok", "u1"), "w1")
        assert workout.title == "Ombros"
        assert workout.exercises[0].weight == 20.0
        assert requests[0].headers["authorization"] == "Bearer tok"
        assert requests[0].headers["pragma"] == "no-cache"

    @pytest.mark.asyncio
    async def test_create_workout(self, live_api, requests):
        draft = WorkoutDraft(
            title="Braços", date="2024-02-03", exercises=(Exercise(name="Rosca", sets=3, reps=12),)
        )
        created = await live_api.create_workout(Session("tok", "u1"), draft)
        assert created.id == "new"
        assert str(requests[0].url) == f"{API_URL}/Workout/"
        assert json.loads(requests[0].content)["exercises"] == [{"name": "Rosca", "sets": 3, "reps": 12}]

    @pytest.mark.asyncio
    async def test_missing_workout(self, live_api):
        with pytest.raises(NotFoundError):
            await live_api.get_workout(Session("tok", "u1"), "gone")

    @pytest.mark.asyncio
    async def test_malformed_workout_fields(self):
        def handler(request):
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "data": {
                        "_id": "w1",
                        "title": "Ombros",
                        "date": "2024-02-02",
                        "exercises": [{"name": "Elevação", "sets": 3, "reps": 12, "weight": "leve"}],
                    },
                },
            )

        api = TreinoApi(HttpxClient(transport=httpx.MockTransport(handler)), API_URL)
        with pytest.raises(UnexpectedError) as exc_info:
            await api.get_workout(Session("tok", "u1"), "w1")
        assert exc_info.value.status == 200
