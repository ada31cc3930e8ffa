"""Tests for the command-line interface."""

import logging

import pytest
from click.testing import CliRunner
from conftest import FakeHttpClient

from treino.cli import main
from treino.clients.storage import JsonFileStore
from treino.commands import base
from treino.config import TOKEN_KEY, get_session_path


@pytest.fixture
def fake_http(monkeypatch):
    http = FakeHttpClient()
    monkeypatch.setattr(base, "create_http_client", lambda: http)
    return http


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "treino"


@pytest.fixture
def session_store(data_dir):
    return JsonFileStore(get_session_path(data_dir))


@pytest.fixture
def invoke(data_dir):
    runner = CliRunner()

    def _invoke(*args, input=None):
        return runner.invoke(
            main, ["--api-url", "https://api.test", "--data-dir", str(data_dir), *args], input=input
        )

    return _invoke


@pytest.fixture
def logged_in(session_store, real_clock_token):
    session_store.set(TOKEN_KEY, real_clock_token)
    return real_clock_token


class TestAuthCommands:
    """Tests for register/login/logout/whoami."""

    def test_login_stores_token(self, invoke, fake_http, session_store):
        fake_http.queue(200, {"token": "abc"})
        result = invoke("login", "--email", "ana@x.com", "--password", "Segura123")
        assert result.exit_code == 0, result.output
        assert session_store.get(TOKEN_KEY) == "abc"
        assert "treino workouts create" in result.output

    def test_login_rejected(self, invoke, fake_http, session_store):
        fake_http.queue(401)
        result = invoke("login", "--email", "ana@x.com", "--password", "errada")
        assert result.exit_code == 1
        assert "Credenciais inválidas" in result.output
        assert session_store.get(TOKEN_KEY) is None

    def test_register_prompts(self, invoke, fake_http):
        fake_http.queue(201, {})
        result = invoke("register", input="Ana\nana@x.com\nSegura123\nSegura123\n")
        assert result.exit_code == 0, result.output
        assert "Cadastro realizado com sucesso" in result.output
        assert fake_http.calls[0]["json"]["name"] == "Ana"

    def test_register_bad_email_makes_no_request(self, invoke, fake_http):
        result = invoke("register", "--name", "Ana", "--email", "bad-email", "--password", "Segura123")
        assert result.exit_code == 1
        assert "email válido" in result.output
        assert fake_http.calls == []

    def test_logout(self, invoke, session_store, logged_in):
        result = invoke("logout")
        assert result.exit_code == 0
        assert session_store.get(TOKEN_KEY) is None

    def test_whoami(self, invoke, logged_in):
        result = invoke("whoami")
        assert result.exit_code == 0
        assert "user-1" in result.output

    def test_whoami_without_session(self, invoke):
        result = invoke("whoami")
        assert result.exit_code == 1
        assert "treino login" in result.output


class TestWorkoutCommands:
    """Tests for the workouts group."""

    def test_list(self, invoke, fake_http, logged_in):
        fake_http.queue(
            200,
            {
                "success": True,
                "data": [
                    {"_id": "a1", "title": "Pernas", "date": "2024-01-01", "exercises": []},
                    {"_id": "b2", "title": "Peito", "date": "2024-03-01", "exercises": [{"name": "Supino", "sets": 3, "reps": 10}]},
                ],
            },
        )
        result = invoke("workouts", "list")
        assert result.exit_code == 0, result.output
        assert result.output.index("01/03/2024") < result.output.index("01/01/2024")
        assert "Total: 2 treino(s)" in result.output

    def test_list_no_match(self, invoke, fake_http, logged_in):
        fake_http.queue(200, {"success": True, "data": [{"_id": "a1", "title": "Pernas", "date": "2024-01-01"}]})
        result = invoke("workouts", "list", "--title", "braço")
        assert result.exit_code == 0
        assert "Nenhum treino encontrado" in result.output

    def test_list_requires_login(self, invoke, fake_http):
        result = invoke("workouts", "list")
        assert result.exit_code == 1
        assert fake_http.calls == []

    def test_create_from_options(self, invoke, fake_http, logged_in):
        fake_http.queue(201, {"success": True})
        result = invoke(
            "workouts", "create", "-t", "Peito", "-d", "2024-03-01", "-e", "Supino:4x8@60", "-e", "Crucifixo:3x12"
        )
        assert result.exit_code == 0, result.output
        body = fake_http.calls[0]["json"]
        assert body["title"] == "Peito"
        assert body["date"] == "2024-03-01"
        assert body["exercises"][0] == {"name": "Supino", "sets": 4, "reps": 8, "weight": 60.0}

    def test_create_rejects_bad_exercise(self, invoke, fake_http, logged_in):
        result = invoke("workouts", "create", "-t", "Peito", "-e", "Supino:0x8")
        assert result.exit_code == 1
        assert "maiores que zero" in result.output
        assert fake_http.calls == []

    def test_create_unauthorized_evicts(self, invoke, fake_http, session_store, logged_in):
        fake_http.queue(401)
        result = invoke("workouts", "create", "-t", "Peito", "-e", "Supino:4x8")
        assert result.exit_code == 1
        assert session_store.get(TOKEN_KEY) is None
        assert "treino login" in result.output

    def test_show_not_found(self, invoke, fake_http, logged_in):
        fake_http.queue(404, {"message": "Workout not found"})
        result = invoke("workouts", "show", "zzz")
        assert result.exit_code == 1
        assert "Treino não encontrado" in result.output

    def test_delete_with_confirmation(self, invoke, fake_http, logged_in):
        fake_http.queue(200, {"success": True})
        result = invoke("workouts", "delete", "a1", input="y\n")
        assert result.exit_code == 0, result.output
        assert "Treino excluído com sucesso!" in result.output
        assert fake_http.calls[0]["url"] == "https://api.test/Workout/a1"

    def test_delete_cancelled(self, invoke, fake_http, logged_in):
        result = invoke("workouts", "delete", "a1", input="n\n")
        assert result.exit_code == 0
        assert fake_http.calls == []

    def test_create_interactive_uses_title_option(self, invoke, fake_http, logged_in, scripted_prompts):
        fake_http.queue(201, {"success": True})
        prompts = scripted_prompts(
            ("text", "Peito"),
            ("text", ""),
            ("text", "Supino"),
            ("text", "4"),
            ("text", "8"),
            ("text", ""),
            ("text", ""),
            ("confirm", False),
        )
        result = invoke("workouts", "create", "-t", "Peito")
        assert result.exit_code == 0, result.output
        assert prompts.asked[0][2]["default"] == "Peito"
        assert fake_http.calls[0]["json"]["title"] == "Peito"


class TestEditCommand:
    """Tests for the interactive workouts edit command."""

    @pytest.fixture
    def stored_workout(self, fake_http, logged_in):
        fake_http.queue(
            200,
            {
                "success": True,
                "data": {
                    "_id": "w1",
                    "userId": "user-1",
                    "title": "Peito",
                    "date": "2024-03-01T00:00:00.000Z",
                    "exercises": [{"name": "Supino", "sets": 4, "reps": 8, "weight": 60}],
                },
            },
        )

    def test_cancel_without_changes(self, invoke, fake_http, stored_workout, scripted_prompts):
        prompts = scripted_prompts(("select", "cancel"))
        result = invoke("workouts", "edit", "w1")
        assert result.exit_code == 0, result.output
        assert "Alterações descartadas" in result.output
        assert prompts.confirms() == []
        assert len(fake_http.calls) == 1

    def test_cancel_with_changes_after_confirming(self, invoke, fake_http, stored_workout, scripted_prompts):
        prompts = scripted_prompts(
            ("select", "title"),
            ("text", "Peito pesado"),
            ("select", "cancel"),
            ("confirm", True),
        )
        result = invoke("workouts", "edit", "w1")
        assert result.exit_code == 0, result.output
        assert "Alterações descartadas" in result.output
        assert len(prompts.confirms()) == 1
        assert [call["method"] for call in fake_http.calls] == ["GET"]

    def test_save(self, invoke, fake_http, stored_workout, scripted_prompts):
        fake_http.queue(200, {"success": True})
        scripted_prompts(
            ("select", "title"),
            ("text", "Peito pesado"),
            ("select", "save"),
        )
        result = invoke("workouts", "edit", "w1")
        assert result.exit_code == 0, result.output
        assert "Treino atualizado com sucesso!" in result.output
        put = fake_http.calls[1]
        assert put["method"] == "PUT"
        assert put["url"] == "https://api.test/Workout/w1"
        assert put["json"] == {
            "title": "Peito pesado",
            "date": "2024-03-01",
            "exercises": [{"name": "Supino", "sets": 4, "reps": 8, "weight": 60.0}],
        }

    def test_save_after_fixing_validation_errors(self, invoke, fake_http, stored_workout, scripted_prompts):
        fake_http.queue(200, {"success": True})
        scripted_prompts(
            ("select", "title"),
            ("text", ""),
            ("select", "save"),
            ("select", "title"),
            ("text", "Peito e ombro"),
            ("select", "save"),
        )
        result = invoke("workouts", "edit", "w1")
        assert result.exit_code == 0, result.output
        assert "O título do treino é obrigatório" in result.output
        assert "Corrija os problemas" in result.output
        assert [call["method"] for call in fake_http.calls] == ["GET", "PUT"]
        assert fake_http.calls[1]["json"]["title"] == "Peito e ombro"

    def test_server_failure_allows_retry(self, invoke, fake_http, stored_workout, scripted_prompts):
        fake_http.queue(500, {"message": "Falha no banco"})
        fake_http.queue(200, {"success": True})
        scripted_prompts(
            ("select", "title"),
            ("text", "Peito pesado"),
            ("select", "save"),
            ("select", "save"),
        )
        result = invoke("workouts", "edit", "w1")
        assert result.exit_code == 0, result.output
        assert "Falha no banco" in result.output
        assert [call["method"] for call in fake_http.calls] == ["GET", "PUT", "PUT"]

    def test_missing_workout(self, invoke, fake_http, logged_in, scripted_prompts):
        fake_http.queue(404, {"message": "Workout not found"})
        prompts = scripted_prompts()
        result = invoke("workouts", "edit", "gone")
        assert result.exit_code == 1
        assert "Treino não encontrado" in result.output
        assert prompts.asked == []


class TestLogging:
    """Tests for the root command's logging setup."""

    @pytest.fixture
    def basic_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(base.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_warnings_by_default(self, invoke, basic_config):
        invoke("whoami")
        assert basic_config[0]["level"] == logging.WARNING

    def test_verbose(self, invoke, basic_config):
        invoke("-v", "whoami")
        assert basic_config[0]["level"] == logging.DEBUG
