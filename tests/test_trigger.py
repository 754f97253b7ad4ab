import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from app.config import get_settings
from app.main import app
from app.services.session import get_session
from tests.helpers import make_settings


@pytest.fixture
def client(session):
    with patch("app.services.telegram.CurlMime"):
        app.dependency_overrides[get_session] = lambda: session
        yield TestClient(app)
    app.dependency_overrides.clear()


def _use_settings(**overrides):
    test_settings = make_settings(**overrides)
    app.dependency_overrides[get_settings] = lambda: test_settings


def test_development_runs_without_password(client, session):
    _use_settings(environment="development")

    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Meme generated and sent to Telegram successfully"
    assert data["revisedPrompt"] == "revised"
    assert "prompt" in data
    assert [kind for kind, _, _ in session.calls] == ["generate", "download", "telegram"]


def test_post_is_accepted(client, session):
    _use_settings(environment="development")

    response = client.post("/")

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_production_without_password_is_refused(client, session):
    _use_settings(environment="production", manual_trigger_password="secret")

    response = client.get("/")

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Unauthorized"}
    assert session.calls == []


def test_production_with_wrong_password_is_refused(client, session):
    _use_settings(environment="production", manual_trigger_password="secret")

    response = client.get("/", params={"password": "guess"})

    assert response.status_code == 401
    assert session.calls == []


def test_production_with_unset_password_always_refuses(client, session):
    _use_settings(environment="production", manual_trigger_password=None)

    response = client.get("/", params={"password": ""})

    assert response.status_code == 401
    assert session.calls == []


def test_production_with_password_runs(client, session):
    _use_settings(environment="production", manual_trigger_password="secret")

    response = client.post("/", params={"password": "secret"})

    assert response.status_code == 200
    assert response.json()["success"] is True


@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"])
def test_other_methods_not_allowed(client, session, method):
    _use_settings(environment="development")

    response = client.request(method, "/")

    assert response.status_code == 405
    assert response.text == "Method not allowed"
    assert session.calls == []


def test_pipeline_failure_returns_500(client, session):
    _use_settings(environment="development", telegram_chat_id=None)

    response = client.get("/")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID must be configured",
    }


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_head_is_not_allowed(client, session):
    _use_settings(environment="development")

    response = client.head("/")

    assert response.status_code == 405
    assert session.calls == []
