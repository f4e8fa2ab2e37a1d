"""Tests for the parameter server API routes."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from random_string_parameter.config.schema import PluginConfig
from random_string_parameter.parameters import ALPHABET
from random_string_parameter.server.app import create_app

VALIDATE_URL = "/parameters/random-string/validate"


def _make_client(config: PluginConfig) -> TestClient:
    return TestClient(create_app(config))


def _is_token(value: str) -> bool:
    return len(value) == 12 and all(c in ALPHABET for c in value)


def test_health_endpoint(default_config):
    response = _make_client(default_config).get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["root_url"] == "http://localhost:8080/"
    assert "version" in data


def test_list_parameters(default_config):
    response = _make_client(default_config).get("/parameters")

    assert response.status_code == 200
    assert {
        "type_name": "random-string",
        "display_name": "Random String Parameter",
        "help_file": "/plugin/random-string-parameter/help.html",
    } in response.json()


class TestValidateEndpoint:
    def test_ok(self, default_config):
        response = _make_client(default_config).get(VALIDATE_URL, params={"value": "ABCDEFGH12"})

        assert response.status_code == 200
        assert response.json() == {"kind": "ok", "message": None, "error_type": None}

    def test_generic_error(self, default_config):
        response = _make_client(default_config).get(VALIDATE_URL, params={"value": "short"})

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "error"
        assert data["error_type"] == "validation_failed"
        assert "[a-zA-Z0-9_,-]{8,}" in data["message"]

    def test_custom_message(self, default_config):
        response = _make_client(default_config).get(
            VALIDATE_URL,
            params={"value": "short", "failedValidationMessage": "too short"},
        )

        assert response.json()["message"] == "too short"

    def test_missing_value_is_empty(self, default_config):
        response = _make_client(default_config).get(VALIDATE_URL)

        assert response.status_code == 200
        assert response.json()["kind"] == "error"

    def test_configured_regex(self, default_config):
        default_config.random_string.regex = "[0-9]{4}"
        client = _make_client(default_config)

        assert client.get(VALIDATE_URL, params={"value": "1234"}).json()["kind"] == "ok"
        assert client.get(VALIDATE_URL, params={"value": "ABCDEFGH12"}).json()["kind"] == "error"

    def test_invalid_configured_regex(self, default_config):
        default_config.random_string.regex = "[invalid("
        response = _make_client(default_config).get(VALIDATE_URL, params={"value": "x"})

        data = response.json()
        assert response.status_code == 200
        assert data["error_type"] == "invalid_pattern"
        assert "[invalid(" in data["message"]

    def test_unknown_type(self, default_config):
        response = _make_client(default_config).get(
            "/parameters/nope/validate", params={"value": "x"}
        )

        assert response.status_code == 404
        assert "nope" in response.json()["detail"]


def test_default_value(default_config):
    response = _make_client(default_config).get(
        "/parameters/random-string/default",
        params={"name": "TOKEN", "description": "Build token"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "TOKEN"
    assert data["description"] == "Build token"
    assert _is_token(data["value"])


def test_default_value_requires_name(default_config):
    response = _make_client(default_config).get("/parameters/random-string/default")
    assert response.status_code == 422


def test_bind_form(default_config):
    response = _make_client(default_config).post(
        "/parameters/random-string/value",
        json={
            "name": "TOKEN",
            "value": "!not validated!",
            "description": "Build token",
            "failedValidationMessage": "too short",
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "name": "TOKEN",
        "value": "!not validated!",
        "description": "Build token",
    }


def test_bind_form_without_value(default_config):
    response = _make_client(default_config).post(
        "/parameters/random-string/value", json={"name": "TOKEN"}
    )

    assert response.json()["value"] == ""


def test_bind_query_uses_submitted_value(default_config):
    response = _make_client(default_config).get(
        "/parameters/random-string/bind", params=[("name", "TOKEN"), ("TOKEN", "abc"), ("TOKEN", "def")]
    )

    assert response.status_code == 200
    assert response.json()["value"] == "abc"


def test_bind_query_generates_default(default_config):
    response = _make_client(default_config).get(
        "/parameters/random-string/bind", params={"name": "TOKEN"}
    )

    assert _is_token(response.json()["value"])


def test_help_page(default_config):
    response = _make_client(default_config).get("/plugin/random-string-parameter/help.html")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert ALPHABET in response.text


def test_create_app_discovers_extensions():
    config = PluginConfig()
    config.extensions.blocked = ["legacy"]

    with patch(
        "random_string_parameter.server.app.discover_extensions", return_value=["extra"]
    ) as mock_discover:
        create_app(config)

    mock_discover.assert_called_once_with(blocked=["legacy"])


def test_create_app_skips_discovery(default_config):
    with patch("random_string_parameter.server.app.discover_extensions") as mock_discover:
        create_app(default_config)

    mock_discover.assert_not_called()
