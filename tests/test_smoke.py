"""Smoke tests for the health endpoint."""

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:  # pragma: no cover - import-time guard
    sys.path.insert(0, str(ROOT))

import app as app_module  # noqa: E402  (import after path adjustment)
from slack_kudos import config  # noqa: E402


def test_health_endpoint_returns_ok(settings_env):
    flask_app = app_module.create_app()

    with flask_app.test_client() as client:
        response = client.get("/healthz")
        assert response.status_code == 200
        data = response.get_json()
        assert data["ok"] is True
        assert data["config"] == "valid"
        assert data["version"] == "0.1.0"


def test_health_endpoint_uses_explicit_settings(monkeypatch, settings):
    for var in ("SLACK_BOT_TOKEN", "SLACK_CHANNEL_ID", "SLACK_SIGNING_SECRET", "SLACK_API_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    config.get_settings.cache_clear()

    flask_app = app_module.create_app(settings)

    with flask_app.test_client() as client:
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.get_json()["config"] == "valid"
    config.get_settings.cache_clear()


def test_health_endpoint_reports_invalid_config(settings_env, monkeypatch):
    flask_app = app_module.create_app()
    monkeypatch.delenv("SLACK_CHANNEL_ID")
    config.get_settings.cache_clear()

    with flask_app.test_client() as client:
        response = client.get("/healthz")
        data = response.get_json()
        assert response.status_code == 503
        assert data["ok"] is False
        assert data["config"] == "invalid"
        assert "SLACK_CHANNEL_ID" in data["config_error"]
