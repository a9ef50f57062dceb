"""Shared fixtures for the kudos bot tests."""

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:  # pragma: no cover
    sys.path.insert(0, str(ROOT))

import app as app_module  # noqa: E402
from slack_kudos import config  # noqa: E402
from slack_kudos.config import AppSettings  # noqa: E402
from slack_kudos.slack_client import SlackClient  # noqa: E402
from tests.fakes import FakeWebClient  # noqa: E402


@pytest.fixture
def settings():
    return AppSettings(bot_token="xoxb-test", channel_id="CKUDOS", signing_secret="secret")


@pytest.fixture
def web_client():
    return FakeWebClient()


@pytest.fixture
def ctx(settings, web_client):
    return app_module.build_context(settings, slack_client=SlackClient(client=web_client))


@pytest.fixture
def settings_env(monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-test")
    monkeypatch.setenv("SLACK_CHANNEL_ID", "CKUDOS")
    monkeypatch.setenv("SLACK_SIGNING_SECRET", "secret")
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()
