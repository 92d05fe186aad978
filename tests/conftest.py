from collections.abc import Iterator
from typing import Any

import pytest
import structlog
import structlog.testing

from sumsub_bridge import settings as settings_module
from sumsub_bridge.api import webhooks as webhooks_api
from sumsub_bridge.settings import OutboundCredentials, Settings, WebhookCredentials

_ENV_VARS = (
    "APP_TOKEN",
    "SECRET_KEY",
    "SECRET_KEY_WEBHOOK",
    "WEBHOOK_PAYLOAD_LOGGING",
    "SUMSUB_BASE_URL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env: pytest.MonkeyPatch) -> Settings:
    clean_env.setenv("APP_TOKEN", "app-token")
    clean_env.setenv("SECRET_KEY", "outbound-secret")
    clean_env.setenv("SECRET_KEY_WEBHOOK", "k1")
    return Settings(_env_file=None)


@pytest.fixture
def outbound() -> OutboundCredentials:
    return OutboundCredentials(app_token="app-token", secret=b"outbound-secret")


@pytest.fixture
def webhook_creds() -> WebhookCredentials:
    return WebhookCredentials(secret=b"k1")


@pytest.fixture
def captured_logs(monkeypatch: pytest.MonkeyPatch) -> Iterator[list[dict[str, Any]]]:
    # Модульные `log` могли закэшироваться с JSON-конфигом: подменяем на свежие.
    with structlog.testing.capture_logs() as logs:
        monkeypatch.setattr(webhooks_api, "log", structlog.get_logger())
        monkeypatch.setattr(settings_module, "log", structlog.get_logger())
        yield logs
