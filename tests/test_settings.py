import pytest

from sumsub_bridge.services.errors import MissingCredential
from sumsub_bridge.settings import Settings


def test_outbound_credentials_from_env(settings: Settings) -> None:
    creds = settings.outbound_credentials()
    assert creds.app_token == "app-token"
    assert creds.secret == b"outbound-secret"


def test_webhook_credentials_from_env(settings: Settings) -> None:
    assert settings.webhook_credentials().secret == b"k1"


def test_missing_outbound_secret(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("APP_TOKEN", "app-token")
    with pytest.raises(MissingCredential) as exc_info:
        Settings(_env_file=None).outbound_credentials()
    assert exc_info.value.variable == "SECRET_KEY"


def test_empty_webhook_secret_is_missing(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SECRET_KEY_WEBHOOK", "")
    with pytest.raises(MissingCredential) as exc_info:
        Settings(_env_file=None).webhook_credentials()
    assert exc_info.value.variable == "SECRET_KEY_WEBHOOK"


def test_secrets_are_not_in_settings_repr(settings: Settings) -> None:
    text = repr(settings)
    assert "outbound-secret" not in text
    assert "app-token" not in text


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings(_env_file=None)
    assert s.sumsub_base_url == "https://api.sumsub.com"
    assert s.webhook_port == 4000
    assert s.sumsub_level_name == "basic-kyb-BRLA"
    assert s.sumsub_token_ttl_seconds == 1200
    assert s.webhook_payload_logging == "redacted"
