"""Настройки приложения (env + `.env`) и неизменяемые учётные данные."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import structlog
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from sumsub_bridge.services.errors import MissingCredential

log = structlog.get_logger()


@dataclass(frozen=True)
class OutboundCredentials:
    """Токен приложения + секрет для подписи исходящих запросов."""

    app_token: str
    secret: bytes = field(repr=False)


@dataclass(frozen=True)
class WebhookCredentials:
    """Секрет для проверки входящих вебхуков."""

    secret: bytes = field(repr=False)


class Settings(BaseSettings):
    """Pydantic-настройки (всё, что обычно лежит в `.env`)."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = Field(default="local", validation_alias="APP_ENV")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    app_token: SecretStr | None = Field(default=None, validation_alias="APP_TOKEN")
    secret_key: SecretStr | None = Field(default=None, validation_alias="SECRET_KEY")
    secret_key_webhook: SecretStr | None = Field(default=None, validation_alias="SECRET_KEY_WEBHOOK")

    sumsub_base_url: str = Field(default="https://api.sumsub.com", validation_alias="SUMSUB_BASE_URL")
    sumsub_timeout_seconds: float = Field(default=10.0, validation_alias="SUMSUB_TIMEOUT_SECONDS")
    sumsub_level_name: str = Field(default="basic-kyb-BRLA", validation_alias="SUMSUB_LEVEL_NAME")
    sumsub_token_ttl_seconds: int = Field(default=1200, validation_alias="SUMSUB_TOKEN_TTL_SECONDS")

    webhook_host: str = Field(default="0.0.0.0", validation_alias="WEBHOOK_HOST")
    webhook_port: int = Field(default=4000, validation_alias="WEBHOOK_PORT")
    # Что писать в лог о принятых событиях: в payload бывают персональные данные.
    webhook_payload_logging: Literal["none", "redacted", "full"] = Field(
        default="redacted",
        validation_alias="WEBHOOK_PAYLOAD_LOGGING",
    )

    def outbound_credentials(self) -> OutboundCredentials:
        """Собирает креды для исходящих запросов; нет значения -> `MissingCredential`."""
        app_token = _required(self.app_token, "APP_TOKEN")
        secret = _required(self.secret_key, "SECRET_KEY")
        log.info("credentials_loaded", kind="outbound", app_token_set=True, secret_key_set=True)
        return OutboundCredentials(app_token=app_token, secret=secret.encode("utf-8"))

    def webhook_credentials(self) -> WebhookCredentials:
        secret = _required(self.secret_key_webhook, "SECRET_KEY_WEBHOOK")
        log.info("credentials_loaded", kind="webhook", secret_key_webhook_set=True)
        return WebhookCredentials(secret=secret.encode("utf-8"))


def _required(value: SecretStr | None, variable: str) -> str:
    raw = value.get_secret_value() if value is not None else ""
    if not raw:
        log.error("credential_missing", variable=variable)
        raise MissingCredential(variable)
    return raw


_settings: Settings | None = None


def get_settings() -> Settings:
    """Ленивая загрузка настроек (один раз на процесс)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
