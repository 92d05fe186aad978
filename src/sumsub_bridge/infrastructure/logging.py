"""Логирование (JSON через structlog) с маскированием секретов."""

import logging
import sys
from typing import Any

import structlog

from sumsub_bridge.settings import Settings, get_settings

MASK = "***"

# Ключи, значения которых не должны попадать в лог ни при каком уровне.
SECRET_FIELDS = frozenset(
    {
        "app_token",
        "secret",
        "secret_key",
        "secret_key_webhook",
        "x-app-token",
        "x-app-access-sig",
        "x-payload-digest",
    }
)


def mask_secrets(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog-процессор: подменяет значения секретных полей на `***`."""
    for key in list(event_dict):
        if key.lower() in SECRET_FIELDS:
            event_dict[key] = MASK
    return event_dict


def configure_logging(settings: Settings | None = None) -> None:
    """Настраивает stdlib logging + structlog (уровень из `LOG_LEVEL`)."""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    structlog.configure(
        processors=[
            mask_secrets,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
