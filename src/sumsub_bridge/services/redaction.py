"""Сводка события вебхука для логов (без персональных данных)."""

import hashlib
import json
from typing import Any


def sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def redact_event_payload(event: dict[str, Any]) -> dict[str, Any]:
    """Оставляет тип события, applicantId и список ключей; остальное только хэшем."""
    try:
        raw = json.dumps(event, sort_keys=True, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        raw = repr(event)
    return {
        "type": event.get("type"),
        "applicantId": event.get("applicantId"),
        "keys": sorted(k for k in event if isinstance(k, str)),
        "sha256": sha256_hex(raw),
    }
