"""Приём вебхуков Sumsub: сначала подпись по сырому телу, потом JSON."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.requests import ClientDisconnect

from sumsub_bridge.metrics import webhook_verifications_total
from sumsub_bridge.services.errors import (
    INVALID_SIGNATURE,
    MALFORMED_BODY,
    PublicError,
    WebhookRejected,
    error_payload,
)
from sumsub_bridge.services.redaction import redact_event_payload
from sumsub_bridge.signing.verifier import WebhookVerifier

EventHandler = Callable[[dict[str, Any]], None]

router = APIRouter()
log = structlog.get_logger()


def log_event_handler(policy: str = "redacted") -> EventHandler:
    """Обработчик по умолчанию: пишет событие в лог согласно политике."""

    def handle(event: dict[str, Any]) -> None:
        if policy == "full":
            log.info("webhook_event", payload=event)
        elif policy == "redacted":
            log.info("webhook_event", payload=redact_event_payload(event))
        else:
            log.info("webhook_event", event_type=event.get("type"))

    return handle


def _error_response(err: PublicError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content=error_payload(err))


def get_verifier(request: Request) -> WebhookVerifier:
    return request.app.state.webhook_verifier


def get_event_handler(request: Request) -> EventHandler:
    return request.app.state.event_handler


@router.post("/")
@router.post("/webhooks/sumsub")
async def receive_webhook(
    request: Request,
    verifier: WebhookVerifier = Depends(get_verifier),
    handle_event: EventHandler = Depends(get_event_handler),
) -> Any:
    try:
        body = await request.body()
    except ClientDisconnect:
        log.warning("webhook_body_unreadable")
        return _error_response(MALFORMED_BODY)

    try:
        verifier.require(request.headers, body)
    except WebhookRejected as e:
        webhook_verifications_total.labels(result="rejected", reason=e.reason).inc()
        log.warning("webhook_rejected", reason=e.reason)
        return _error_response(INVALID_SIGNATURE)
    webhook_verifications_total.labels(result="accepted", reason="").inc()

    try:
        event = json.loads(body)
    except (UnicodeDecodeError, ValueError, RecursionError):
        log.warning("webhook_body_not_json", body_len=len(body))
        return _error_response(MALFORMED_BODY)
    if not isinstance(event, dict):
        log.warning("webhook_body_not_object", body_type=type(event).__name__)
        return _error_response(MALFORMED_BODY)

    handle_event(event)
    return {"status": "ok"}
