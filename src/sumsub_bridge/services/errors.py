"""Ошибки bridge + публичный формат ошибок (стабильные code/message)."""

from __future__ import annotations

from dataclasses import dataclass

import httpx


class BridgeError(Exception):
    """Базовая ошибка пакета."""


class MissingCredential(BridgeError):
    """Не задана обязательная переменная окружения (секрет или токен)."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} is not set")
        self.variable = variable


class WebhookRejected(BridgeError):
    """Вебхук не прошёл проверку подписи."""

    reason = "rejected"


class MalformedRequestHeaders(WebhookRejected):
    reason = "missing header"


class UnsupportedAlgorithm(WebhookRejected):
    """Идентификатор алгоритма не найден в реестре."""

    reason = "unsupported algorithm"

    def __init__(self, algorithm_id: str) -> None:
        super().__init__(f"Unsupported digest algorithm: {algorithm_id}")
        self.algorithm_id = algorithm_id


class DigestMismatch(WebhookRejected):
    reason = "digest mismatch"


class TransportFailure(BridgeError):
    """Не удалось достучаться до Sumsub (сеть/таймаут)."""


class SumsubAPIError(BridgeError):
    """Sumsub ответил не-2xx статусом."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        super().__init__(f"Sumsub returned HTTP {status_code}")
        self.status_code = status_code
        self.detail = detail


@dataclass(frozen=True)
class PublicError:
    """Публичная ошибка для ответа отправителю вебхука."""

    status_code: int
    code: str
    message: str
    type: str = "webhook_error"


INVALID_SIGNATURE = PublicError(
    status_code=401,
    code="invalid_signature",
    message="Неверная подпись",
)

MALFORMED_BODY = PublicError(
    status_code=400,
    code="malformed_body",
    message="Не удалось обработать вебхук",
    type="invalid_request_error",
)


def map_transport_exception(exc: httpx.HTTPError) -> TransportFailure:
    """Преобразует исключение httpx в `TransportFailure` (без утечки URL с параметрами)."""
    if isinstance(exc, httpx.TimeoutException):
        return TransportFailure("Sumsub не ответил вовремя")
    if isinstance(exc, httpx.TransportError):
        return TransportFailure("Не удалось подключиться к Sumsub")
    return TransportFailure("Ошибка HTTP при обращении к Sumsub")


def error_payload(err: PublicError) -> dict:
    """Формирует JSON `{error:{...}}` для клиента."""
    return {"error": {"code": err.code, "message": err.message, "type": err.type}}
