"""Проверка подписи входящих вебхуков Sumsub (`X-Payload-Digest`)."""

from __future__ import annotations

import hmac
from collections.abc import Mapping
from dataclasses import dataclass

from sumsub_bridge.services.errors import (
    DigestMismatch,
    MalformedRequestHeaders,
    UnsupportedAlgorithm,
    WebhookRejected,
)
from sumsub_bridge.settings import WebhookCredentials
from sumsub_bridge.signing.algorithms import DEFAULT_REGISTRY, AlgorithmRegistry
from sumsub_bridge.signing.digest import compute_digest

DIGEST_HEADER = "X-Payload-Digest"
DIGEST_ALG_HEADER = "X-Payload-Digest-Alg"


@dataclass(frozen=True)
class Verdict:
    """Итог проверки: принят или отклонён с причиной. Терминален."""

    accepted: bool
    reason: str | None = None
    error: type[WebhookRejected] | None = None

    @classmethod
    def accept(cls) -> Verdict:
        return cls(accepted=True)

    @classmethod
    def reject(cls, error: type[WebhookRejected]) -> Verdict:
        return cls(accepted=False, reason=error.reason, error=error)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    # Starlette `Headers` регистронезависимы сами, обычный dict нет.
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    return value or None


class WebhookVerifier:
    """Пересчитывает HMAC по сырому телу и сравнивает с присланным digest."""

    def __init__(
        self,
        credentials: WebhookCredentials,
        registry: AlgorithmRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self._credentials = credentials
        self._registry = registry

    def verify(self, headers: Mapping[str, str], raw_body: bytes) -> Verdict:
        """Тело должно быть ровно тем, что пришло по сети (без JSON round-trip)."""
        digest = _header(headers, DIGEST_HEADER)
        algorithm_id = _header(headers, DIGEST_ALG_HEADER)
        if digest is None or algorithm_id is None:
            return Verdict.reject(MalformedRequestHeaders)

        if algorithm_id not in self._registry:
            return Verdict.reject(UnsupportedAlgorithm)

        expected = compute_digest(
            algorithm_id,
            self._credentials.secret,
            raw_body,
            registry=self._registry,
        )
        if not hmac.compare_digest(expected.encode("ascii"), digest.encode("utf-8")):
            return Verdict.reject(DigestMismatch)
        return Verdict.accept()

    def require(self, headers: Mapping[str, str], raw_body: bytes) -> None:
        """То же, что `verify`, но отказ бросается типизированным исключением."""
        error = self.verify(headers, raw_body).error
        if error is None:
            return
        if error is UnsupportedAlgorithm:
            raise UnsupportedAlgorithm(_header(headers, DIGEST_ALG_HEADER) or "")
        raise error(error.reason)
