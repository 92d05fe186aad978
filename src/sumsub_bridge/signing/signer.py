"""Подпись исходящих запросов к Sumsub (`X-App-Access-Sig`)."""

from __future__ import annotations

from dataclasses import dataclass

from sumsub_bridge.settings import OutboundCredentials
from sumsub_bridge.signing.algorithms import DEFAULT_REGISTRY, HMAC_SHA256_HEX, AlgorithmRegistry
from sumsub_bridge.signing.digest import compute_digest

APP_TOKEN_HEADER = "X-App-Token"
ACCESS_SIG_HEADER = "X-App-Access-Sig"
ACCESS_TS_HEADER = "X-App-Access-Ts"


@dataclass(frozen=True)
class SignedHeaders:
    token: str
    signature: str
    timestamp: int

    def as_headers(self) -> dict[str, str]:
        return {
            APP_TOKEN_HEADER: self.token,
            ACCESS_SIG_HEADER: self.signature,
            ACCESS_TS_HEADER: str(self.timestamp),
        }


def canonical_message(
    timestamp: int,
    method: str,
    path_with_query: str,
    body: bytes | str | None = None,
) -> bytes:
    """Собирает `{ts}{METHOD}{path}{body?}` без разделителей.

    Порядок полей и отсутствие разделителей должны совпадать с тем, что
    пересчитывает Sumsub, поэтому путь не перекодируется: query уже
    percent-encoded вызывающей стороной.
    """
    message = f"{int(timestamp)}{method.upper()}{path_with_query}".encode("utf-8")
    if body:
        message += body if isinstance(body, bytes) else body.encode("utf-8")
    return message


class RequestSigner:
    """Формирует заголовки аутентификации для одного исходящего запроса (без I/O)."""

    def __init__(
        self,
        credentials: OutboundCredentials,
        registry: AlgorithmRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self._credentials = credentials
        self._registry = registry

    def sign(
        self,
        method: str,
        path_with_query: str,
        timestamp: int,
        body: bytes | str | None = None,
    ) -> SignedHeaders:
        message = canonical_message(timestamp, method, path_with_query, body)
        signature = compute_digest(
            HMAC_SHA256_HEX,
            self._credentials.secret,
            message,
            registry=self._registry,
        )
        return SignedHeaders(
            token=self._credentials.app_token,
            signature=signature,
            timestamp=int(timestamp),
        )
