"""HTTP клиент Sumsub: каждый запрос подписывается `RequestSigner`."""

from __future__ import annotations

import secrets
import string
import time
from collections.abc import Callable
from typing import Any
from urllib.parse import quote, urlencode

import httpx
import structlog

from sumsub_bridge.metrics import sumsub_request_latency_seconds, sumsub_requests_total
from sumsub_bridge.services.errors import SumsubAPIError, map_transport_exception
from sumsub_bridge.settings import OutboundCredentials, Settings
from sumsub_bridge.signing.signer import RequestSigner

log = structlog.get_logger()

_USER_ID_ALPHABET = string.ascii_letters + string.digits


def random_external_user_id(prefix: str = "random-PyToken", length: int = 9) -> str:
    """Случайный externalUserId для демо/песочницы."""
    suffix = "".join(secrets.choice(_USER_ID_ALPHABET) for _ in range(length))
    return f"{prefix}-{suffix}"


class SumsubClient:
    """Тонкая обёртка над httpx. Без ретраев: один вызов = один подписанный запрос."""

    def __init__(
        self,
        credentials: OutboundCredentials,
        base_url: str = "https://api.sumsub.com",
        timeout: float = 10.0,
        clock: Callable[[], float] = time.time,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._signer = RequestSigner(credentials)
        self._clock = clock
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> SumsubClient:
        return cls(
            settings.outbound_credentials(),
            base_url=settings.sumsub_base_url,
            timeout=settings.sumsub_timeout_seconds,
            **kwargs,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> SumsubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(
        self,
        endpoint: str,
        method: str,
        path_with_query: str,
        body: bytes | None = None,
    ) -> Any:
        timestamp = int(self._clock())
        signed = self._signer.sign(method, path_with_query, timestamp, body)
        headers = {"Accept": "application/json", **signed.as_headers()}
        if body:
            headers["Content-Type"] = "application/json"

        t0 = time.time()
        try:
            r = self._client.request(method, path_with_query, content=body, headers=headers)
        except httpx.HTTPError as e:
            sumsub_requests_total.labels(endpoint=endpoint, status="transport_error").inc()
            log.warning("sumsub_request_failed", endpoint=endpoint, err=type(e).__name__)
            raise map_transport_exception(e) from e
        finally:
            sumsub_request_latency_seconds.labels(endpoint=endpoint).observe(time.time() - t0)

        sumsub_requests_total.labels(endpoint=endpoint, status=str(r.status_code)).inc()
        if r.status_code < 200 or r.status_code >= 300:
            log.warning("sumsub_request_rejected", endpoint=endpoint, status_code=r.status_code)
            raise SumsubAPIError(r.status_code, r.text[:300])
        try:
            return r.json()
        except ValueError:
            log.warning("sumsub_response_not_json", endpoint=endpoint, status_code=r.status_code)
            raise SumsubAPIError(r.status_code, "invalid JSON") from None

    def get_applicant(self, applicant_id: str) -> dict:
        """Статус/данные аппликанта по его id."""
        path = f"/resources/applicants/{quote(applicant_id, safe='')}/one"
        return self._request("applicants.one", "GET", path)

    def list_applicant_levels(self) -> dict:
        return self._request("applicants.levels", "GET", "/resources/applicants/-/levels")

    def create_access_token(self, user_id: str, level_name: str, ttl_in_secs: int) -> dict:
        """Access token для WebSDK; параметры уходят в query, тело пустое."""
        query = urlencode(
            [("userId", user_id), ("ttlInSecs", str(ttl_in_secs)), ("levelName", level_name)]
        )
        return self._request("access_tokens", "POST", f"/resources/accessTokens?{query}")
