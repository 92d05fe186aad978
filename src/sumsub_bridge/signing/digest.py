"""Digest engine: HMAC(secret, message) в lower-case hex."""

import hmac

from sumsub_bridge.signing.algorithms import DEFAULT_REGISTRY, AlgorithmRegistry


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def compute_digest(
    algorithm_id: str,
    secret: str | bytes,
    message: str | bytes,
    registry: AlgorithmRegistry = DEFAULT_REGISTRY,
) -> str:
    """Считает HMAC по всему сообщению за один проход.

    Неизвестный `algorithm_id` -> `UnsupportedAlgorithm`; пустой секрет -> `ValueError`.
    """
    digestmod = registry.resolve(algorithm_id)
    key = _to_bytes(secret)
    if not key:
        raise ValueError("HMAC secret must not be empty")
    return hmac.new(key, _to_bytes(message), digestmod).hexdigest()
