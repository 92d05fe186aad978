"""Реестр HMAC-алгоритмов: идентификатор из заголовка -> конструктор хэша."""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from sumsub_bridge.services.errors import UnsupportedAlgorithm

HashConstructor = Callable[..., Any]

HMAC_SHA1_HEX = "HMAC_SHA1_HEX"
HMAC_SHA256_HEX = "HMAC_SHA256_HEX"
HMAC_SHA512_HEX = "HMAC_SHA512_HEX"


class AlgorithmRegistry(Mapping[str, HashConstructor]):
    """Закрытый неизменяемый набор алгоритмов.

    Расширяется только созданием нового реестра (`with_algorithm`), поэтому
    один экземпляр можно безопасно делить между потоками.
    """

    def __init__(self, algorithms: Mapping[str, HashConstructor]) -> None:
        self._algorithms = MappingProxyType(dict(algorithms))

    def __getitem__(self, algorithm_id: str) -> HashConstructor:
        return self._algorithms[algorithm_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._algorithms)

    def __len__(self) -> int:
        return len(self._algorithms)

    def __repr__(self) -> str:
        return f"AlgorithmRegistry({sorted(self._algorithms)})"

    def resolve(self, algorithm_id: str) -> HashConstructor:
        """Возвращает конструктор или бросает `UnsupportedAlgorithm` (без дефолта)."""
        try:
            return self._algorithms[algorithm_id]
        except KeyError:
            raise UnsupportedAlgorithm(algorithm_id) from None

    def with_algorithm(self, algorithm_id: str, constructor: HashConstructor) -> AlgorithmRegistry:
        merged = dict(self._algorithms)
        merged[algorithm_id] = constructor
        return AlgorithmRegistry(merged)


DEFAULT_REGISTRY = AlgorithmRegistry(
    {
        HMAC_SHA1_HEX: hashlib.sha1,
        HMAC_SHA256_HEX: hashlib.sha256,
        HMAC_SHA512_HEX: hashlib.sha512,
    }
)
