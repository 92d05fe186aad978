"""HMAC-подписи: реестр алгоритмов, digest engine, signer и verifier."""

from sumsub_bridge.signing.algorithms import DEFAULT_REGISTRY, AlgorithmRegistry
from sumsub_bridge.signing.digest import compute_digest
from sumsub_bridge.signing.signer import RequestSigner, SignedHeaders, canonical_message
from sumsub_bridge.signing.verifier import Verdict, WebhookVerifier

__all__ = [
    "DEFAULT_REGISTRY",
    "AlgorithmRegistry",
    "RequestSigner",
    "SignedHeaders",
    "Verdict",
    "WebhookVerifier",
    "canonical_message",
    "compute_digest",
]
