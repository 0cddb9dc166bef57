"""Hash service for content-addressed storage and duplicate detection."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod


class HashAlgorithm(ABC):
    """Abstract hash algorithm (OCP)."""

    @abstractmethod
    def hash(self, data: bytes) -> str:
        """Compute lowercase hex digest of input bytes."""
        ...


class SHA256Algorithm(HashAlgorithm):
    """SHA-256 implementation."""

    def hash(self, data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()


class SHA512Algorithm(HashAlgorithm):
    """SHA-512 implementation."""

    def hash(self, data: bytes) -> str:
        return hashlib.sha512(data).hexdigest()


class ContentHashService:
    """Single source of truth for document content digests (IHashService)."""

    def __init__(self, algorithm: HashAlgorithm | None = None) -> None:
        self.algorithm = algorithm or SHA256Algorithm()

    def compute_content_hash(self, data: bytes) -> str:
        """Digest of the raw bytes; identical bytes always give the same key."""
        return self.algorithm.hash(bytes(data))
