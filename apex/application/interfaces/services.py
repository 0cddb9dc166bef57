"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators the use cases consume (DIP).
"""

from __future__ import annotations

from typing import Protocol


# Content hash interface
class IHashService(Protocol):
    """Protocol for content digest computation (dedup and storage keys)."""

    def compute_content_hash(self, data: bytes) -> str:
        """Return lowercase hex digest of data."""


# Content extraction interface
class IContentExtractor(Protocol):
    """Protocol for turning raw file bytes into text.

    Best-effort: callers treat any exception as "no text available".
    """

    async def extract(self, data: bytes, filename: str) -> str | None:
        """Return extracted text, or None when there is nothing to extract."""
