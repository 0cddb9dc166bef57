"""Content extractors: turn uploaded bytes into searchable text."""

from __future__ import annotations

import os
from typing import ClassVar

from apex.infrastructure.exceptions import ExtractionNotSupportedError

IMAGE_PLACEHOLDER_TEXT = "Image file - no text extraction"


class TextContentExtractor:
    """Extract text from plain-text formats (IContentExtractor).

    Images yield a fixed placeholder. Text formats are decoded as UTF-8
    (a leading BOM is dropped); UnicodeDecodeError propagates. Anything else
    raises ExtractionNotSupportedError.
    """

    IMAGE_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(
        {".jpg", ".jpeg", ".png", ".gif", ".webp"}
    )
    TEXT_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(
        {".txt", ".md", ".markdown", ".csv", ".json", ".log", ".html", ".xml"}
    )

    async def extract(self, data: bytes, filename: str) -> str | None:
        ext = os.path.splitext(filename or "")[1].lower()
        if ext in self.IMAGE_EXTENSIONS:
            return IMAGE_PLACEHOLDER_TEXT
        if ext in self.TEXT_EXTENSIONS:
            text = bytes(data).decode("utf-8-sig")
            return text or None
        raise ExtractionNotSupportedError(filename)


class NullContentExtractor:
    """Extractor used when extraction is disabled: never produces text."""

    async def extract(self, data: bytes, filename: str) -> str | None:
        return None
