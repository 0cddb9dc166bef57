"""Content extraction backends (IContentExtractor implementations)."""

from apex.infrastructure.external.extraction.text_extractor import (
    IMAGE_PLACEHOLDER_TEXT,
    NullContentExtractor,
    TextContentExtractor,
)

__all__ = [
    "IMAGE_PLACEHOLDER_TEXT",
    "NullContentExtractor",
    "TextContentExtractor",
]
