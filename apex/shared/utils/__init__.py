"""Shared utilities: datetime, generators, sanitization."""

from apex.shared.utils.datetime import ensure_utc, utc_now
from apex.shared.utils.generators import generate_cuid
from apex.shared.utils.sanitization import (
    InputSanitizer,
    extension_of,
)

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "InputSanitizer",
    "extension_of",
]
