"""Shared utilities: cross-cutting helpers with no business logic.

Used by domain, application, and infrastructure.
"""

from apex.shared.utils import (
    InputSanitizer,
    ensure_utc,
    extension_of,
    generate_cuid,
    utc_now,
)

__all__ = [
    "InputSanitizer",
    "ensure_utc",
    "extension_of",
    "generate_cuid",
    "utc_now",
]
