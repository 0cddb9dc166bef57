"""Input sanitization for storage keys and uploaded filenames.

Identifier checks reject rather than transform: a value that does not match
the allowlist raises ValueError and is never rewritten into something that
does. Only the file extension, which is descriptive, is normalized.
"""

import os
import re
from typing import ClassVar


class InputSanitizer:
    """Allowlist validation for values that end up in filesystem paths."""

    IDENTIFIER_MAX_LENGTH: ClassVar[int] = 128
    IDENTIFIER_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[A-Za-z0-9_-]{1,128}$"
    )
    HEX_DIGEST_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[0-9a-f]{16,128}$")
    EXTENSION_MAX_LENGTH: ClassVar[int] = 16
    RESERVED_FILENAMES: ClassVar[frozenset[str]] = frozenset(
        {"con", "prn", "aux", "nul"}
        | {f"com{i}" for i in range(1, 10)}
        | {f"lpt{i}" for i in range(1, 10)}
    )

    @classmethod
    def validate_identifier(cls, value: str) -> str:
        """Validate a path-safe identifier (alphanumeric, underscore, hyphen).

        Separators (``/``, ``\\``) and parent segments (``..``) never match.

        Raises:
            ValueError: If value is empty, too long, or has other characters.
        """
        if not isinstance(value, str) or not cls.IDENTIFIER_PATTERN.fullmatch(value):
            raise ValueError("Invalid identifier format")
        return value

    @classmethod
    def validate_hex_digest(cls, value: str) -> str:
        """Validate a lowercase hex digest. Raises ValueError if invalid."""
        if not isinstance(value, str) or not cls.HEX_DIGEST_PATTERN.fullmatch(value):
            raise ValueError("Invalid hex digest format")
        return value

    @classmethod
    def sanitize_extension(cls, value: str | None) -> str:
        """Normalize a file extension to lowercase ``[a-z0-9]``, max 16 chars.

        Accepts a bare extension (``"PDF"``) or a dotted one (``".pdf"``).
        Returns "" when nothing usable remains.
        """
        if not value:
            return ""
        cleaned = "".join(ch for ch in value.lower() if ch.isascii() and ch.isalnum())
        return cleaned[: cls.EXTENSION_MAX_LENGTH]

    @classmethod
    def sanitize_filename(cls, value: str) -> str:
        """Strip path components, NUL bytes and edge dots/spaces from a filename.

        Raises:
            ValueError: If nothing remains or the name is a reserved device name.
        """
        name = os.path.basename((value or "").replace("\\", "/"))
        name = name.replace("\x00", "").strip(". ")
        if not name:
            raise ValueError("Filename is empty or invalid after sanitization")
        if os.path.splitext(name)[0].lower() in cls.RESERVED_FILENAMES:
            raise ValueError(f"Reserved filename: {name}")
        return name


def extension_of(filename: str) -> str:
    """Return the sanitized extension of filename ("" when it has none)."""
    return InputSanitizer.sanitize_extension(os.path.splitext(filename or "")[1])
