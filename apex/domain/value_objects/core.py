"""Domain value objects for the Apex application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ReportName:
    """Value object for a report display name (SRP: name normalization).

    Surrounding whitespace is trimmed on construction; the trimmed value
    must be 1-200 characters.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 200

    def __post_init__(self) -> None:
        """Trim and validate.

        Raises:
            ValueError: If empty after trimming or longer than MAX_LENGTH.
        """
        if not isinstance(self.value, str):
            raise ValueError("Report name must be a string")
        trimmed = self.value.strip()
        object.__setattr__(self, "value", trimmed)
        if not trimmed:
            raise ValueError("Report name cannot be empty")
        if len(trimmed) > self.MAX_LENGTH:
            raise ValueError(
                f"Report name too long (max {self.MAX_LENGTH} characters)"
            )


@dataclass(frozen=True)
class ContentHash:
    """Value object for a content digest (SRP).

    Must be a SHA-256 (64 hex chars) or SHA-512 (128 hex chars) string.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate length and hex characters.

        Raises:
            ValueError: If empty, wrong length, or non-hex.
        """
        object.__setattr__(self, "value", self.value.lower())
        if not self.value:
            raise ValueError("Hash must be a non-empty string")
        if len(self.value) not in (64, 128):
            raise ValueError(
                "Hash must be a valid SHA-256 (64 chars) or SHA-512 (128 chars) hex string"
            )
        if not all(c in "0123456789abcdef" for c in self.value):
            raise ValueError("Hash must contain only hexadecimal characters")
