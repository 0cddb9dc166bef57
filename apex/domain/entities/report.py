"""Report domain entity.

A report is a user-owned markdown container; documents attach to it.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from apex.domain.exceptions import ValidationException


@dataclass(frozen=True)
class Report:
    """Domain entity for a report (SRP: business rules separate from persistence).

    Immutable; lifecycle changes return a new instance. ``deleted_at`` is
    None while the report is active and is never cleared once set.
    """

    id: str
    owner_id: str
    name: str
    content: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate report business rules. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Report ID is required", field="id")
        if not self.owner_id:
            raise ValidationException("Report must have an owner", field="owner_id")

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_owned_by(self, owner_id: str) -> bool:
        """Return whether owner_id owns this report."""
        return self.owner_id == owner_id

    def with_changes(
        self,
        *,
        name: str | None = None,
        content: str | None = None,
        updated_at: datetime,
    ) -> "Report":
        """Return a copy with the given fields replaced and updated_at re-stamped."""
        return replace(
            self,
            name=self.name if name is None else name,
            content=self.content if content is None else content,
            updated_at=updated_at,
        )

    def soft_deleted(self, at: datetime) -> "Report":
        """Return a soft-deleted copy. An existing deleted_at is kept."""
        if self.deleted_at is not None:
            return self
        return replace(self, deleted_at=at, updated_at=at)
