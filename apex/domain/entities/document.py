"""Document domain entity.

A document is an uploaded file attached to exactly one report. It carries
no owner of its own; access is always resolved through the parent report.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from apex.domain.exceptions import ValidationException
from apex.domain.value_objects import ContentHash


@dataclass(frozen=True)
class Document:
    """Domain entity for a document.

    ``storage_location`` is whatever the content store returned on write and
    must be passed back to it verbatim. ``extracted_text`` is None when
    extraction was not attempted or failed.
    """

    id: str
    report_id: str
    filename: str
    content_hash: str
    storage_location: str
    created_at: datetime
    updated_at: datetime
    extracted_text: str | None = None
    notes: str = ""
    file_size: int = 0
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate document business rules. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Document ID is required", field="id")
        if not self.report_id:
            raise ValidationException("Document must belong to a report", field="report_id")
        try:
            ContentHash(self.content_hash)
        except (TypeError, ValueError, AttributeError) as e:
            raise ValidationException(str(e), field="content_hash") from e
        if not self.storage_location:
            raise ValidationException(
                "Document storage location is required", field="storage_location"
            )

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def has_extracted_text(self) -> bool:
        return bool(self.extracted_text)

    def with_notes(self, notes: str, *, updated_at: datetime) -> "Document":
        return replace(self, notes=notes, updated_at=updated_at)

    def soft_deleted(self, at: datetime) -> "Document":
        """Return a soft-deleted copy. An existing deleted_at is kept."""
        if self.deleted_at is not None:
            return self
        return replace(self, deleted_at=at, updated_at=at)
