"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill
(DIP). Both the SQLAlchemy repositories and the in-memory repositories
satisfy them. All types reference domain entities only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apex.domain.entities import Document, Report


# Report repository interface
class IReportRepository(Protocol):
    """Protocol for report repository (DIP)."""

    async def get_by_id(self, report_id: str) -> Report | None:
        """Return report by ID, soft-deleted rows included."""

    async def get_by_owner(
        self, owner_id: str, *, include_deleted: bool = False
    ) -> list[Report]:
        """Return reports owned by owner_id (newest created_at first)."""

    async def save(self, report: Report) -> Report:
        """Insert or update report; return the persisted entity."""

    async def delete(self, report_id: str) -> bool:
        """Hard delete (administrative use). Return True if a row was removed."""

    async def search(self, owner_id: str, query: str) -> list[Report]:
        """Return owner's active reports whose name or content contains query (case-insensitive)."""


# Document repository interface
class IDocumentRepository(Protocol):
    """Protocol for document repository (DIP).

    Implementations enforce uniqueness of (report_id, content_hash) among
    active rows and raise PersistenceConflictError on violation.
    """

    async def get_by_id(self, document_id: str) -> Document | None:
        """Return document by ID, soft-deleted rows included."""

    async def get_by_report(
        self, report_id: str, *, include_deleted: bool = False
    ) -> list[Document]:
        """Return documents of report_id (newest created_at first)."""

    async def get_by_content_hash(
        self, report_id: str, content_hash: str
    ) -> Document | None:
        """Return the active document of report_id with content_hash, if any."""

    async def save(self, document: Document) -> Document:
        """Insert or update document; return the persisted entity."""

    async def delete(self, document_id: str) -> bool:
        """Hard delete (administrative use). Return True if a row was removed."""

    async def search(self, report_id: str, query: str) -> list[Document]:
        """Return active documents of report_id whose filename, notes or extracted text contains query."""
