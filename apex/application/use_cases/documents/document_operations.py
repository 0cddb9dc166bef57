"""Document operations: upload, read, list, update notes, soft delete, search."""

from __future__ import annotations

import asyncio
import logging

from apex.application.interfaces.repositories import (
    IDocumentRepository,
    IReportRepository,
)
from apex.application.interfaces.services import IContentExtractor, IHashService
from apex.application.interfaces.storage import IContentStore
from apex.application.services.hash_service import ContentHashService
from apex.domain.entities import Document, Report
from apex.domain.exceptions import (
    AuthorizationException,
    DuplicateDocumentException,
    ResourceNotFoundException,
    ValidationException,
)
from apex.infrastructure.exceptions import (
    ExtractionNotSupportedError,
    PersistenceConflictError,
)
from apex.shared.utils import InputSanitizer, extension_of, generate_cuid, utc_now

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_SIZE = 100 * 1024 * 1024


def _sanitize_filename(filename: str) -> str:
    """Basename without NUL bytes or edge dots; ValidationException if nothing usable remains."""
    try:
        return InputSanitizer.sanitize_filename(filename)
    except ValueError as e:
        raise ValidationException(str(e), field="filename") from e


class DocumentService:
    """Documents attached to reports, stored by content hash.

    A document has no owner of its own. Every public method resolves the
    parent report through _authorize_report or _authorize_document before
    reading or mutating anything, so ownership is always the report's.
    """

    def __init__(
        self,
        document_repo: IDocumentRepository,
        report_repo: IReportRepository,
        content_store: IContentStore,
        extractor: IContentExtractor | None = None,
        hash_service: IHashService | None = None,
        *,
        max_upload_size: int = DEFAULT_MAX_UPLOAD_SIZE,
    ) -> None:
        self.document_repo = document_repo
        self.report_repo = report_repo
        self.content_store = content_store
        self.extractor = extractor
        self.hash_service = hash_service or ContentHashService()
        self.max_upload_size = max_upload_size

    async def _authorize_report(self, report_id: str, owner_id: str, action: str) -> Report:
        """Return the active report owned by owner_id (same outcomes as get_report)."""
        report = await self.report_repo.get_by_id(report_id)
        if report is None or report.is_deleted:
            raise ResourceNotFoundException("report", report_id)
        if not report.is_owned_by(owner_id):
            raise AuthorizationException(resource="report", action=action)
        return report

    async def _authorize_document(
        self, document_id: str, owner_id: str, action: str
    ) -> Document:
        """Return the active document whose parent report is owned by owner_id."""
        document = await self.document_repo.get_by_id(document_id)
        if document is None or document.is_deleted:
            raise ResourceNotFoundException("document", document_id)
        report = await self.report_repo.get_by_id(document.report_id)
        if report is None or report.is_deleted:
            raise ResourceNotFoundException("document", document_id)
        if not report.is_owned_by(owner_id):
            raise AuthorizationException(resource="document", action=action)
        return document

    async def _extract_text(self, data: bytes, filename: str) -> str | None:
        if self.extractor is None:
            return None
        try:
            text = await self.extractor.extract(data, filename)
        except ExtractionNotSupportedError:
            logger.debug("No text extraction for %s", filename)
            return None
        except Exception:
            # Best-effort: extraction failures never fail the upload.
            logger.warning("Content extraction failed for %s", filename, exc_info=True)
            return None
        return text or None

    async def upload_document(
        self,
        report_id: str,
        owner_id: str,
        filename: str,
        data: bytes,
    ) -> Document:
        """Store data under the report and create its document row.

        Raises:
            ResourceNotFoundException: No active report with report_id.
            AuthorizationException: owner_id does not own the report.
            ValidationException: Unusable filename or payload over max_upload_size.
            DuplicateDocumentException: Report already has active document with these bytes.
            StorageException: Content store rejected the key or failed to write.
        """
        report = await self._authorize_report(report_id, owner_id, "upload")
        safe_name = _sanitize_filename(filename)
        if len(data) > self.max_upload_size:
            raise ValidationException(
                f"File too large (max {self.max_upload_size} bytes)", field="data"
            )

        content_hash = await asyncio.to_thread(self.hash_service.compute_content_hash, data)

        existing = await self.document_repo.get_by_content_hash(report.id, content_hash)
        if existing is not None:
            logger.info(
                "Duplicate upload rejected for report %s (document %s)", report.id, existing.id
            )
            raise DuplicateDocumentException(report.id, content_hash)

        storage_location = await self.content_store.put(
            report.id, content_hash, extension_of(safe_name), data
        )
        extracted_text = await self._extract_text(data, safe_name)

        now = utc_now()
        document = Document(
            id=generate_cuid(),
            report_id=report.id,
            filename=safe_name,
            content_hash=content_hash,
            storage_location=storage_location,
            extracted_text=extracted_text,
            notes="",
            file_size=len(data),
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        try:
            saved = await self.document_repo.save(document)
        except PersistenceConflictError as e:
            # Concurrent identical upload won the unique index.
            raise DuplicateDocumentException(report.id, content_hash) from e
        logger.info("Document %s uploaded to report %s", saved.id, report.id)
        return saved

    async def get_document(self, document_id: str, owner_id: str) -> Document:
        """Return the active document if owner_id owns its report."""
        return await self._authorize_document(document_id, owner_id, "read")

    async def list_documents(self, report_id: str, owner_id: str) -> list[Document]:
        """Return active documents of the report, newest first."""
        await self._authorize_report(report_id, owner_id, "read")
        return await self.document_repo.get_by_report(report_id, include_deleted=False)

    async def update_document(
        self,
        document_id: str,
        owner_id: str,
        notes: str | None = None,
    ) -> Document:
        """Replace the document's notes (kept when None) and re-stamp updated_at."""
        document = await self._authorize_document(document_id, owner_id, "update")
        new_notes = document.notes if notes is None else notes
        return await self.document_repo.save(
            document.with_notes(new_notes, updated_at=utc_now())
        )

    async def delete_document(self, document_id: str, owner_id: str) -> None:
        """Remove stored bytes, then soft-delete the row.

        If byte deletion fails the row is left active and the storage error
        propagates. A second delete raises ResourceNotFoundException.
        """
        document = await self._authorize_document(document_id, owner_id, "delete")
        await self.content_store.delete(document.storage_location)
        await self.document_repo.save(document.soft_deleted(utc_now()))
        logger.info("Document %s soft-deleted from report %s", document.id, document.report_id)

    async def search_documents(
        self, report_id: str, owner_id: str, query: str
    ) -> list[Document]:
        """Case-insensitive substring search over filename, notes and extracted text."""
        await self._authorize_report(report_id, owner_id, "read")
        term = (query or "").strip()
        if not term:
            raise ValidationException("Search query cannot be empty", field="query")
        return await self.document_repo.search(report_id, term)

    async def get_document_content(self, document_id: str, owner_id: str) -> bytes:
        """Return the stored bytes of an active document."""
        document = await self._authorize_document(document_id, owner_id, "read")
        return await self.content_store.get(document.storage_location)
