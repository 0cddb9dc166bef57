"""Document repository. Returns domain Document entities."""

from __future__ import annotations

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from apex.domain.entities import Document
from apex.infrastructure.persistence.models.document import DocumentModel
from apex.infrastructure.persistence.repositories.base import BaseRepository
from apex.shared.utils import ensure_utc


def _document_to_model(d: Document) -> DocumentModel:
    """Map domain Document to ORM DocumentModel for persistence."""
    return DocumentModel(
        id=d.id,
        report_id=d.report_id,
        filename=d.filename,
        content_hash=d.content_hash,
        storage_location=d.storage_location,
        extracted_text=d.extracted_text,
        notes=d.notes,
        file_size=d.file_size,
        created_at=d.created_at,
        updated_at=d.updated_at,
        deleted_at=d.deleted_at,
    )


def _model_to_document(m: DocumentModel) -> Document:
    """Map ORM DocumentModel to domain Document (UTC-normalized timestamps)."""
    return Document(
        id=m.id,
        report_id=m.report_id,
        filename=m.filename,
        content_hash=m.content_hash,
        storage_location=m.storage_location,
        extracted_text=m.extracted_text,
        notes=m.notes or "",
        file_size=m.file_size or 0,
        created_at=ensure_utc(m.created_at),
        updated_at=ensure_utc(m.updated_at),
        deleted_at=ensure_utc(m.deleted_at),
    )


class DocumentRepository(BaseRepository[DocumentModel]):
    """SQLAlchemy implementation of IDocumentRepository.

    The partial unique index ux_document_report_content_hash_active is the
    authoritative dedup guard; a violating save raises PersistenceConflictError.
    """

    entity_name = "document"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DocumentModel)

    async def get_by_id(self, document_id: str) -> Document | None:
        row = await self._get_orm_by_id(document_id)
        return _model_to_document(row) if row else None

    async def get_by_report(
        self, report_id: str, *, include_deleted: bool = False
    ) -> list[Document]:
        q = select(DocumentModel).where(DocumentModel.report_id == report_id)
        if not include_deleted:
            q = q.where(DocumentModel.deleted_at.is_(None))
        q = q.order_by(DocumentModel.created_at.desc())
        return [_model_to_document(d) for d in await self._scalars(q, "get_by_report")]

    async def get_by_content_hash(
        self, report_id: str, content_hash: str
    ) -> Document | None:
        q = select(DocumentModel).where(
            and_(
                DocumentModel.report_id == report_id,
                DocumentModel.content_hash == content_hash,
                DocumentModel.deleted_at.is_(None),
            )
        )
        rows = await self._scalars(q, "get_by_content_hash")
        return _model_to_document(rows[0]) if rows else None

    async def save(self, document: Document) -> Document:
        saved = await self._upsert(_document_to_model(document))
        return _model_to_document(saved)

    async def search(self, report_id: str, query: str) -> list[Document]:
        q = (
            select(DocumentModel)
            .where(
                DocumentModel.report_id == report_id,
                DocumentModel.deleted_at.is_(None),
                or_(
                    DocumentModel.filename.icontains(query, autoescape=True),
                    DocumentModel.notes.icontains(query, autoescape=True),
                    DocumentModel.extracted_text.icontains(query, autoescape=True),
                ),
            )
            .order_by(DocumentModel.created_at.desc())
        )
        return [_model_to_document(d) for d in await self._scalars(q, "search")]
