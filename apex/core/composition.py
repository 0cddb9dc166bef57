"""Service composition: build report and document services for a session.

Callers own the session and its transaction (see session_scope). The
content store is created per call from settings unless one is injected.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from apex.application.interfaces.storage import IContentStore
from apex.application.services.hash_service import ContentHashService
from apex.application.use_cases.documents import DocumentService
from apex.application.use_cases.reports import ReportService
from apex.core.config import Settings, get_settings
from apex.infrastructure.external.extraction import (
    NullContentExtractor,
    TextContentExtractor,
)
from apex.infrastructure.external.storage.factory import StorageFactory
from apex.infrastructure.persistence.repositories import (
    DocumentRepository,
    ReportRepository,
)


def build_report_service(
    session: AsyncSession, settings: Settings | None = None
) -> ReportService:
    """Build ReportService over a SQL report repository."""
    s = settings or get_settings()
    return ReportService(
        ReportRepository(session),
        max_content_length=s.max_report_content_length,
    )


def build_document_service(
    session: AsyncSession,
    settings: Settings | None = None,
    content_store: IContentStore | None = None,
) -> DocumentService:
    """Build DocumentService (SQL repos, content store, extractor per settings)."""
    s = settings or get_settings()
    store = content_store or StorageFactory.create_content_store(s)
    extractor = TextContentExtractor() if s.extraction_enabled else NullContentExtractor()
    return DocumentService(
        document_repo=DocumentRepository(session),
        report_repo=ReportRepository(session),
        content_store=store,
        extractor=extractor,
        hash_service=ContentHashService(),
        max_upload_size=s.max_upload_size,
    )
