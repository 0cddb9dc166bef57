"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repos, content store, extraction).
"""

from apex.application.interfaces import (
    IContentExtractor,
    IContentStore,
    IDocumentRepository,
    IHashService,
    IReportRepository,
)
from apex.application.services.hash_service import ContentHashService
from apex.application.use_cases.documents import DocumentService
from apex.application.use_cases.reports import ReportService

__all__ = [
    "ContentHashService",
    "DocumentService",
    "IContentExtractor",
    "IContentStore",
    "IDocumentRepository",
    "IHashService",
    "IReportRepository",
    "ReportService",
]
