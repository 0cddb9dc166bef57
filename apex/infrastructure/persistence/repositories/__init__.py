"""Persistence repositories. Re-exports for dependency injection."""

from apex.infrastructure.persistence.repositories.base import BaseRepository
from apex.infrastructure.persistence.repositories.document_repo import DocumentRepository
from apex.infrastructure.persistence.repositories.report_repo import ReportRepository

__all__ = [
    "BaseRepository",
    "DocumentRepository",
    "ReportRepository",
]
