"""Document use cases: upload, query, notes update, soft delete."""

from apex.application.use_cases.documents.document_operations import DocumentService

__all__ = [
    "DocumentService",
]
