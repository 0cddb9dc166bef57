"""In-memory repository implementations."""

from apex.infrastructure.persistence.memory.repositories import (
    InMemoryDocumentRepository,
    InMemoryReportRepository,
)

__all__ = [
    "InMemoryDocumentRepository",
    "InMemoryReportRepository",
]
