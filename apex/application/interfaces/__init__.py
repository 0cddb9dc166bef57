"""Application interfaces (ports): repository, storage and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from apex.infrastructure.
"""

from apex.application.interfaces.repositories import (
    IDocumentRepository,
    IReportRepository,
)
from apex.application.interfaces.services import IContentExtractor, IHashService
from apex.application.interfaces.storage import IContentStore

__all__ = [
    "IContentExtractor",
    "IContentStore",
    "IDocumentRepository",
    "IHashService",
    "IReportRepository",
]
