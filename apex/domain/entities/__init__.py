"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from apex.domain.entities.document import Document
from apex.domain.entities.report import Report

__all__ = [
    "Document",
    "Report",
]
