"""Domain layer: entities, value objects, and exceptions.

No dependencies on infrastructure. Used by application and infrastructure
layers.
"""

from apex.domain.entities import Document, Report
from apex.domain.exceptions import (
    ApexException,
    AuthorizationException,
    DuplicateDocumentException,
    ResourceNotFoundException,
    ValidationException,
)
from apex.domain.value_objects import ContentHash, ReportName

__all__ = [
    # Entities
    "Document",
    "Report",
    # Exceptions
    "ApexException",
    "AuthorizationException",
    "DuplicateDocumentException",
    "ResourceNotFoundException",
    "ValidationException",
    # Value objects
    "ContentHash",
    "ReportName",
]
