"""Persistence models: ORM entities and mixins."""

from apex.infrastructure.persistence.models.document import DocumentModel
from apex.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SoftDeletableModel,
    SoftDeleteMixin,
    TimestampMixin,
)
from apex.infrastructure.persistence.models.report import ReportModel

__all__ = [
    "CuidMixin",
    "DocumentModel",
    "ReportModel",
    "SoftDeletableModel",
    "SoftDeleteMixin",
    "TimestampMixin",
]
