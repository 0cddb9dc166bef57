"""Domain value objects and shared value types."""

from apex.domain.value_objects.core import ContentHash, ReportName

__all__ = [
    "ContentHash",
    "ReportName",
]
