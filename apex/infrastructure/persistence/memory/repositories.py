"""In-memory repositories for tests and local experiments.

Same contracts as the SQLAlchemy repositories (IReportRepository,
IDocumentRepository), including the active-row uniqueness of
(report_id, content_hash). Entities are frozen, so stored values are
shared safely.
"""

from __future__ import annotations

from apex.domain.entities import Document, Report
from apex.infrastructure.exceptions import PersistenceConflictError


def _contains(haystack: str | None, needle: str) -> bool:
    return haystack is not None and needle.casefold() in haystack.casefold()


class InMemoryReportRepository:
    """Dict-backed IReportRepository."""

    def __init__(self) -> None:
        self._rows: dict[str, Report] = {}

    async def get_by_id(self, report_id: str) -> Report | None:
        return self._rows.get(report_id)

    async def get_by_owner(
        self, owner_id: str, *, include_deleted: bool = False
    ) -> list[Report]:
        rows = [
            r
            for r in self._rows.values()
            if r.owner_id == owner_id and (include_deleted or r.is_active)
        ]
        return sorted(rows, key=lambda r: r.created_at, reverse=True)

    async def save(self, report: Report) -> Report:
        self._rows[report.id] = report
        return report

    async def delete(self, report_id: str) -> bool:
        return self._rows.pop(report_id, None) is not None

    async def search(self, owner_id: str, query: str) -> list[Report]:
        return [
            r
            for r in await self.get_by_owner(owner_id)
            if _contains(r.name, query) or _contains(r.content, query)
        ]


class InMemoryDocumentRepository:
    """Dict-backed IDocumentRepository."""

    def __init__(self) -> None:
        self._rows: dict[str, Document] = {}

    async def get_by_id(self, document_id: str) -> Document | None:
        return self._rows.get(document_id)

    async def get_by_report(
        self, report_id: str, *, include_deleted: bool = False
    ) -> list[Document]:
        rows = [
            d
            for d in self._rows.values()
            if d.report_id == report_id and (include_deleted or d.is_active)
        ]
        return sorted(rows, key=lambda d: d.created_at, reverse=True)

    async def get_by_content_hash(
        self, report_id: str, content_hash: str
    ) -> Document | None:
        for d in self._rows.values():
            if d.report_id == report_id and d.content_hash == content_hash and d.is_active:
                return d
        return None

    async def save(self, document: Document) -> Document:
        if document.is_active:
            for other in self._rows.values():
                if (
                    other.id != document.id
                    and other.is_active
                    and other.report_id == document.report_id
                    and other.content_hash == document.content_hash
                ):
                    raise PersistenceConflictError(
                        "document",
                        "duplicate active (report_id, content_hash)",
                    )
        self._rows[document.id] = document
        return document

    async def delete(self, document_id: str) -> bool:
        return self._rows.pop(document_id, None) is not None

    async def search(self, report_id: str, query: str) -> list[Document]:
        return [
            d
            for d in await self.get_by_report(report_id)
            if _contains(d.filename, query)
            or _contains(d.notes, query)
            or _contains(d.extracted_text, query)
        ]
