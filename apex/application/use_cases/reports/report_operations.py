"""Report operations: create, read, list, update, soft delete, search."""

from __future__ import annotations

import logging

from apex.application.interfaces.repositories import IReportRepository
from apex.domain.entities import Report
from apex.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from apex.domain.value_objects import ReportName
from apex.shared.utils import generate_cuid, utc_now

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_LENGTH = 1_000_000


def _validated_name(name: str) -> str:
    """Return the trimmed name; raise ValidationException if empty or too long."""
    try:
        return ReportName(name).value
    except ValueError as e:
        raise ValidationException(str(e), field="name") from e


class ReportService:
    """Report lifecycle for a single owner: Active -> SoftDeleted (terminal).

    Every read or mutation of an existing report goes through
    _get_owned_report, which distinguishes "no active report with this id"
    (ResourceNotFoundException) from "report belongs to someone else"
    (AuthorizationException).
    """

    def __init__(
        self,
        report_repo: IReportRepository,
        *,
        max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
    ) -> None:
        self.report_repo = report_repo
        self.max_content_length = max_content_length

    def _validated_content(self, content: str) -> str:
        if not isinstance(content, str):
            raise ValidationException("Report content must be a string", field="content")
        if len(content) > self.max_content_length:
            raise ValidationException(
                f"Report content too long (max {self.max_content_length} characters)",
                field="content",
            )
        return content

    async def _get_owned_report(self, report_id: str, owner_id: str, action: str) -> Report:
        report = await self.report_repo.get_by_id(report_id)
        if report is None or report.is_deleted:
            raise ResourceNotFoundException("report", report_id)
        if not report.is_owned_by(owner_id):
            raise AuthorizationException(resource="report", action=action)
        return report

    async def create_report(self, owner_id: str, name: str) -> Report:
        """Create an empty report named ``name`` (trimmed) for owner_id."""
        now = utc_now()
        report = Report(
            id=generate_cuid(),
            owner_id=owner_id,
            name=_validated_name(name),
            content="",
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        saved = await self.report_repo.save(report)
        logger.info("Report %s created for owner %s", saved.id, owner_id)
        return saved

    async def get_report(self, report_id: str, owner_id: str) -> Report:
        """Return the active report if owner_id owns it."""
        return await self._get_owned_report(report_id, owner_id, "read")

    async def list_reports(self, owner_id: str) -> list[Report]:
        """Return owner's active reports, newest first."""
        return await self.report_repo.get_by_owner(owner_id, include_deleted=False)

    async def update_report(
        self,
        report_id: str,
        owner_id: str,
        name: str | None = None,
        content: str | None = None,
    ) -> Report:
        """Replace name and/or content; fields left as None are preserved.

        Raises:
            ValidationException: Neither field given, or a given field is invalid.
            ResourceNotFoundException: No active report with report_id.
            AuthorizationException: owner_id does not own the report.
        """
        if name is None and content is None:
            raise ValidationException(
                "At least one field (name or content) must be provided"
            )
        report = await self._get_owned_report(report_id, owner_id, "update")
        new_name = _validated_name(name) if name is not None else None
        new_content = self._validated_content(content) if content is not None else None
        updated = report.with_changes(
            name=new_name, content=new_content, updated_at=utc_now()
        )
        return await self.report_repo.save(updated)

    async def delete_report(self, report_id: str, owner_id: str) -> None:
        """Soft-delete the report. A second delete raises ResourceNotFoundException.

        Documents of the report are left untouched.
        """
        report = await self._get_owned_report(report_id, owner_id, "delete")
        await self.report_repo.save(report.soft_deleted(utc_now()))
        logger.info("Report %s soft-deleted by owner %s", report_id, owner_id)

    async def search_reports(self, owner_id: str, query: str) -> list[Report]:
        """Case-insensitive substring search over owner's active reports (name, content)."""
        term = (query or "").strip()
        if not term:
            raise ValidationException("Search query cannot be empty", field="query")
        return await self.report_repo.search(owner_id, term)
