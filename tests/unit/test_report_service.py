"""Tests for ReportService: lifecycle, ownership, validation, search."""

import pytest

from apex.application.use_cases.reports import ReportService
from apex.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from apex.infrastructure.persistence.memory import InMemoryReportRepository

OWNER = "user_alice"
OTHER_OWNER = "user_bob"


class TestCreateReport:
    async def test_name_trimmed_and_content_empty(self, report_service: ReportService) -> None:
        report = await report_service.create_report(OWNER, "  Q4 Report  ")
        assert report.name == "Q4 Report"
        assert report.content == ""
        assert report.owner_id == OWNER
        assert report.deleted_at is None
        assert report.created_at == report.updated_at

    async def test_ids_unique(self, report_service: ReportService) -> None:
        a = await report_service.create_report(OWNER, "A")
        b = await report_service.create_report(OWNER, "A")
        assert a.id != b.id

    async def test_name_at_limit_after_trim(self, report_service: ReportService) -> None:
        report = await report_service.create_report(OWNER, "  " + "x" * 200 + "  ")
        assert len(report.name) == 200

    @pytest.mark.parametrize("name", ["", "   ", "x" * 201])
    async def test_invalid_name(self, report_service: ReportService, name: str) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await report_service.create_report(OWNER, name)
        assert exc_info.value.details == {"field": "name"}


class TestGetAndList:
    async def test_owner_can_read(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        assert await report_service.get_report(created.id, OWNER) == created

    async def test_other_owner_forbidden(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        with pytest.raises(AuthorizationException):
            await report_service.get_report(created.id, OTHER_OWNER)

    async def test_unknown_id_not_found(self, report_service: ReportService) -> None:
        with pytest.raises(ResourceNotFoundException):
            await report_service.get_report("missing", OWNER)

    async def test_list_newest_first_and_owner_scoped(
        self, report_service: ReportService
    ) -> None:
        first = await report_service.create_report(OWNER, "first")
        second = await report_service.create_report(OWNER, "second")
        await report_service.create_report(OTHER_OWNER, "theirs")
        listed = await report_service.list_reports(OWNER)
        assert {r.id for r in listed} == {first.id, second.id}
        assert listed == sorted(listed, key=lambda r: r.created_at, reverse=True)
        assert all(r.owner_id == OWNER for r in listed)

    async def test_list_empty(self, report_service: ReportService) -> None:
        assert await report_service.list_reports(OWNER) == []


class TestUpdateReport:
    async def test_partial_update_preserves_other_field(
        self, report_service: ReportService
    ) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        with_content = await report_service.update_report(created.id, OWNER, content="# Notes")
        renamed = await report_service.update_report(created.id, OWNER, name="  Q4 final ")
        assert with_content.content == "# Notes"
        assert renamed.name == "Q4 final"
        assert renamed.content == "# Notes"
        assert renamed.created_at == created.created_at
        assert renamed.updated_at >= created.updated_at

    async def test_no_fields_rejected(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        with pytest.raises(ValidationException, match="At least one field"):
            await report_service.update_report(created.id, OWNER)

    async def test_empty_content_allowed(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        await report_service.update_report(created.id, OWNER, content="text")
        cleared = await report_service.update_report(created.id, OWNER, content="")
        assert cleared.content == ""

    async def test_invalid_name_leaves_report_unchanged(
        self, report_service: ReportService
    ) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        with pytest.raises(ValidationException):
            await report_service.update_report(created.id, OWNER, name="   ", content="x")
        assert (await report_service.get_report(created.id, OWNER)).content == ""

    async def test_content_limit(self, report_repo: InMemoryReportRepository) -> None:
        service = ReportService(report_repo, max_content_length=5)
        created = await service.create_report(OWNER, "Q4")
        with pytest.raises(ValidationException) as exc_info:
            await service.update_report(created.id, OWNER, content="123456")
        assert exc_info.value.details == {"field": "content"}

    async def test_other_owner_forbidden(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        with pytest.raises(AuthorizationException):
            await report_service.update_report(created.id, OTHER_OWNER, name="mine")


class TestDeleteReport:
    async def test_soft_delete_hides_report(
        self, report_service: ReportService, report_repo: InMemoryReportRepository
    ) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        await report_service.delete_report(created.id, OWNER)
        with pytest.raises(ResourceNotFoundException):
            await report_service.get_report(created.id, OWNER)
        assert await report_service.list_reports(OWNER) == []
        stored = await report_repo.get_by_id(created.id)
        assert stored is not None
        assert stored.deleted_at is not None

    async def test_second_delete_not_found(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        await report_service.delete_report(created.id, OWNER)
        with pytest.raises(ResourceNotFoundException):
            await report_service.delete_report(created.id, OWNER)

    async def test_update_after_delete_not_found(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        await report_service.delete_report(created.id, OWNER)
        with pytest.raises(ResourceNotFoundException):
            await report_service.update_report(created.id, OWNER, name="again")

    async def test_other_owner_cannot_delete(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Q4")
        with pytest.raises(AuthorizationException):
            await report_service.delete_report(created.id, OTHER_OWNER)
        assert (await report_service.get_report(created.id, OWNER)).is_active


class TestSearchReports:
    async def test_matches_name_or_content_case_insensitive(
        self, report_service: ReportService
    ) -> None:
        by_name = await report_service.create_report(OWNER, "Quarterly Revenue")
        by_content = await report_service.create_report(OWNER, "Other")
        await report_service.update_report(by_content.id, OWNER, content="revenue dropped")
        await report_service.create_report(OWNER, "Unrelated")
        await report_service.create_report(OTHER_OWNER, "Revenue (theirs)")
        found = await report_service.search_reports(OWNER, "REVENUE")
        assert {r.id for r in found} == {by_name.id, by_content.id}

    async def test_deleted_excluded(self, report_service: ReportService) -> None:
        created = await report_service.create_report(OWNER, "Revenue")
        await report_service.delete_report(created.id, OWNER)
        assert await report_service.search_reports(OWNER, "revenue") == []

    async def test_blank_query_rejected(self, report_service: ReportService) -> None:
        with pytest.raises(ValidationException):
            await report_service.search_reports(OWNER, "   ")
