"""Report repository. Returns domain Report entities."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from apex.domain.entities import Report
from apex.infrastructure.persistence.models.report import ReportModel
from apex.infrastructure.persistence.repositories.base import BaseRepository
from apex.shared.utils import ensure_utc


def _report_to_model(r: Report) -> ReportModel:
    """Map domain Report to ORM ReportModel for persistence."""
    return ReportModel(
        id=r.id,
        owner_id=r.owner_id,
        name=r.name,
        content=r.content,
        created_at=r.created_at,
        updated_at=r.updated_at,
        deleted_at=r.deleted_at,
    )


def _model_to_report(m: ReportModel) -> Report:
    """Map ORM ReportModel to domain Report (UTC-normalized timestamps)."""
    return Report(
        id=m.id,
        owner_id=m.owner_id,
        name=m.name,
        content=m.content or "",
        created_at=ensure_utc(m.created_at),
        updated_at=ensure_utc(m.updated_at),
        deleted_at=ensure_utc(m.deleted_at),
    )


class ReportRepository(BaseRepository[ReportModel]):
    """SQLAlchemy implementation of IReportRepository."""

    entity_name = "report"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ReportModel)

    async def get_by_id(self, report_id: str) -> Report | None:
        row = await self._get_orm_by_id(report_id)
        return _model_to_report(row) if row else None

    async def get_by_owner(
        self, owner_id: str, *, include_deleted: bool = False
    ) -> list[Report]:
        q = select(ReportModel).where(ReportModel.owner_id == owner_id)
        if not include_deleted:
            q = q.where(ReportModel.deleted_at.is_(None))
        q = q.order_by(ReportModel.created_at.desc())
        return [_model_to_report(r) for r in await self._scalars(q, "get_by_owner")]

    async def save(self, report: Report) -> Report:
        saved = await self._upsert(_report_to_model(report))
        return _model_to_report(saved)

    async def search(self, owner_id: str, query: str) -> list[Report]:
        q = (
            select(ReportModel)
            .where(
                ReportModel.owner_id == owner_id,
                ReportModel.deleted_at.is_(None),
                or_(
                    ReportModel.name.icontains(query, autoescape=True),
                    ReportModel.content.icontains(query, autoescape=True),
                ),
            )
            .order_by(ReportModel.created_at.desc())
        )
        return [_model_to_report(r) for r in await self._scalars(q, "search")]
