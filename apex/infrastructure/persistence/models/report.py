"""Report ORM model."""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from apex.infrastructure.persistence.database import Base
from apex.infrastructure.persistence.models.mixins import SoftDeletableModel


class ReportModel(SoftDeletableModel, Base):
    """Report row. Table: report. owner_id is the verified caller identity."""

    __tablename__ = "report"

    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        Index("ix_report_owner_created", "owner_id", "created_at"),
    )
