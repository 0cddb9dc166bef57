"""Document ORM model. File storage metadata and extracted text."""

from sqlalchemy import BigInteger, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from apex.infrastructure.persistence.database import Base
from apex.infrastructure.persistence.models.mixins import SoftDeletableModel


class DocumentModel(SoftDeletableModel, Base):
    """Document row. Table: document. Belongs to one report; no owner column."""

    __tablename__ = "document"

    report_id: Mapped[str] = mapped_column(
        String, ForeignKey("report.id"), nullable=False, index=True
    )
    filename: Mapped[str] = mapped_column(String(1024), nullable=False)
    content_hash: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    storage_location: Mapped[str] = mapped_column(String(1024), nullable=False)
    extracted_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        Index("ix_document_report_created", "report_id", "created_at"),
        # One active row per (report, content). Soft-deleted rows free the hash.
        Index(
            "ux_document_report_content_hash_active",
            "report_id",
            "content_hash",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )
