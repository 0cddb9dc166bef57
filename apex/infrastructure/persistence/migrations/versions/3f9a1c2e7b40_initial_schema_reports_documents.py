"""Initial schema: reports, documents

Revision ID: 3f9a1c2e7b40
Revises:
Create Date: 2026-10-16 10:12:41.508211

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9a1c2e7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create report and document tables."""
    op.create_table(
        "report",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("owner_id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_report_owner_id"), "report", ["owner_id"], unique=False)
    op.create_index(op.f("ix_report_created_at"), "report", ["created_at"], unique=False)
    op.create_index(op.f("ix_report_deleted_at"), "report", ["deleted_at"], unique=False)
    op.create_index(
        "ix_report_owner_created", "report", ["owner_id", "created_at"], unique=False
    )

    op.create_table(
        "document",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("report_id", sa.String(), nullable=False),
        sa.Column("filename", sa.String(length=1024), nullable=False),
        sa.Column("content_hash", sa.String(length=128), nullable=False),
        sa.Column("storage_location", sa.String(length=1024), nullable=False),
        sa.Column("extracted_text", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["report_id"], ["report.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_document_report_id"), "document", ["report_id"], unique=False)
    op.create_index(
        op.f("ix_document_content_hash"), "document", ["content_hash"], unique=False
    )
    op.create_index(op.f("ix_document_created_at"), "document", ["created_at"], unique=False)
    op.create_index(op.f("ix_document_deleted_at"), "document", ["deleted_at"], unique=False)
    op.create_index(
        "ix_document_report_created", "document", ["report_id", "created_at"], unique=False
    )
    # One active row per (report, content); soft-deleted rows free the hash.
    op.create_index(
        "ux_document_report_content_hash_active",
        "document",
        ["report_id", "content_hash"],
        unique=True,
        postgresql_where=sa.text("deleted_at IS NULL"),
        sqlite_where=sa.text("deleted_at IS NULL"),
    )


def downgrade() -> None:
    """Drop document and report tables."""
    op.drop_index("ux_document_report_content_hash_active", table_name="document")
    op.drop_index("ix_document_report_created", table_name="document")
    op.drop_index(op.f("ix_document_deleted_at"), table_name="document")
    op.drop_index(op.f("ix_document_created_at"), table_name="document")
    op.drop_index(op.f("ix_document_content_hash"), table_name="document")
    op.drop_index(op.f("ix_document_report_id"), table_name="document")
    op.drop_table("document")
    op.drop_index("ix_report_owner_created", table_name="report")
    op.drop_index(op.f("ix_report_deleted_at"), table_name="report")
    op.drop_index(op.f("ix_report_created_at"), table_name="report")
    op.drop_index(op.f("ix_report_owner_id"), table_name="report")
    op.drop_table("report")
