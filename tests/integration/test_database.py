"""Persistence plumbing: session_scope transactions and the Alembic migration."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from apex.domain.entities import Report
from apex.infrastructure.persistence.database import create_session_factory, session_scope
from apex.infrastructure.persistence.repositories import ReportRepository
from apex.shared.utils import utc_now

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def _report(report_id: str) -> Report:
    now = utc_now()
    return Report(
        id=report_id, owner_id="owner-1", name="Q4", content="", created_at=now, updated_at=now
    )


@pytest.mark.requires_db
async def test_session_scope_commits(sqlite_engine) -> None:
    factory = create_session_factory(sqlite_engine)
    async with session_scope(factory) as session:
        await ReportRepository(session).save(_report("committed"))
    async with factory() as session:
        assert await ReportRepository(session).get_by_id("committed") is not None


@pytest.mark.requires_db
async def test_session_scope_rolls_back_on_error(sqlite_engine) -> None:
    factory = create_session_factory(sqlite_engine)
    with pytest.raises(RuntimeError):
        async with session_scope(factory) as session:
            await ReportRepository(session).save(_report("rolled-back"))
            raise RuntimeError("abort")
    async with factory() as session:
        assert await ReportRepository(session).get_by_id("rolled-back") is None


@pytest.mark.requires_db
def test_migration_creates_schema(tmp_path) -> None:
    db_path = tmp_path / "migrated.sqlite"
    cfg = Config(str(ALEMBIC_INI))
    cfg.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    cfg.attributes["configure_logger"] = False
    command.upgrade(cfg, "head")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        assert {"report", "document"} <= set(inspector.get_table_names())
        indexes = {ix["name"]: ix for ix in inspector.get_indexes("document")}
        assert indexes["ux_document_report_content_hash_active"]["unique"]
    finally:
        engine.dispose()

    command.downgrade(cfg, "base")
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert "document" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
