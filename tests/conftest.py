"""Pytest configuration and fixtures for apex.

Service tests run against the in-memory repositories and a LocalContentStore
under tmp_path. SQL repository tests use an in-memory SQLite engine
(aiosqlite) with the schema created from ORM metadata.
"""

from collections.abc import AsyncIterator, Iterator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from apex.application.use_cases.documents import DocumentService
from apex.application.use_cases.reports import ReportService
from apex.core.config import get_settings
from apex.infrastructure.external.extraction import TextContentExtractor
from apex.infrastructure.external.storage import LocalContentStore
from apex.infrastructure.persistence.database import (
    create_engine_from_url,
    create_session_factory,
    init_models,
)
from apex.infrastructure.persistence.memory import (
    InMemoryDocumentRepository,
    InMemoryReportRepository,
)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Settings are lru_cached; clear around each test so env changes apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def report_repo() -> InMemoryReportRepository:
    return InMemoryReportRepository()


@pytest.fixture
def document_repo() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def content_store(tmp_path) -> LocalContentStore:
    """Local content store rooted in a per-test temp directory."""
    return LocalContentStore(tmp_path / "storage")


@pytest.fixture
def report_service(report_repo: InMemoryReportRepository) -> ReportService:
    return ReportService(report_repo)


@pytest.fixture
def document_service(
    document_repo: InMemoryDocumentRepository,
    report_repo: InMemoryReportRepository,
    content_store: LocalContentStore,
) -> DocumentService:
    return DocumentService(
        document_repo=document_repo,
        report_repo=report_repo,
        content_store=content_store,
        extractor=TextContentExtractor(),
    )


@pytest.fixture
async def sqlite_engine() -> AsyncIterator[AsyncEngine]:
    """In-memory SQLite engine with all tables created."""
    engine = create_engine_from_url("sqlite+aiosqlite:///:memory:")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(sqlite_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Database session for repository tests. Rolls back after test."""
    factory = create_session_factory(sqlite_engine)
    async with factory() as session:
        yield session
        await session.rollback()
