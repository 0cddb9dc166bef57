"""Tests for exception handlers: error codes map to HTTP statuses."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from apex.core.exception_handlers import register_exception_handlers, status_for
from apex.domain.exceptions import (
    AuthorizationException,
    DuplicateDocumentException,
    ResourceNotFoundException,
    ValidationException,
)
from apex.infrastructure.exceptions import (
    PersistenceConflictError,
    PersistenceException,
    StorageInvalidNamespaceError,
    StorageUploadError,
)


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (ValidationException("bad", field="name"), 400),
        (AuthorizationException(resource="report", action="read"), 403),
        (ResourceNotFoundException("report", "r1"), 404),
        (DuplicateDocumentException("r1", "ab" * 32), 409),
        (PersistenceConflictError("document", "unique"), 409),
        (StorageInvalidNamespaceError(".."), 500),
        (StorageUploadError("ns/x", "disk full"), 500),
        (PersistenceException("save", "lost connection"), 500),
    ],
)
def test_status_for(exc, status: int) -> None:
    assert status_for(exc) == status


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/missing")
    async def missing() -> None:
        raise ResourceNotFoundException("document", "d1")

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("secret detail")

    return app


async def test_apex_exception_rendered_as_json() -> None:
    transport = ASGITransport(app=_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/missing")
    assert resp.status_code == 404
    body = resp.json()
    assert body["error"] == "RESOURCE_NOT_FOUND"
    assert body["details"] == {"resource_type": "document", "resource_id": "d1"}


async def test_unhandled_exception_hides_detail() -> None:
    transport = ASGITransport(app=_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"error": "INTERNAL_ERROR", "message": "Internal server error"}
