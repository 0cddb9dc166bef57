"""Tests for domain and infrastructure exceptions (error_code, message, details)."""

from apex.domain.exceptions import (
    ApexException,
    AuthorizationException,
    DuplicateDocumentException,
    ResourceNotFoundException,
    ValidationException,
)
from apex.infrastructure.exceptions import (
    PersistenceConflictError,
    PersistenceException,
    StorageException,
    StorageInvalidNamespaceError,
    StorageNotFoundError,
)


def test_apex_exception_default_error_code() -> None:
    """Base ApexException uses class name as error_code when not provided."""
    exc = ApexException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "ApexException"
    assert exc.details == {}


def test_apex_exception_to_dict() -> None:
    exc = ApexException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid name", field="name")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "name"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Bad input")
    assert exc.details == {}


def test_authorization_exception_with_resource_and_action() -> None:
    exc = AuthorizationException(resource="report", action="delete")
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.message == "Permission denied: delete on report"
    assert exc.details == {"resource": "report", "action": "delete"}


def test_authorization_exception_default_message() -> None:
    exc = AuthorizationException()
    assert exc.message == "Permission denied"
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("document", "doc-123")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert "doc-123" in exc.message
    assert exc.details == {"resource_type": "document", "resource_id": "doc-123"}


def test_duplicate_document_exception() -> None:
    exc = DuplicateDocumentException("rep-1", "ab" * 32)
    assert exc.error_code == "DOCUMENT_ALREADY_EXISTS"
    assert exc.message == "Document already exists in this report"
    assert exc.details["report_id"] == "rep-1"


def test_storage_invalid_namespace_is_storage_exception() -> None:
    exc = StorageInvalidNamespaceError("../x")
    assert isinstance(exc, StorageException)
    assert exc.error_code == "STORAGE_INVALID_NAMESPACE"
    assert exc.details == {"field": "namespace", "value": "../x"}


def test_storage_not_found() -> None:
    exc = StorageNotFoundError("ns/abc")
    assert exc.error_code == "STORAGE_NOT_FOUND"
    assert exc.details == {"location": "ns/abc"}


def test_persistence_conflict_is_persistence_exception() -> None:
    exc = PersistenceConflictError("document", "unique violation")
    assert isinstance(exc, PersistenceException)
    assert exc.error_code == "PERSISTENCE_CONFLICT"
    assert exc.details == {"entity": "document", "reason": "unique violation"}
