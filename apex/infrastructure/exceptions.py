"""Infrastructure exceptions for storage and persistence operations.

Storage and persistence errors extend ApexException so the request layer
can map them to HTTP responses consistently.
"""

from apex.domain.exceptions import ApexException


class StorageException(ApexException):
    """Base exception for content store operations."""


class StorageInvalidNamespaceError(StorageException):
    """Namespace or content key is not a safe path component (rejected, never rewritten)."""

    def __init__(self, value: str, field: str = "namespace") -> None:
        super().__init__(
            f"Invalid storage {field}",
            "STORAGE_INVALID_NAMESPACE",
            {"field": field, "value": value[:200] if isinstance(value, str) else repr(value)},
        )


class StorageNotFoundError(StorageException):
    """File not found in storage."""

    def __init__(self, location: str) -> None:
        super().__init__(
            f"File not found: {location}",
            "STORAGE_NOT_FOUND",
            {"location": location},
        )


class StorageUploadError(StorageException):
    """File write failed (disk full, permissions, ...)."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(
            f"Failed to write file: {location}",
            "STORAGE_UPLOAD_ERROR",
            {"location": location, "reason": reason},
        )


class StorageDownloadError(StorageException):
    """File read failed."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(
            f"Failed to read file: {location}",
            "STORAGE_DOWNLOAD_ERROR",
            {"location": location, "reason": reason},
        )


class StorageDeleteError(StorageException):
    """File deletion failed for a reason other than the file being absent."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(
            f"Failed to delete file: {location}",
            "STORAGE_DELETE_ERROR",
            {"location": location, "reason": reason},
        )


class StoragePermissionError(StorageException):
    """Location resolves outside the storage root."""

    def __init__(self, location: str, operation: str) -> None:
        super().__init__(
            f"Permission denied for {operation} on {location}",
            "STORAGE_PERMISSION_ERROR",
            {"location": location, "operation": operation},
        )


class PersistenceException(ApexException):
    """Repository-layer failure not otherwise classified."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Persistence failure during {operation}",
            "PERSISTENCE_ERROR",
            {"operation": operation, "reason": reason},
        )


class PersistenceConflictError(PersistenceException):
    """A uniqueness constraint rejected the write."""

    def __init__(self, entity: str, reason: str) -> None:
        ApexException.__init__(
            self,
            f"Uniqueness constraint violated for {entity}",
            "PERSISTENCE_CONFLICT",
            {"entity": entity, "reason": reason},
        )


class ExtractionNotSupportedError(ApexException):
    """Content extractor cannot handle this file type."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            f"Text extraction not supported for: {filename}",
            "EXTRACTION_NOT_SUPPORTED",
            {"filename": filename},
        )
