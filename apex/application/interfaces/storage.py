"""Content store interface (port). Implementation: LocalContentStore."""

from typing import Protocol


class IContentStore(Protocol):
    """Protocol for content-addressable byte storage keyed by namespace and hash."""

    async def put(
        self,
        namespace: str,
        content_hash: str,
        extension: str,
        data: bytes,
    ) -> str:
        """Write data under namespace/content_hash; return an opaque location.

        Raises StorageInvalidNamespaceError for unsafe namespace or hash,
        StorageUploadError on I/O failure. Overwrites an existing key.
        """
        ...

    async def get(self, location: str) -> bytes:
        """Return bytes at location. Raises StorageNotFoundError if absent."""
        ...

    async def delete(self, location: str) -> None:
        """Delete location. Absent location is not an error."""
        ...

    async def exists(self, location: str) -> bool:
        """Return True if location holds a file."""
        ...
