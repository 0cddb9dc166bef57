"""Content store factory: creates the storage backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apex.application.interfaces.storage import IContentStore

if TYPE_CHECKING:
    from apex.core.config import Settings


class StorageFactory:
    """Factory for content store instances based on configuration."""

    @staticmethod
    def create_content_store(settings: "Settings | None" = None) -> IContentStore:
        """Create content store from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            LocalContentStore rooted at settings.storage_root.

        Raises:
            ValueError: Unknown backend or missing root.
        """
        from apex.core.config import get_settings

        s = settings or get_settings()
        backend = s.storage_backend.lower()

        if backend == "local":
            from apex.infrastructure.external.storage.local_storage import (
                LocalContentStore,
            )

            if not s.storage_root:
                raise ValueError("STORAGE_ROOT required for local backend")
            return LocalContentStore(storage_root=s.storage_root)
        raise ValueError(f"Unknown storage backend: {backend}. Supported: 'local'")
