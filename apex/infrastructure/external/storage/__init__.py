"""Storage: local filesystem content store.

StorageFactory creates the backend from apex.core.config. The
implementation satisfies IContentStore (put, get, delete, exists).
"""

from apex.infrastructure.external.storage.factory import StorageFactory
from apex.infrastructure.external.storage.local_storage import LocalContentStore

__all__ = [
    "LocalContentStore",
    "StorageFactory",
]
