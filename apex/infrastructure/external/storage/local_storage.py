"""Local filesystem content store with namespace validation and atomic writes."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from apex.infrastructure.exceptions import (
    StorageDeleteError,
    StorageDownloadError,
    StorageException,
    StorageInvalidNamespaceError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageUploadError,
)
from apex.shared.utils.sanitization import InputSanitizer

logger = logging.getLogger(__name__)

MKSTEMP_ATTEMPTS = 3


class LocalContentStore:
    """Content-addressable store on the local filesystem.

    Files live at ``<storage_root>/<namespace>/<content_hash>[.<ext>]``.
    Namespace and hash are validated against an allowlist before any path is
    built; invalid values are rejected, never rewritten. Writes use temp
    file + rename, so concurrent writers of the same hash are harmless.
    The store keeps no state besides its root.
    """

    def __init__(self, storage_root: str | os.PathLike[str]) -> None:
        """Initialize local storage.

        Args:
            storage_root: Base directory for all files; created if missing.
        """
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _build_location(self, namespace: str, content_hash: str, extension: str) -> str:
        """Validate key parts and return the relative location string."""
        try:
            InputSanitizer.validate_identifier(namespace)
        except ValueError as e:
            raise StorageInvalidNamespaceError(namespace, "namespace") from e
        try:
            InputSanitizer.validate_hex_digest(content_hash)
        except ValueError as e:
            raise StorageInvalidNamespaceError(content_hash, "content_hash") from e
        ext = InputSanitizer.sanitize_extension(extension)
        filename = f"{content_hash}.{ext}" if ext else content_hash
        return f"{namespace}/{filename}"

    def _get_full_path(self, location: str) -> Path:
        """Resolve and validate path under storage_root. Raises StoragePermissionError if traversal."""
        if not location:
            raise StoragePermissionError(location, "path_validation")
        full_path = (self.storage_root / location).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise StoragePermissionError(location, "path_validation") from e
        if full_path == self.storage_root:
            raise StoragePermissionError(location, "path_validation")
        return full_path

    def _create_temp_file(self, target_path: Path) -> tuple[int, str]:
        """Create the namespace directory and a temp file beside target_path.

        A concurrent delete may prune the empty namespace directory between
        mkdir and mkstemp; the directory is recreated and the attempt repeated.
        """
        for _ in range(MKSTEMP_ATTEMPTS - 1):
            target_path.parent.mkdir(parents=True, exist_ok=True, mode=0o750)
            try:
                return self._mkstemp(target_path)
            except FileNotFoundError:
                logger.debug("Namespace directory %s vanished; retrying", target_path.parent)
        target_path.parent.mkdir(parents=True, exist_ok=True, mode=0o750)
        return self._mkstemp(target_path)

    @staticmethod
    def _mkstemp(target_path: Path) -> tuple[int, str]:
        return tempfile.mkstemp(
            dir=target_path.parent, prefix=".tmp_", suffix=target_path.suffix
        )

    async def put(
        self,
        namespace: str,
        content_hash: str,
        extension: str,
        data: bytes,
    ) -> str:
        """Write data atomically; overwrite if the key exists. Returns the location."""
        location = self._build_location(namespace, content_hash, extension)
        target_path = self._get_full_path(location)
        temp_path: str | None = None
        try:
            temp_fd, temp_path = self._create_temp_file(target_path)
            os.close(temp_fd)
            async with aiofiles.open(temp_path, "wb") as f:
                await f.write(bytes(data))
            os.chmod(temp_path, 0o640)
            os.replace(temp_path, target_path)
            temp_path = None
        except StorageException:
            raise
        except OSError as e:
            raise StorageUploadError(location, str(e)) from e
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)
        logger.debug("Stored %d bytes at %s", len(data), location)
        return location

    async def get(self, location: str) -> bytes:
        """Return file content. Raises StorageNotFoundError if absent."""
        file_path = self._get_full_path(location)
        try:
            async with aiofiles.open(file_path, "rb") as f:
                return await f.read()
        except (FileNotFoundError, IsADirectoryError) as e:
            raise StorageNotFoundError(location) from e
        except OSError as e:
            raise StorageDownloadError(location, str(e)) from e

    async def delete(self, location: str) -> None:
        """Delete file; absent file is a no-op. Prunes empty namespace directories."""
        file_path = self._get_full_path(location)
        try:
            await aiofiles.os.remove(file_path)
        except FileNotFoundError:
            logger.debug("Delete of absent location %s ignored", location)
            return
        except OSError as e:
            raise StorageDeleteError(location, str(e)) from e
        parent = file_path.parent
        while parent != self.storage_root:
            try:
                if any(parent.iterdir()):
                    break
                parent.rmdir()
            except OSError:
                # Another writer repopulated the directory; leave it.
                break
            parent = parent.parent

    async def exists(self, location: str) -> bool:
        """Return True if file exists."""
        try:
            return self._get_full_path(location).is_file()
        except StoragePermissionError:
            return False
