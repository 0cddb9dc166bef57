"""Tests for Settings validation and defaults."""

import pytest
from pydantic import ValidationError

from apex.core.config import Settings, get_settings
from apex.infrastructure.external.storage import LocalContentStore, StorageFactory


def test_defaults() -> None:
    s = Settings(_env_file=None)
    assert s.storage_backend == "local"
    assert s.max_upload_size == 100 * 1024 * 1024
    assert s.max_report_content_length == 1_000_000
    assert s.extraction_enabled is True


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORAGE_ROOT", "/tmp/apex-store")
    monkeypatch.setenv("MAX_UPLOAD_SIZE", "1024")
    s = get_settings()
    assert s.storage_root == "/tmp/apex-store"
    assert s.max_upload_size == 1024


def test_unknown_backend_rejected() -> None:
    with pytest.raises(ValidationError, match="storage_backend"):
        Settings(_env_file=None, storage_backend="s3")


def test_empty_storage_root_rejected() -> None:
    with pytest.raises(ValidationError, match="STORAGE_ROOT"):
        Settings(_env_file=None, storage_root="")


def test_non_positive_limit_rejected() -> None:
    with pytest.raises(ValidationError, match="max_upload_size"):
        Settings(_env_file=None, max_upload_size=0)


def test_get_settings_cached() -> None:
    assert get_settings() is get_settings()


def test_storage_factory_builds_local_store(tmp_path) -> None:
    settings = Settings(_env_file=None, storage_root=str(tmp_path / "blobs"))
    store = StorageFactory.create_content_store(settings)
    assert isinstance(store, LocalContentStore)
    assert store.storage_root == (tmp_path / "blobs").resolve()
