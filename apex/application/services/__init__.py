"""Application services shared by use cases."""

from apex.application.services.hash_service import (
    ContentHashService,
    HashAlgorithm,
    SHA256Algorithm,
    SHA512Algorithm,
)

__all__ = [
    "ContentHashService",
    "HashAlgorithm",
    "SHA256Algorithm",
    "SHA512Algorithm",
]
