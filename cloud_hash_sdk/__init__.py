"""Cloud Hash SDK: digests that match cloud object-store conventions."""

from cloud_hash_sdk.computer import DefaultHashComputer, HashComputer, compute
from cloud_hash_sdk.config import HashConfig
from cloud_hash_sdk.core.errors import (
    CloudHashError,
    DigestMismatchError,
    InvalidConfigError,
    UnknownHashKindError,
)
from cloud_hash_sdk.core.types import DigestResult, HashKind
from cloud_hash_sdk.verifier import DigestVerifier, normalize_digest

__all__ = [
    "CloudHashError",
    "DefaultHashComputer",
    "DigestMismatchError",
    "DigestResult",
    "DigestVerifier",
    "HashComputer",
    "HashConfig",
    "HashKind",
    "InvalidConfigError",
    "UnknownHashKindError",
    "compute",
    "normalize_digest",
]
