"""Core module: hash kinds, primitives, errors."""

from cloud_hash_sdk.core.errors import (
    CloudHashError,
    DigestMismatchError,
    InvalidConfigError,
    UnknownHashKindError,
)
from cloud_hash_sdk.core.types import DigestResult, HashKind

__all__ = [
    "CloudHashError",
    "DigestMismatchError",
    "DigestResult",
    "HashKind",
    "InvalidConfigError",
    "UnknownHashKindError",
]
