"""Runtime configuration models."""

from __future__ import annotations

from dataclasses import dataclass

from cloud_hash_sdk.core.etag import DEFAULT_CHUNK_SIZE
from cloud_hash_sdk.core.errors import InvalidConfigError


@dataclass(frozen=True)
class HashConfig:
    # 8 MiB matches the part size the ETag convention assumes.
    etag_chunk_size: int = DEFAULT_CHUNK_SIZE

    def validate(self) -> None:
        if self.etag_chunk_size <= 0:
            raise InvalidConfigError(
                f"etag_chunk_size must be positive, got {self.etag_chunk_size}"
            )
