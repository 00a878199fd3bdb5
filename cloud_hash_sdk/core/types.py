"""Core data types: hash kind selectors and digest results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cloud_hash_sdk.core.errors import UnknownHashKindError


class HashKind(str, Enum):
    # CRC-32C as unpadded hex
    CRC32C = "crc32c"
    # GCS flavour: big-endian 4-byte frame, base64
    GCS_CRC32C = "gcs_crc32c"
    # S3 multipart-upload ETag
    ETAG = "etag"
    MD5 = "md5"
    SHA256 = "sha256"

    @classmethod
    def parse(cls, name: HashKind | str) -> HashKind:
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            supported = ", ".join(k.value for k in cls)
            raise UnknownHashKindError(
                f"Unknown hash kind {name!r} (expected one of: {supported})"
            ) from None


# Kinds whose digest is hex text; comparisons on these ignore case.
HEX_KINDS = frozenset({HashKind.CRC32C, HashKind.ETAG, HashKind.MD5, HashKind.SHA256})


@dataclass(frozen=True)
class DigestResult:
    kind: HashKind
    digest: str
    content_length: int
    part_count: int = 1
