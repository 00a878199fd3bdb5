"""Multipart-upload ETag emulation.

An object store that accepted a multipart upload reports an ETag that is
not the MD5 of the object: it is the MD5 of the concatenated hex MD5s of
each part, followed by ``-<part count>``. A single-part upload reports the
plain MD5. Reproducing that lets a caller check a transfer without asking
the store how it computed the value.
"""

from __future__ import annotations

from collections.abc import Iterator

from cloud_hash_sdk.core.errors import InvalidConfigError
from cloud_hash_sdk.core.primitives import md5_hex

DEFAULT_CHUNK_SIZE = 8 * 1024 * 1024


def _check_chunk_size(chunk_size: int) -> None:
    if chunk_size <= 0:
        raise InvalidConfigError(f"ETag chunk size must be positive, got {chunk_size}")


def part_count(length: int, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Number of parts ``length`` bytes split into; empty content is one part."""
    _check_chunk_size(chunk_size)
    return max(1, -(-length // chunk_size))


def iter_parts(
    content: bytes | memoryview, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[memoryview]:
    _check_chunk_size(chunk_size)
    view = memoryview(content)
    for start in range(0, len(view), chunk_size):
        yield view[start:start + chunk_size]


def multipart_etag(
    content: bytes | memoryview, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> str:
    parts = part_count(len(content), chunk_size)
    if parts == 1:
        return md5_hex(content)
    # The per-part digests are joined as text, not decoded back to bytes.
    joined = "".join(md5_hex(part) for part in iter_parts(content, chunk_size))
    return f"{md5_hex(joined.encode('ascii'))}-{parts}"
