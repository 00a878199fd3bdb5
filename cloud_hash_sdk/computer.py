"""HashComputer: provider-compatible digests of in-memory content."""

from __future__ import annotations

import logging
from typing import Protocol

from cloud_hash_sdk.config import HashConfig
from cloud_hash_sdk.core.etag import multipart_etag, part_count
from cloud_hash_sdk.core.primitives import (
    crc32c_hex,
    crc32c_value,
    gcs_crc32c_base64,
    md5_hex,
    sha256_hex,
)
from cloud_hash_sdk.core.types import DigestResult, HashKind

logger = logging.getLogger(__name__)

# Any object exporting the buffer protocol is accepted, not only these.
Content = bytes | bytearray | memoryview | str


class HashComputer(Protocol):
    def compute(self, kind: HashKind | str, content: Content) -> str: ...


def _as_bytes(content: Content) -> bytes | memoryview:
    if isinstance(content, str):
        return content.encode("utf-8")
    if isinstance(content, bytes):
        return content
    try:
        view = memoryview(content)
    except TypeError:
        raise TypeError(
            f"content must be bytes-like or str, not {type(content).__name__}"
        ) from None
    if not view.c_contiguous:
        return view.tobytes()
    return view.cast("B")


class DefaultHashComputer:
    """Stateless dispatcher from ``HashKind`` to digest text."""

    def __init__(self, config: HashConfig | None = None) -> None:
        self._config = config or HashConfig()
        self._config.validate()

    @property
    def config(self) -> HashConfig:
        return self._config

    def compute(self, kind: HashKind | str, content: Content) -> str:
        return self.compute_result(kind, content).digest

    def compute_result(self, kind: HashKind | str, content: Content) -> DigestResult:
        kind = HashKind.parse(kind)
        data = _as_bytes(content)
        parts = 1

        match kind:
            case HashKind.CRC32C:
                digest = crc32c_hex(crc32c_value(data))
            case HashKind.GCS_CRC32C:
                digest = gcs_crc32c_base64(crc32c_value(data))
            case HashKind.ETAG:
                chunk_size = self._config.etag_chunk_size
                parts = part_count(len(data), chunk_size)
                digest = multipart_etag(data, chunk_size)
            case HashKind.MD5:
                digest = md5_hex(data)
            case HashKind.SHA256:
                digest = sha256_hex(data)

        logger.debug(
            "Computed %s digest over %d bytes (%d part(s))", kind.value, len(data), parts
        )
        return DigestResult(
            kind=kind, digest=digest, content_length=len(data), part_count=parts
        )


_default_computer = DefaultHashComputer()


def compute(kind: HashKind | str, content: Content) -> str:
    """Digest ``content`` the way the provider behind ``kind`` reports it."""
    return _default_computer.compute(kind, content)
