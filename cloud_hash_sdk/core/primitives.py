"""Checksum primitives and their provider-specific text renderings."""

from __future__ import annotations

import base64
import hashlib

import google_crc32c

_UINT32_MAX = 0xFFFFFFFF


def md5_hex(data: bytes | memoryview) -> str:
    return hashlib.md5(data).hexdigest()


def sha256_hex(data: bytes | memoryview) -> str:
    return hashlib.sha256(data).hexdigest()


def crc32c_value(data: bytes | memoryview) -> int:
    """Unsigned 32-bit CRC-32C (Castagnoli) of ``data``."""
    return google_crc32c.value(bytes(data)) & _UINT32_MAX


def _check_uint32(value: int) -> None:
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"CRC-32C value out of range: {value}")


def crc32c_hex(value: int) -> str:
    """Lowercase hex with no zero padding: 10 renders as ``"a"``."""
    _check_uint32(value)
    return format(value, "x")


def gcs_crc32c_base64(value: int) -> str:
    """Base64 of the value packed as 4 big-endian bytes, as GCS reports it."""
    _check_uint32(value)
    return base64.b64encode(value.to_bytes(4, "big")).decode("ascii")
