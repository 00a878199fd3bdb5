"""Caller-side digest comparison.

Object stores report digests with cosmetic differences: S3 wraps ETags in
double quotes and some tools upper-case hex. Hex kinds are compared after
stripping those; base64 (``gcs_crc32c``) is case-sensitive and compared
verbatim apart from surrounding whitespace.
"""

from __future__ import annotations

import logging

from cloud_hash_sdk.computer import Content, DefaultHashComputer, HashComputer
from cloud_hash_sdk.core.errors import DigestMismatchError
from cloud_hash_sdk.core.types import HEX_KINDS, HashKind

logger = logging.getLogger(__name__)


def normalize_digest(kind: HashKind | str, digest: str) -> str:
    kind = HashKind.parse(kind)
    text = digest.strip()
    if kind in HEX_KINDS:
        return text.strip('"').lower()
    return text


class DigestVerifier:
    def __init__(self, computer: HashComputer | None = None) -> None:
        self._computer = computer or DefaultHashComputer()

    def matches(self, kind: HashKind | str, content: Content, expected: str) -> bool:
        actual = self._computer.compute(kind, content)
        return normalize_digest(kind, actual) == normalize_digest(kind, expected)

    def verify(self, kind: HashKind | str, content: Content, expected: str) -> str:
        """Return the computed digest, or raise ``DigestMismatchError``."""
        kind = HashKind.parse(kind)
        actual = self._computer.compute(kind, content)
        if normalize_digest(kind, actual) != normalize_digest(kind, expected):
            logger.warning(
                "%s digest mismatch: expected %s, computed %s", kind.value, expected, actual
            )
            raise DigestMismatchError(kind.value, expected, actual)
        return actual
