"""Tests for DigestVerifier and digest normalization."""

from __future__ import annotations

import hashlib
import logging

import pytest

from cloud_hash_sdk.computer import DefaultHashComputer
from cloud_hash_sdk.config import HashConfig
from cloud_hash_sdk.core.errors import DigestMismatchError
from cloud_hash_sdk.core.types import HashKind
from cloud_hash_sdk.verifier import DigestVerifier, normalize_digest

CONTENT = b"123456789"


def test_normalize_hex_strips_quotes_and_case():
    assert normalize_digest("etag", ' "ABCDEF-2" ') == "abcdef-2"
    assert normalize_digest(HashKind.CRC32C, "E3069283") == "e3069283"


def test_normalize_base64_keeps_case():
    assert normalize_digest(HashKind.GCS_CRC32C, " 4waSgw==\n") == "4waSgw=="


def test_matches_quoted_etag(verifier):
    md5 = hashlib.md5(CONTENT).hexdigest()
    assert verifier.matches(HashKind.ETAG, CONTENT, f'"{md5.upper()}"')


def test_matches_gcs_is_case_sensitive(verifier):
    assert verifier.matches(HashKind.GCS_CRC32C, CONTENT, "4waSgw==")
    assert not verifier.matches(HashKind.GCS_CRC32C, CONTENT, "4WASGW==")


def test_verify_returns_digest(verifier):
    assert verifier.verify("crc32c", CONTENT, "E3069283") == "e3069283"


def test_verify_mismatch_raises(verifier, caplog):
    with caplog.at_level(logging.WARNING, logger="cloud_hash_sdk.verifier"):
        with pytest.raises(DigestMismatchError) as exc_info:
            verifier.verify(HashKind.MD5, CONTENT, "0" * 32)
    err = exc_info.value
    assert err.kind == "md5"
    assert err.expected == "0" * 32
    assert err.actual == hashlib.md5(CONTENT).hexdigest()
    assert "mismatch" in caplog.text


def test_verifier_uses_injected_computer():
    small = DefaultHashComputer(HashConfig(etag_chunk_size=4))
    expected = small.compute(HashKind.ETAG, b"abcdefghij")
    verifier = DigestVerifier(small)
    assert verifier.verify(HashKind.ETAG, b"abcdefghij", expected).endswith("-3")
    # The default 8 MiB part size would see a single part here.
    assert not DigestVerifier().matches(HashKind.ETAG, b"abcdefghij", expected)


class RecordingComputer:
    def __init__(self, digest: str):
        self.digest = digest
        self.calls: list[tuple] = []

    def compute(self, kind, content):
        self.calls.append((kind, content))
        return self.digest


def test_verifier_delegates_to_protocol_implementation():
    fake = RecordingComputer("abc")
    verifier = DigestVerifier(fake)
    assert verifier.matches("sha256", b"data", "ABC")
    assert fake.calls == [("sha256", b"data")]
