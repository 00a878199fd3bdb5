"""Shared test fixtures."""

from __future__ import annotations

import pytest

from cloud_hash_sdk.computer import DefaultHashComputer
from cloud_hash_sdk.config import HashConfig
from cloud_hash_sdk.verifier import DigestVerifier


class FixedCrc:
    """Stands in for google_crc32c.value and records what it was given."""

    def __init__(self, value: int):
        self._value = value
        self.calls: list[bytes] = []

    def __call__(self, data: bytes) -> int:
        self.calls.append(data)
        return self._value


@pytest.fixture
def computer():
    return DefaultHashComputer()


@pytest.fixture
def small_chunk_computer():
    return DefaultHashComputer(HashConfig(etag_chunk_size=4))


@pytest.fixture
def verifier(computer):
    return DigestVerifier(computer)


@pytest.fixture
def fixed_crc(monkeypatch):
    def _install(value: int) -> FixedCrc:
        fake = FixedCrc(value)
        monkeypatch.setattr("google_crc32c.value", fake)
        return fake

    return _install
