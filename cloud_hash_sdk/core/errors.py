"""Exception hierarchy for the Cloud Hash SDK."""

from __future__ import annotations


class CloudHashError(Exception):
    """SDK base exception."""


class UnknownHashKindError(CloudHashError, ValueError):
    """Hash kind name is not one of the supported selectors."""


class InvalidConfigError(CloudHashError):
    """Configuration value is out of range."""


class DigestMismatchError(CloudHashError):
    """Computed digest differs from the expected one."""

    def __init__(self, kind: str, expected: str, actual: str) -> None:
        super().__init__(f"{kind} digest mismatch: expected {expected!r}, got {actual!r}")
        self.kind = kind
        self.expected = expected
        self.actual = actual
