"""
Transfer verification example
=============================

Shows how a data-movement step checks a payload against the digest a
cloud store reported for it:
- S3-style multipart ETag (quoted, with a part-count suffix)
- GCS-style base64 CRC-32C
- plain hex MD5 / SHA-256

Run:
    python examples/verify_transfer.py
"""

import logging

from cloud_hash_sdk import (
    DigestMismatchError,
    DigestVerifier,
    HashKind,
    compute,
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    payload = b"sample-object-" * (1024 * 1024)  # ~14 MiB, two ETag parts
    print(f"payload: {len(payload)} bytes")

    for kind in HashKind:
        print(f"{kind.value:>10}: {compute(kind, payload)}")

    verifier = DigestVerifier()

    reported_etag = f'"{compute(HashKind.ETAG, payload)}"'
    print("etag ok:", verifier.matches(HashKind.ETAG, payload, reported_etag))

    reported_crc = compute(HashKind.GCS_CRC32C, payload)
    print("gcs crc32c ok:", verifier.matches("gcs_crc32c", payload, reported_crc))

    corrupted = payload[:-1] + b"!"
    try:
        verifier.verify(HashKind.GCS_CRC32C, corrupted, reported_crc)
    except DigestMismatchError as exc:
        print("detected corruption:", exc)


if __name__ == "__main__":
    main()
