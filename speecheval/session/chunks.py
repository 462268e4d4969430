from __future__ import annotations

from collections.abc import Iterator


def iter_byte_chunks(data: bytes, *, chunk_bytes: int) -> Iterator[bytes]:
    """Split `data` into `chunk_bytes` pieces; only the last may be short."""
    if chunk_bytes <= 0:
        raise ValueError("chunk_bytes must be > 0")
    for i in range(0, len(data), chunk_bytes):
        yield data[i : i + chunk_bytes]


__all__ = ["iter_byte_chunks"]
