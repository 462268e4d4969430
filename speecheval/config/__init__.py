"""Configuration module exports (constants and env names only)."""

from .protocol import PROTO_API
from .auth import TOKEN_SUCCESS_CODE
from .audio import DEFAULT_CHUNK_BYTES, DEFAULT_PACING_INTERVAL_S

__all__ = [
    "DEFAULT_CHUNK_BYTES",
    "DEFAULT_PACING_INTERVAL_S",
    "PROTO_API",
    "TOKEN_SUCCESS_CODE",
]
