"""WebSocket transport configuration and constants."""

from __future__ import annotations

ENV_SPEECHEVAL_SECURE: str = "SPEECHEVAL_SECURE"
DEFAULT_SECURE: bool = True

ENV_WS_OPEN_TIMEOUT_S: str = "SPEECHEVAL_WS_OPEN_TIMEOUT_S"
DEFAULT_WS_OPEN_TIMEOUT_S: float = 10.0

# Maximum inbound message size (bytes). Final results can carry per-phoneme detail.
ENV_WS_MAX_MESSAGE_BYTES: str = "SPEECHEVAL_WS_MAX_MESSAGE_BYTES"
DEFAULT_WS_MAX_MESSAGE_BYTES: int = 32 * 1024 * 1024

# No client pings: a live session has no liveness timeout.
WS_PING_INTERVAL_S: float | None = None
WS_PING_TIMEOUT_S: float | None = None

WS_CLOSE_CODE_NORMAL: int = 1000

__all__ = [
    "DEFAULT_SECURE",
    "DEFAULT_WS_MAX_MESSAGE_BYTES",
    "DEFAULT_WS_OPEN_TIMEOUT_S",
    "ENV_SPEECHEVAL_SECURE",
    "ENV_WS_MAX_MESSAGE_BYTES",
    "ENV_WS_OPEN_TIMEOUT_S",
    "WS_CLOSE_CODE_NORMAL",
    "WS_PING_INTERVAL_S",
    "WS_PING_TIMEOUT_S",
]
