"""Shared error types for the speech-eval client.

Components raise these; only the top-level run in `speecheval.cli` turns
them into an exit code.
"""

from __future__ import annotations

from dataclasses import dataclass


class SpeechEvalError(Exception):
    """Base class for fatal setup failures."""


@dataclass(frozen=True, slots=True)
class TokenError(SpeechEvalError):
    """Raised when the token endpoint fails or rejects the signed request."""

    reason: str
    body: str = ""

    def __str__(self) -> str:
        return f"get token failed: {self.reason}" + (f" body={self.body}" if self.body else "")


@dataclass(frozen=True, slots=True)
class ConnectError(SpeechEvalError):
    """Raised when the streaming connection upgrade is rejected or fails."""

    url: str
    reason: str
    status: int | None = None

    def __str__(self) -> str:
        status = f" status={self.status}" if self.status is not None else ""
        return f"dial {self.url} failed:{status} {self.reason}"


@dataclass(frozen=True, slots=True)
class HandshakeError(SpeechEvalError):
    """Raised when the first inbound frame is not a started acknowledgment."""

    reason: str
    frame: str = ""

    def __str__(self) -> str:
        return f"handshake failed: {self.reason}" + (f" message={self.frame}" if self.frame else "")


@dataclass(frozen=True, slots=True)
class ConfigError(SpeechEvalError):
    """Raised when startup configuration is missing or invalid."""

    reason: str

    def __str__(self) -> str:
        return self.reason


__all__ = ["ConfigError", "ConnectError", "HandshakeError", "SpeechEvalError", "TokenError"]
