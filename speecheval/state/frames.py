"""Transport frames as seen by the session layer (dataclasses only)."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class FrameKind(enum.Enum):
    TEXT = "text"
    BINARY = "binary"
    # Read failed but the connection may still be usable.
    ERROR = "error"
    # Connection is definitively closed; every later read returns this too.
    CLOSED = "closed"


@dataclass(frozen=True, slots=True)
class Frame:
    kind: FrameKind
    data: str | bytes | None = None
    error: str | None = None


__all__ = ["Frame", "FrameKind"]
