"""Evaluation session state (dataclasses only)."""

from __future__ import annotations

import enum
from typing import Any
from dataclasses import field, dataclass


class SessionPhase(enum.Enum):
    CONNECTING = "connecting"
    AWAITING_START = "awaiting_start"
    STREAMING = "streaming"
    DRAINING = "draining"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class EvaluationSession:
    """Created on receipt of the started ack; eval_id correlates every result."""

    eval_id: str
    language: str
    mode: str
    ref_text: str
    audio_format: str
    sample_rate: int


@dataclass(slots=True)
class SessionOutcome:
    eval_id: str
    partial_results: int = 0
    final_result: dict[str, Any] | None = None
    warnings: list[dict[str, Any]] = field(default_factory=list)
    errors: list[dict[str, Any]] = field(default_factory=list)
    read_errors: int = 0
    # "completed" when the server sent an untagged/unknown frame, "closed" on connection close.
    completed_by: str | None = None


@dataclass(slots=True)
class StreamReport:
    chunks_sent: int = 0
    bytes_sent: int = 0
    stop_sent: bool = False
    error: str | None = None


__all__ = ["EvaluationSession", "SessionOutcome", "SessionPhase", "StreamReport"]
