from .frames import Frame, FrameKind
from .settings import (
    AppSettings,
    Credentials,
    EvalSettings,
    StreamSettings,
    TransportSettings,
)
from .session import StreamReport, SessionPhase, SessionOutcome, EvaluationSession

__all__ = [
    "AppSettings",
    "Credentials",
    "EvalSettings",
    "EvaluationSession",
    "Frame",
    "FrameKind",
    "SessionOutcome",
    "SessionPhase",
    "StreamReport",
    "StreamSettings",
    "TransportSettings",
]
