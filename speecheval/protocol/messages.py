"""Typed speech-eval frames and their JSON shapes.

Outbound frames build plain dicts with the exact wire field names; the
transport serializes them. Inbound frames are classified by their `ack` tag.
"""

from __future__ import annotations

import enum
from typing import Any
from dataclasses import field, dataclass

from speecheval.state.settings import EvalSettings
from speecheval.config.protocol import (
    PROTO_API,
    PROTO_KEY_ACK,
    PROTO_KEY_API,
    PROTO_KEY_CMD,
    PROTO_KEY_EOF,
    PROTO_ACK_ERROR,
    PROTO_CMD_START,
    PROTO_CMD_STOP,
    PROTO_EOF_FINAL,
    PROTO_KEY_MODE,
    PROTO_ACK_RESULT,
    PROTO_KEY_COMMON,
    PROTO_KEY_FORMAT,
    PROTO_KEY_PARAMS,
    PROTO_ACK_STARTED,
    PROTO_ACK_WARNING,
    PROTO_KEY_EVAL_ID,
    PROTO_KEY_PAYLOAD,
    PROTO_KEY_REF_TEXT,
    PROTO_KEY_LANG_TYPE,
    PROTO_KEY_SAMPLE_RATE,
    PROTO_KEY_ATTACH_AUDIO_URL,
)


class InboundKind(enum.Enum):
    STARTED = PROTO_ACK_STARTED
    WARNING = PROTO_ACK_WARNING
    ERROR = PROTO_ACK_ERROR
    RESULT = PROTO_ACK_RESULT
    # Anything else, including a missing ack: the server is done with the session.
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class StartRequest:
    ref_text: str
    mode: str
    language: str
    audio_format: str
    sample_rate: int
    attach_audio_url: bool = True

    @classmethod
    def from_settings(cls, evaluation: EvalSettings) -> StartRequest:
        return cls(
            ref_text=evaluation.ref_text,
            mode=evaluation.mode,
            language=evaluation.language,
            audio_format=evaluation.audio_format,
            sample_rate=evaluation.sample_rate,
            attach_audio_url=evaluation.attach_audio_url,
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            PROTO_KEY_COMMON: {PROTO_KEY_API: PROTO_API, PROTO_KEY_CMD: PROTO_CMD_START},
            PROTO_KEY_PAYLOAD: {
                PROTO_KEY_PARAMS: {PROTO_KEY_REF_TEXT: self.ref_text, PROTO_KEY_MODE: self.mode},
                PROTO_KEY_LANG_TYPE: self.language,
                PROTO_KEY_ATTACH_AUDIO_URL: self.attach_audio_url,
                PROTO_KEY_FORMAT: self.audio_format,
                PROTO_KEY_SAMPLE_RATE: self.sample_rate,
            },
        }


@dataclass(frozen=True, slots=True)
class StopRequest:
    def to_wire(self) -> dict[str, Any]:
        return {PROTO_KEY_COMMON: {PROTO_KEY_CMD: PROTO_CMD_STOP, PROTO_KEY_API: PROTO_API}}


@dataclass(frozen=True, slots=True)
class InboundMessage:
    kind: InboundKind
    ack: str | None
    body: dict[str, Any] = field(default_factory=dict)
    raw: str = ""


@dataclass(frozen=True, slots=True)
class StartedResponse:
    eval_id: str

    @classmethod
    def from_message(cls, msg: InboundMessage) -> StartedResponse:
        eval_id = msg.body.get(PROTO_KEY_EVAL_ID)
        return cls(eval_id="" if eval_id is None else str(eval_id))


@dataclass(frozen=True, slots=True)
class ResultFrame:
    eof: bool
    body: dict[str, Any]

    @classmethod
    def from_message(cls, msg: InboundMessage) -> ResultFrame:
        return cls(eof=_eof_flag(msg.body.get(PROTO_KEY_EOF)) == PROTO_EOF_FINAL, body=msg.body)


def classify_ack(ack: Any) -> InboundKind:
    if not isinstance(ack, str):
        return InboundKind.OTHER
    try:
        return InboundKind(ack)
    except ValueError:
        return InboundKind.OTHER


def _eof_flag(value: Any) -> int:
    # 1, 1.0, "1" and true all mean final.
    if isinstance(value, bool):
        return int(value)
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


__all__ = [
    "InboundKind",
    "InboundMessage",
    "ResultFrame",
    "StartRequest",
    "StartedResponse",
    "StopRequest",
    "classify_ack",
]
