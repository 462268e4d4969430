"""Speech-eval wire protocol keys and values."""

from __future__ import annotations

# Envelope keys (client -> server)
PROTO_KEY_COMMON: str = "common"
PROTO_KEY_PAYLOAD: str = "payload"
PROTO_KEY_API: str = "api"
PROTO_KEY_CMD: str = "cmd"
PROTO_KEY_PARAMS: str = "params"
PROTO_KEY_REF_TEXT: str = "refText"
PROTO_KEY_MODE: str = "mode"
PROTO_KEY_LANG_TYPE: str = "langType"
PROTO_KEY_ATTACH_AUDIO_URL: str = "attachAudioUrl"
PROTO_KEY_FORMAT: str = "format"
PROTO_KEY_SAMPLE_RATE: str = "sampleRate"

# Envelope keys (server -> client)
PROTO_KEY_ACK: str = "ack"
PROTO_KEY_EVAL_ID: str = "evalId"
PROTO_KEY_EOF: str = "eof"

PROTO_API: str = "speecheval"

# Client commands
PROTO_CMD_START: str = "start"
PROTO_CMD_STOP: str = "stop"

# Server ack tags
PROTO_ACK_STARTED: str = "started"
PROTO_ACK_WARNING: str = "warning"
PROTO_ACK_ERROR: str = "error"
PROTO_ACK_RESULT: str = "result"

# eof == 1 marks the final result of a session.
PROTO_EOF_FINAL: int = 1

__all__ = [
    "PROTO_ACK_ERROR",
    "PROTO_ACK_RESULT",
    "PROTO_ACK_STARTED",
    "PROTO_ACK_WARNING",
    "PROTO_API",
    "PROTO_CMD_START",
    "PROTO_CMD_STOP",
    "PROTO_EOF_FINAL",
    "PROTO_KEY_ACK",
    "PROTO_KEY_API",
    "PROTO_KEY_ATTACH_AUDIO_URL",
    "PROTO_KEY_CMD",
    "PROTO_KEY_COMMON",
    "PROTO_KEY_EOF",
    "PROTO_KEY_EVAL_ID",
    "PROTO_KEY_FORMAT",
    "PROTO_KEY_LANG_TYPE",
    "PROTO_KEY_MODE",
    "PROTO_KEY_PARAMS",
    "PROTO_KEY_PAYLOAD",
    "PROTO_KEY_REF_TEXT",
    "PROTO_KEY_SAMPLE_RATE",
]
