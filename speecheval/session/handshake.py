"""Start handshake: send the start frame, require a started ack back."""

from __future__ import annotations

import logging

from websockets.exceptions import WebSocketException

from speecheval.errors import HandshakeError
from speecheval.state.frames import FrameKind
from speecheval.state.settings import EvalSettings
from speecheval.protocol.parser import parse_inbound
from speecheval.state.session import EvaluationSession
from speecheval.transport.connection import SessionTransport
from speecheval.protocol.messages import InboundKind, StartRequest, StartedResponse

logger = logging.getLogger(__name__)


async def send_start(transport: SessionTransport, evaluation: EvalSettings) -> None:
    try:
        await transport.send_structured(StartRequest.from_settings(evaluation).to_wire())
    except (WebSocketException, OSError, RuntimeError) as exc:
        raise HandshakeError(f"send start message: {type(exc).__name__}: {exc}") from exc


async def await_started(transport: SessionTransport, evaluation: EvalSettings) -> EvaluationSession:
    frame = await transport.receive()
    if frame.kind in (FrameKind.ERROR, FrameKind.CLOSED):
        raise HandshakeError(f"read started message: {frame.error}")
    if frame.kind is not FrameKind.TEXT:
        raise HandshakeError(f"expected a text frame, got {frame.kind.value}", frame=repr(frame.data)[:512])

    msg = parse_inbound(frame.data)
    if msg.kind is not InboundKind.STARTED:
        raise HandshakeError(f"expected ack 'started', got {msg.ack!r}", frame=msg.raw)

    logger.debug("started ack: %s", msg.raw)
    started = StartedResponse.from_message(msg)
    return EvaluationSession(
        eval_id=started.eval_id,
        language=evaluation.language,
        mode=evaluation.mode,
        ref_text=evaluation.ref_text,
        audio_format=evaluation.audio_format,
        sample_rate=evaluation.sample_rate,
    )


async def start_session(transport: SessionTransport, evaluation: EvalSettings) -> EvaluationSession:
    await send_start(transport, evaluation)
    return await await_started(transport, evaluation)


__all__ = ["await_started", "send_start", "start_session"]
