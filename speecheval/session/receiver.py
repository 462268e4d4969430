"""Receive loop: classify inbound frames until the server signals completion."""

from __future__ import annotations

import logging

from speecheval.state.frames import Frame, FrameKind
from speecheval.protocol.parser import parse_inbound
from speecheval.state.session import SessionOutcome
from speecheval.transport.connection import SessionTransport
from speecheval.protocol.messages import InboundKind, ResultFrame, InboundMessage

logger = logging.getLogger(__name__)

COMPLETED_BY_SERVER = "completed"
COMPLETED_BY_CLOSE = "closed"


class ResultReceiver:
    """Track warnings/errors/results for one session.

    Server `warning` and `error` frames are reported only; the loop keeps
    going. Only a frame with no recognized tag ends the session. Transient
    read errors are logged and the loop reads again; a definitively closed
    connection also ends it, since every later read would fail the same way.
    """

    def __init__(self, eval_id: str) -> None:
        self.outcome = SessionOutcome(eval_id=eval_id)

    def handle_message(self, msg: InboundMessage) -> bool:
        """Return True to keep receiving."""
        if msg.kind is InboundKind.WARNING:
            self.outcome.warnings.append(msg.body)
            logger.warning("EvaluationWarning --> message:%s", msg.raw)
            return True

        if msg.kind is InboundKind.ERROR:
            self.outcome.errors.append(msg.body)
            logger.error("EvaluationError --> message:%s", msg.raw)
            return True

        if msg.kind is InboundKind.RESULT:
            result = ResultFrame.from_message(msg)
            if result.eof:
                self.outcome.final_result = result.body
                logger.info("final result ===> %s", msg.raw)
            else:
                self.outcome.partial_results += 1
                logger.info("realtime result ===> %s", msg.raw)
            return True

        # STARTED again or anything untagged: the server is done.
        self.outcome.completed_by = COMPLETED_BY_SERVER
        logger.debug("session completed (ack=%r)", msg.ack)
        return False

    def handle_frame(self, frame: Frame) -> bool:
        if frame.kind is FrameKind.CLOSED:
            self.outcome.completed_by = COMPLETED_BY_CLOSE
            logger.warning("ReadMessageErr: %s", frame.error)
            return False
        if frame.kind is FrameKind.ERROR:
            self.outcome.read_errors += 1
            logger.warning("ReadMessageErr: %s", frame.error)
            return True
        return self.handle_message(parse_inbound(frame.data))

    async def run(self, transport: SessionTransport) -> SessionOutcome:
        while True:
            frame = await transport.receive()
            if not self.handle_frame(frame):
                return self.outcome


__all__ = ["COMPLETED_BY_CLOSE", "COMPLETED_BY_SERVER", "ResultReceiver"]
