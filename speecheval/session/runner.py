"""One evaluation run: token, connect, handshake, then reader and writer."""

from __future__ import annotations

import time
import asyncio
import logging
from typing import Any
from dataclasses import dataclass
from collections.abc import Callable, Iterable, Awaitable

from speecheval.auth.token import acquire_token
from speecheval.transport.urls import ws_url
from speecheval.state.settings import AppSettings
from speecheval.transport.connection import SessionTransport
from speecheval.state.session import (
    StreamReport,
    SessionPhase,
    SessionOutcome,
    EvaluationSession,
)

from .receiver import ResultReceiver
from .handshake import start_session
from .streamer import SleepFn, AudioStreamer

logger = logging.getLogger(__name__)

ConnectFn = Callable[..., Awaitable[SessionTransport]]


@dataclass(slots=True)
class SessionResult:
    session: EvaluationSession
    outcome: SessionOutcome
    report: StreamReport
    connect_elapsed_s: float = 0.0
    handshake_elapsed_s: float = 0.0
    session_elapsed_s: float = 0.0


class EvaluationSessionRunner:
    """Drive one session over an already-open transport.

    Connecting -> AwaitingStart -> Streaming -> Draining -> Completed. The
    start ack must arrive before any audio is sent; after that the writer
    and the reader run concurrently and the run ends once both finish.
    """

    def __init__(
        self,
        settings: AppSettings,
        *,
        sleep: SleepFn | None = None,
        source: Iterable[bytes] | None = None,
    ) -> None:
        self.settings = settings
        self.phase = SessionPhase.CONNECTING
        self.session: EvaluationSession | None = None
        self.handshake_elapsed_s: float = 0.0
        self._sleep = sleep
        self._source = source

    def _enter(self, phase: SessionPhase) -> None:
        if phase is self.phase:
            return
        logger.debug("session phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    async def run(self, transport: SessionTransport) -> tuple[EvaluationSession, SessionOutcome, StreamReport]:
        self._enter(SessionPhase.AWAITING_START)
        handshake_start = time.perf_counter()
        self.session = await start_session(transport, self.settings.evaluation)
        self.handshake_elapsed_s = time.perf_counter() - handshake_start
        logger.info("evalId: %s", self.session.eval_id)

        self._enter(SessionPhase.STREAMING)
        receiver = ResultReceiver(self.session.eval_id)
        streamer = AudioStreamer(transport, self.settings.stream, sleep=self._sleep)

        recv_task = asyncio.create_task(receiver.run(transport))
        recv_task.add_done_callback(lambda _t: self._enter(SessionPhase.DRAINING))
        send_task = asyncio.create_task(streamer.stream(self._source))

        try:
            outcome, report = await asyncio.gather(recv_task, send_task)
        except BaseException:
            for task in (recv_task, send_task):
                task.cancel()
            await asyncio.gather(recv_task, send_task, return_exceptions=True)
            raise

        self._enter(SessionPhase.COMPLETED)
        return self.session, outcome, report


async def run_evaluation(
    settings: AppSettings,
    *,
    http: Any | None = None,
    connect: ConnectFn | None = None,
    sleep: SleepFn | None = None,
    source: Iterable[bytes] | None = None,
) -> SessionResult:
    """Sequential setup (token, upgrade, handshake) then the concurrent phase.

    Raises `SpeechEvalError` subclasses for every fatal setup failure.
    """
    creds = settings.credentials
    transport_cfg = settings.transport
    evaluation = settings.evaluation
    connect = connect or SessionTransport.connect

    session_start = time.perf_counter()
    token = await asyncio.to_thread(
        acquire_token,
        creds,
        secure=transport_cfg.secure,
        timeout_s=transport_cfg.token_timeout_s,
        http=http,
    )

    url = ws_url(creds.host, evaluation.language, evaluation.mode, secure=transport_cfg.secure)
    transport = await connect(
        url,
        token,
        open_timeout_s=transport_cfg.open_timeout_s,
        max_message_bytes=transport_cfg.max_message_bytes,
    )
    connect_elapsed = time.perf_counter() - session_start

    runner = EvaluationSessionRunner(settings, sleep=sleep, source=source)
    async with transport:
        session, outcome, report = await runner.run(transport)

    result = SessionResult(
        session=session,
        outcome=outcome,
        report=report,
        connect_elapsed_s=connect_elapsed,
        handshake_elapsed_s=runner.handshake_elapsed_s,
        session_elapsed_s=time.perf_counter() - session_start,
    )
    logger.debug(
        "timing: connect=%.3fs handshake=%.3fs session=%.3fs",
        result.connect_elapsed_s,
        result.handshake_elapsed_s,
        result.session_elapsed_s,
    )
    return result


__all__ = ["EvaluationSessionRunner", "SessionResult", "run_evaluation"]
