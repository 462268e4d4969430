"""Audio streaming driver: paced binary chunks followed by the stop frame."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Awaitable

from websockets.exceptions import WebSocketException

from speecheval.state.session import StreamReport
from speecheval.state.settings import StreamSettings
from speecheval.protocol.messages import StopRequest
from speecheval.transport.connection import SessionTransport

from .chunks import iter_byte_chunks

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]

_WRITE_ERRORS = (WebSocketException, OSError, RuntimeError)


class AudioStreamer:
    """Send an audio source as binary frames at roughly real-time cadence.

    With pacing enabled every chunk is preceded by a fixed sleep, which is
    what the service expects from live microphone capture.
    """

    def __init__(
        self,
        transport: SessionTransport,
        settings: StreamSettings,
        *,
        sleep: SleepFn | None = None,
    ) -> None:
        self.transport = transport
        self.settings = settings
        self._sleep = sleep or asyncio.sleep

    async def open_source(self) -> Iterable[bytes]:
        """Load the whole audio file off the event loop, then split it."""
        data = await asyncio.to_thread(self.settings.audio_path.read_bytes)
        return iter_byte_chunks(data, chunk_bytes=self.settings.chunk_bytes)

    async def stream(self, source: Iterable[bytes] | None = None) -> StreamReport:
        report = StreamReport()
        if source is None:
            try:
                source = await self.open_source()
            except OSError as exc:
                report.error = f"read audio: {exc}"
                logger.error("%s", report.error)
                return report

        for chunk in source:
            if not chunk:
                continue
            if self.settings.pacing_enabled:
                await self._sleep(self.settings.pacing_interval_s)
            try:
                await self.transport.send_binary(chunk)
            except _WRITE_ERRORS as exc:
                report.error = f"write message: {type(exc).__name__}: {exc}"
                logger.error("%s", report.error)
                return report
            report.chunks_sent += 1
            report.bytes_sent += len(chunk)

        try:
            await self.transport.send_structured(StopRequest().to_wire())
        except _WRITE_ERRORS as exc:
            report.error = f"write stop message: {type(exc).__name__}: {exc}"
            logger.error("%s", report.error)
            return report
        report.stop_sent = True
        logger.debug("audio sent: %d chunks, %d bytes", report.chunks_sent, report.bytes_sent)
        return report


__all__ = ["AudioStreamer"]
