"""Session transport over a single WebSocket connection.

The writer task only calls `send_*`, the reader task only calls `receive`;
websockets supports one concurrent reader alongside concurrent writers.
"""

from __future__ import annotations

import socket as _sock
import logging
from typing import Any
from contextlib import suppress

import orjson
import websockets
from websockets.exceptions import InvalidStatus, ConnectionClosed, InvalidHandshake, WebSocketException

from speecheval.errors import ConnectError
from speecheval.state.frames import Frame, FrameKind
from speecheval.config.auth import BEARER_PREFIX, AUTHORIZATION_HEADER
from speecheval.config.websocket import (
    WS_PING_TIMEOUT_S,
    WS_PING_INTERVAL_S,
    WS_CLOSE_CODE_NORMAL,
    DEFAULT_WS_OPEN_TIMEOUT_S,
    DEFAULT_WS_MAX_MESSAGE_BYTES,
)

logger = logging.getLogger(__name__)


def auth_headers(token: str) -> list[tuple[str, str]]:
    return [(AUTHORIZATION_HEADER, f"{BEARER_PREFIX} {token}")]


def get_ws_options(
    token: str,
    *,
    open_timeout_s: float = DEFAULT_WS_OPEN_TIMEOUT_S,
    max_message_bytes: int = DEFAULT_WS_MAX_MESSAGE_BYTES,
) -> dict[str, Any]:
    return {
        "additional_headers": auth_headers(token),
        "open_timeout": open_timeout_s,
        "ping_interval": WS_PING_INTERVAL_S,
        "ping_timeout": WS_PING_TIMEOUT_S,
        "max_size": max_message_bytes,
    }


def enable_tcp_nodelay(ws) -> None:
    """Best-effort enable TCP_NODELAY so small audio frames are not delayed."""
    transport = getattr(ws, "transport", None)
    if transport is not None:
        sock = transport.get_extra_info("socket")
        if sock is not None:
            with suppress(Exception):
                sock.setsockopt(_sock.IPPROTO_TCP, _sock.TCP_NODELAY, 1)


class SessionTransport:
    """Structured/binary send and frame receive over one open connection."""

    def __init__(self, ws) -> None:
        self._ws = ws

    @classmethod
    async def connect(
        cls,
        url: str,
        token: str,
        *,
        open_timeout_s: float = DEFAULT_WS_OPEN_TIMEOUT_S,
        max_message_bytes: int = DEFAULT_WS_MAX_MESSAGE_BYTES,
    ) -> SessionTransport:
        options = get_ws_options(token, open_timeout_s=open_timeout_s, max_message_bytes=max_message_bytes)
        try:
            ws = await websockets.connect(url, **options)
        except InvalidStatus as exc:
            raise ConnectError(url, "upgrade rejected", status=exc.response.status_code) from exc
        except (InvalidHandshake, OSError, TimeoutError) as exc:
            raise ConnectError(url, f"{type(exc).__name__}: {exc}") from exc
        enable_tcp_nodelay(ws)
        logger.debug("connected to %s", url)
        return cls(ws)

    async def send_structured(self, message: dict[str, Any]) -> None:
        await self._ws.send(orjson.dumps(message).decode("utf-8"))

    async def send_binary(self, chunk: bytes) -> None:
        await self._ws.send(bytes(chunk))

    async def receive(self) -> Frame:
        """Block until the next frame; never raises for read failures."""
        try:
            data = await self._ws.recv()
        except ConnectionClosed as exc:
            return Frame(FrameKind.CLOSED, error=f"connection closed code={_close_code(exc)} reason={_close_reason(exc)}")
        except (WebSocketException, OSError, RuntimeError) as exc:
            return Frame(FrameKind.ERROR, error=f"{type(exc).__name__}: {exc}")
        if isinstance(data, bytes | bytearray | memoryview):
            return Frame(FrameKind.BINARY, data=bytes(data))
        return Frame(FrameKind.TEXT, data=data)

    async def close(self) -> None:
        with suppress(Exception):
            await self._ws.close(code=WS_CLOSE_CODE_NORMAL)

    async def __aenter__(self) -> SessionTransport:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def _close_code(exc: ConnectionClosed) -> int | None:
    rcvd = getattr(exc, "rcvd", None)
    return rcvd.code if rcvd is not None else None


def _close_reason(exc: ConnectionClosed) -> str:
    rcvd = getattr(exc, "rcvd", None)
    return rcvd.reason if rcvd is not None else ""


__all__ = ["SessionTransport", "auth_headers", "enable_tcp_nodelay", "get_ws_options"]
