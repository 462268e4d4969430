from __future__ import annotations

import pytest

from speecheval.errors import HandshakeError
from speecheval.state.frames import Frame, FrameKind
from speecheval.session.handshake import start_session
from tests.fakes import ScriptedTransport, text_frame


@pytest.mark.asyncio
async def test_start_session_records_eval_id(settings) -> None:
    transport = ScriptedTransport([text_frame({"ack": "started", "evalId": "E1"})])

    session = await start_session(transport, settings.evaluation)

    assert session.eval_id == "E1"
    assert session.language == "en-US"
    assert session.mode == "word"
    assert transport.structured_frames == [
        {
            "common": {"api": "speecheval", "cmd": "start"},
            "payload": {
                "params": {"refText": "supermarket", "mode": "word"},
                "langType": "en-US",
                "attachAudioUrl": True,
                "format": "wav",
                "sampleRate": 16000,
            },
        }
    ]
    assert transport.receives == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "frame",
    [
        text_frame({"ack": "result", "eof": 1}),
        text_frame({"ack": "warning"}),
        text_frame({"evalId": "E1"}),
        Frame(FrameKind.TEXT, data="garbage"),
        Frame(FrameKind.BINARY, data=b'{"ack":"started","evalId":"E1"}'),
        Frame(FrameKind.ERROR, error="boom"),
        Frame(FrameKind.CLOSED, error="connection closed code=1006 reason="),
    ],
)
async def test_start_session_rejects_anything_but_started(settings, frame: Frame) -> None:
    transport = ScriptedTransport([frame])
    with pytest.raises(HandshakeError):
        await start_session(transport, settings.evaluation)


@pytest.mark.asyncio
async def test_start_session_send_failure_is_fatal(settings) -> None:
    class _Broken(ScriptedTransport):
        async def send_structured(self, message) -> None:
            raise ConnectionResetError("reset")

    with pytest.raises(HandshakeError):
        await start_session(_Broken(), settings.evaluation)
