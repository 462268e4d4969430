from __future__ import annotations

import orjson
import pytest

from speecheval.protocol.parser import parse_inbound
from speecheval.state.settings import EvalSettings
from speecheval.protocol.messages import (
    InboundKind,
    ResultFrame,
    StopRequest,
    StartRequest,
    StartedResponse,
)


def test_start_request_wire_shape() -> None:
    evaluation = EvalSettings(
        language="en-US",
        mode="word",
        ref_text="supermarket",
        audio_format="wav",
        sample_rate=16000,
        attach_audio_url=True,
    )
    assert StartRequest.from_settings(evaluation).to_wire() == {
        "common": {"api": "speecheval", "cmd": "start"},
        "payload": {
            "params": {"refText": "supermarket", "mode": "word"},
            "langType": "en-US",
            "attachAudioUrl": True,
            "format": "wav",
            "sampleRate": 16000,
        },
    }


def test_stop_request_wire_shape() -> None:
    assert StopRequest().to_wire() == {"common": {"cmd": "stop", "api": "speecheval"}}


@pytest.mark.parametrize(
    ("doc", "kind"),
    [
        ({"ack": "started", "evalId": "E1"}, InboundKind.STARTED),
        ({"ack": "warning", "msg": "low volume"}, InboundKind.WARNING),
        ({"ack": "error", "code": 42}, InboundKind.ERROR),
        ({"ack": "result", "eof": 0}, InboundKind.RESULT),
        ({"ack": "completed"}, InboundKind.OTHER),
        ({"status": "done"}, InboundKind.OTHER),
        ({"ack": 7}, InboundKind.OTHER),
    ],
)
def test_parse_inbound_classifies_by_ack(doc: dict, kind: InboundKind) -> None:
    assert parse_inbound(orjson.dumps(doc).decode()).kind is kind


@pytest.mark.parametrize("raw", ["not json", "[1, 2]", "", None, b"\xff\xfe"])
def test_parse_inbound_untagged_payloads(raw) -> None:
    msg = parse_inbound(raw)
    assert msg.kind is InboundKind.OTHER
    assert msg.ack is None


def test_parse_inbound_accepts_bytes() -> None:
    msg = parse_inbound(b'{"ack":"result","eof":1}')
    assert msg.kind is InboundKind.RESULT
    assert msg.body["eof"] == 1


def test_started_response_eval_id() -> None:
    msg = parse_inbound('{"ack":"started","evalId":"E1"}')
    assert StartedResponse.from_message(msg).eval_id == "E1"


@pytest.mark.parametrize(
    ("eof", "final"),
    [(1, True), (1.0, True), ("1", True), (True, True), (0, False), (None, False), ("x", False), (2, False)],
)
def test_result_frame_eof(eof, final: bool) -> None:
    body = {"ack": "result"}
    if eof is not None:
        body["eof"] = eof
    msg = parse_inbound(orjson.dumps(body).decode())
    assert ResultFrame.from_message(msg).eof is final
