"""Inbound frame parsing."""

from __future__ import annotations

import orjson

from speecheval.config.protocol import PROTO_KEY_ACK

from .messages import InboundKind, InboundMessage, classify_ack


def parse_inbound(data: str | bytes | None) -> InboundMessage:
    """Classify one inbound frame by its `ack` tag.

    Never raises: undecodable or non-object payloads have no tag and are
    reported as `InboundKind.OTHER`.
    """
    if data is None:
        return InboundMessage(InboundKind.OTHER, ack=None)
    raw = data.decode("utf-8", errors="replace") if isinstance(data, bytes | bytearray) else str(data)
    try:
        doc = orjson.loads(raw)
    except orjson.JSONDecodeError:
        return InboundMessage(InboundKind.OTHER, ack=None, raw=raw)
    if not isinstance(doc, dict):
        return InboundMessage(InboundKind.OTHER, ack=None, raw=raw)

    ack = doc.get(PROTO_KEY_ACK)
    return InboundMessage(
        classify_ack(ack),
        ack=ack if isinstance(ack, str) else None,
        body=doc,
        raw=raw,
    )


__all__ = ["parse_inbound"]
