from .parser import parse_inbound
from .messages import (
    InboundKind,
    ResultFrame,
    StopRequest,
    StartRequest,
    InboundMessage,
    StartedResponse,
)

__all__ = [
    "InboundKind",
    "InboundMessage",
    "ResultFrame",
    "StartRequest",
    "StartedResponse",
    "StopRequest",
    "parse_inbound",
]
