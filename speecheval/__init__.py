"""Client for a streaming speech-evaluation service."""

from .errors import (
    TokenError,
    ConfigError,
    ConnectError,
    HandshakeError,
    SpeechEvalError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConnectError",
    "HandshakeError",
    "SpeechEvalError",
    "TokenError",
    "__version__",
]
