"""Audio source and pacing defaults."""

from __future__ import annotations

ENV_SPEECHEVAL_AUDIO_FILE: str = "SPEECHEVAL_AUDIO_FILE"
ENV_SPEECHEVAL_CHUNK_BYTES: str = "SPEECHEVAL_CHUNK_BYTES"
ENV_SPEECHEVAL_PACING: str = "SPEECHEVAL_PACING"
ENV_SPEECHEVAL_PACING_INTERVAL_S: str = "SPEECHEVAL_PACING_INTERVAL_S"

DEFAULT_AUDIO_FILE: str = "supermarket.wav"

# 7680 bytes is 240ms of PCM16 mono @ 16kHz.
DEFAULT_CHUNK_BYTES: int = 7680
DEFAULT_PACING_ENABLED: bool = True
DEFAULT_PACING_INTERVAL_S: float = 0.24

DEFAULT_AUDIO_FORMAT: str = "wav"
DEFAULT_SAMPLE_RATE: int = 16000

__all__ = [
    "DEFAULT_AUDIO_FILE",
    "DEFAULT_AUDIO_FORMAT",
    "DEFAULT_CHUNK_BYTES",
    "DEFAULT_PACING_ENABLED",
    "DEFAULT_PACING_INTERVAL_S",
    "DEFAULT_SAMPLE_RATE",
    "ENV_SPEECHEVAL_AUDIO_FILE",
    "ENV_SPEECHEVAL_CHUNK_BYTES",
    "ENV_SPEECHEVAL_PACING",
    "ENV_SPEECHEVAL_PACING_INTERVAL_S",
]
