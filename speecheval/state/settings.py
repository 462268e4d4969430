"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Credentials:
    app_key: str
    secret: str
    host: str


@dataclass(frozen=True, slots=True)
class EvalSettings:
    language: str
    mode: str
    ref_text: str
    audio_format: str
    sample_rate: int
    attach_audio_url: bool


@dataclass(frozen=True, slots=True)
class StreamSettings:
    audio_path: Path
    chunk_bytes: int
    pacing_enabled: bool
    pacing_interval_s: float


@dataclass(frozen=True, slots=True)
class TransportSettings:
    secure: bool
    open_timeout_s: float
    max_message_bytes: int
    token_timeout_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    credentials: Credentials
    evaluation: EvalSettings
    stream: StreamSettings
    transport: TransportSettings


__all__ = [
    "AppSettings",
    "Credentials",
    "EvalSettings",
    "StreamSettings",
    "TransportSettings",
]
