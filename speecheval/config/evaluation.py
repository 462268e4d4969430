"""Evaluation request defaults (what is being assessed)."""

from __future__ import annotations

ENV_SPEECHEVAL_LANGUAGE: str = "SPEECHEVAL_LANGUAGE"
ENV_SPEECHEVAL_MODE: str = "SPEECHEVAL_MODE"
ENV_SPEECHEVAL_REF_TEXT: str = "SPEECHEVAL_REF_TEXT"

DEFAULT_LANGUAGE: str = "en-US"

# Assessment question type, also the last path segment of the ws endpoint.
DEFAULT_MODE: str = "word"
DEFAULT_REF_TEXT: str = "supermarket"

DEFAULT_ATTACH_AUDIO_URL: bool = True

__all__ = [
    "DEFAULT_ATTACH_AUDIO_URL",
    "DEFAULT_LANGUAGE",
    "DEFAULT_MODE",
    "DEFAULT_REF_TEXT",
    "ENV_SPEECHEVAL_LANGUAGE",
    "ENV_SPEECHEVAL_MODE",
    "ENV_SPEECHEVAL_REF_TEXT",
]
