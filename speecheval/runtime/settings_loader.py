"""Environment parsing for runtime settings.

Every loader takes explicit overrides (usually from the CLI); a `None`
override falls back to the environment, then to the built-in default.
"""

from __future__ import annotations

import os
from pathlib import Path

from speecheval.errors import ConfigError
from speecheval.config.auth import (
    ENV_TOKEN_TIMEOUT_S,
    ENV_SPEECHEVAL_HOST,
    ENV_SPEECHEVAL_APP_KEY,
    DEFAULT_TOKEN_TIMEOUT_S,
    ENV_SPEECHEVAL_APP_SECRET,
)
from speecheval.config.audio import (
    DEFAULT_AUDIO_FILE,
    DEFAULT_CHUNK_BYTES,
    DEFAULT_SAMPLE_RATE,
    DEFAULT_AUDIO_FORMAT,
    ENV_SPEECHEVAL_PACING,
    DEFAULT_PACING_ENABLED,
    DEFAULT_PACING_INTERVAL_S,
    ENV_SPEECHEVAL_AUDIO_FILE,
    ENV_SPEECHEVAL_CHUNK_BYTES,
    ENV_SPEECHEVAL_PACING_INTERVAL_S,
)
from speecheval.config.evaluation import (
    DEFAULT_MODE,
    DEFAULT_LANGUAGE,
    DEFAULT_REF_TEXT,
    ENV_SPEECHEVAL_MODE,
    ENV_SPEECHEVAL_LANGUAGE,
    ENV_SPEECHEVAL_REF_TEXT,
    DEFAULT_ATTACH_AUDIO_URL,
)
from speecheval.config.websocket import (
    DEFAULT_SECURE,
    ENV_SPEECHEVAL_SECURE,
    ENV_WS_OPEN_TIMEOUT_S,
    ENV_WS_MAX_MESSAGE_BYTES,
    DEFAULT_WS_OPEN_TIMEOUT_S,
    DEFAULT_WS_MAX_MESSAGE_BYTES,
)
from speecheval.state.settings import (
    AppSettings,
    Credentials,
    EvalSettings,
    StreamSettings,
    TransportSettings,
)

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _pick(override, fallback):
    return fallback if override is None else override


def load_credentials(
    *,
    host: str | None = None,
    app_key: str | None = None,
    secret: str | None = None,
) -> Credentials:
    creds = Credentials(
        app_key=(_pick(app_key, _str_env(ENV_SPEECHEVAL_APP_KEY, "")) or "").strip(),
        secret=(_pick(secret, _str_env(ENV_SPEECHEVAL_APP_SECRET, "")) or "").strip(),
        host=(_pick(host, _str_env(ENV_SPEECHEVAL_HOST, "")) or "").strip(),
    )
    missing = [
        env
        for env, value in (
            (ENV_SPEECHEVAL_HOST, creds.host),
            (ENV_SPEECHEVAL_APP_KEY, creds.app_key),
            (ENV_SPEECHEVAL_APP_SECRET, creds.secret),
        )
        if not value
    ]
    if missing:
        raise ConfigError(f"missing required settings: {', '.join(missing)}")
    return creds


def load_eval_settings(
    *,
    language: str | None = None,
    mode: str | None = None,
    ref_text: str | None = None,
) -> EvalSettings:
    return EvalSettings(
        language=_pick(language, _str_env(ENV_SPEECHEVAL_LANGUAGE, DEFAULT_LANGUAGE)),
        mode=_pick(mode, _str_env(ENV_SPEECHEVAL_MODE, DEFAULT_MODE)),
        ref_text=_pick(ref_text, _str_env(ENV_SPEECHEVAL_REF_TEXT, DEFAULT_REF_TEXT)),
        audio_format=DEFAULT_AUDIO_FORMAT,
        sample_rate=DEFAULT_SAMPLE_RATE,
        attach_audio_url=DEFAULT_ATTACH_AUDIO_URL,
    )


def load_stream_settings(
    *,
    audio_path: str | Path | None = None,
    chunk_bytes: int | None = None,
    pacing_enabled: bool | None = None,
    pacing_interval_s: float | None = None,
    check_file: bool = True,
) -> StreamSettings:
    path = Path(_pick(audio_path, _str_env(ENV_SPEECHEVAL_AUDIO_FILE, DEFAULT_AUDIO_FILE))).expanduser()
    chunk = int(_pick(chunk_bytes, _int_env(ENV_SPEECHEVAL_CHUNK_BYTES, DEFAULT_CHUNK_BYTES)))
    if chunk <= 0:
        raise ConfigError(f"chunk size must be > 0, got {chunk}")
    interval = float(_pick(pacing_interval_s, _float_env(ENV_SPEECHEVAL_PACING_INTERVAL_S, DEFAULT_PACING_INTERVAL_S)))
    if interval < 0:
        raise ConfigError(f"pacing interval must be >= 0, got {interval}")
    if check_file and not path.is_file():
        raise ConfigError(f"audio file not found: {path}")
    if check_file:
        try:
            with path.open("rb"):
                pass
        except OSError as exc:
            raise ConfigError(f"audio file not readable: {path}") from exc
    return StreamSettings(
        audio_path=path,
        chunk_bytes=chunk,
        pacing_enabled=bool(_pick(pacing_enabled, _bool_env(ENV_SPEECHEVAL_PACING, DEFAULT_PACING_ENABLED))),
        pacing_interval_s=interval,
    )


def load_transport_settings(*, secure: bool | None = None) -> TransportSettings:
    return TransportSettings(
        secure=bool(_pick(secure, _bool_env(ENV_SPEECHEVAL_SECURE, DEFAULT_SECURE))),
        open_timeout_s=_float_env(ENV_WS_OPEN_TIMEOUT_S, DEFAULT_WS_OPEN_TIMEOUT_S),
        max_message_bytes=_int_env(ENV_WS_MAX_MESSAGE_BYTES, DEFAULT_WS_MAX_MESSAGE_BYTES),
        token_timeout_s=_float_env(ENV_TOKEN_TIMEOUT_S, DEFAULT_TOKEN_TIMEOUT_S),
    )


def load_settings(
    *,
    host: str | None = None,
    app_key: str | None = None,
    secret: str | None = None,
    language: str | None = None,
    mode: str | None = None,
    ref_text: str | None = None,
    audio_path: str | Path | None = None,
    chunk_bytes: int | None = None,
    pacing_enabled: bool | None = None,
    pacing_interval_s: float | None = None,
    secure: bool | None = None,
    check_file: bool = True,
) -> AppSettings:
    return AppSettings(
        credentials=load_credentials(host=host, app_key=app_key, secret=secret),
        evaluation=load_eval_settings(language=language, mode=mode, ref_text=ref_text),
        stream=load_stream_settings(
            audio_path=audio_path,
            chunk_bytes=chunk_bytes,
            pacing_enabled=pacing_enabled,
            pacing_interval_s=pacing_interval_s,
            check_file=check_file,
        ),
        transport=load_transport_settings(secure=secure),
    )


__all__ = [
    "load_credentials",
    "load_eval_settings",
    "load_settings",
    "load_stream_settings",
    "load_transport_settings",
]
