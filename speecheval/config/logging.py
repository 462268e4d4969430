"""Logging configuration."""

from __future__ import annotations

import os

ENV_LOG_LEVEL: str = "LOG_LEVEL"
ENV_SHOW_WEBSOCKETS_LOGS: str = "SHOW_WEBSOCKETS_LOGS"

LOG_LEVEL: str = (os.getenv(ENV_LOG_LEVEL) or "INFO").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

__all__ = ["ENV_LOG_LEVEL", "ENV_SHOW_WEBSOCKETS_LOGS", "LOG_FORMAT", "LOG_LEVEL"]
