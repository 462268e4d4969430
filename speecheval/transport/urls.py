"""URL building for the token and streaming endpoints."""

from __future__ import annotations

from urllib.parse import quote, urlparse

from speecheval.config.auth import TOKEN_ENDPOINT_PATH


def _split_host(host: str, secure: bool) -> tuple[str, bool]:
    """Strip any scheme/path from `host`; a scheme prefix decides security."""
    host = (host or "").strip()
    if host.startswith(("ws://", "wss://", "http://", "https://")):
        parsed = urlparse(host)
        return parsed.netloc, parsed.scheme in {"wss", "https"}
    return host.split("/", 1)[0], secure


def token_url(host: str, *, secure: bool = True) -> str:
    netloc, use_secure = _split_host(host, secure)
    scheme = "https" if use_secure else "http"
    return f"{scheme}://{netloc}{TOKEN_ENDPOINT_PATH}"


def ws_url(host: str, language: str, mode: str, *, secure: bool = True) -> str:
    """Streaming endpoint: ws(s)://<host>/<language>/<mode>."""
    netloc, use_secure = _split_host(host, secure)
    scheme = "wss" if use_secure else "ws"
    return f"{scheme}://{netloc}/{quote(language, safe='-_.')}/{quote(mode, safe='-_.')}"


__all__ = ["token_url", "ws_url"]
