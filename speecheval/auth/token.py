"""Bearer token acquisition (one synchronous call, no retry, no caching)."""

from __future__ import annotations

import time
import logging
from typing import Any
from collections.abc import Callable

import orjson
import requests

from speecheval.errors import TokenError
from speecheval.state.settings import Credentials
from speecheval.transport.urls import token_url
from speecheval.config.auth import (
    TOKEN_KEY_CODE,
    TOKEN_KEY_DATA,
    TOKEN_KEY_TOKEN,
    TOKEN_KEY_APP_KEY,
    TOKEN_KEY_SIGNATURE,
    TOKEN_KEY_TIMESTAMP,
    TOKEN_SUCCESS_CODE,
    DEFAULT_TOKEN_TIMEOUT_S,
)

from .signature import sign

logger = logging.getLogger(__name__)

TimeFn = Callable[[], float]


def build_token_request(credentials: Credentials, timestamp: int) -> dict[str, Any]:
    return {
        TOKEN_KEY_SIGNATURE: sign(credentials.app_key, credentials.secret, timestamp),
        TOKEN_KEY_APP_KEY: credentials.app_key,
        TOKEN_KEY_TIMESTAMP: timestamp,
    }


def parse_token_response(body: bytes) -> str:
    try:
        doc = orjson.loads(body)
    except orjson.JSONDecodeError as exc:
        raise TokenError("response is not JSON", body=_preview(body)) from exc
    if not isinstance(doc, dict):
        raise TokenError("response is not a JSON object", body=_preview(body))

    code = doc.get(TOKEN_KEY_CODE)
    if str(code) != TOKEN_SUCCESS_CODE:
        raise TokenError(f"unexpected code {code!r}", body=_preview(body))

    data = doc.get(TOKEN_KEY_DATA)
    token = data.get(TOKEN_KEY_TOKEN) if isinstance(data, dict) else None
    if not isinstance(token, str) or not token:
        raise TokenError("response carries no data.token", body=_preview(body))
    return token


def acquire_token(
    credentials: Credentials,
    *,
    secure: bool = True,
    timeout_s: float = DEFAULT_TOKEN_TIMEOUT_S,
    http: Any | None = None,
    now_fn: TimeFn | None = None,
) -> str:
    """Exchange a freshly signed request for a session token.

    `http` is anything with a requests-style `post`; defaults to the
    `requests` module itself.
    """
    http = http or requests
    timestamp = int((now_fn or time.time)())
    url = token_url(credentials.host, secure=secure)
    body = orjson.dumps(build_token_request(credentials, timestamp))

    logger.debug("requesting token from %s", url)
    try:
        resp = http.post(
            url,
            data=body,
            headers={"Content-Type": "application/json"},
            timeout=timeout_s,
        )
    except requests.RequestException as exc:
        raise TokenError(f"get token dial: {exc}") from exc

    token = parse_token_response(resp.content)
    logger.debug("token acquired (http %s)", getattr(resp, "status_code", "?"))
    return token


def _preview(body: bytes, limit: int = 512) -> str:
    return body[:limit].decode("utf-8", errors="replace")


__all__ = ["acquire_token", "build_token_request", "parse_token_response"]
