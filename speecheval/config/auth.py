"""Token endpoint and credential configuration."""

from __future__ import annotations

ENV_SPEECHEVAL_HOST: str = "SPEECHEVAL_HOST"
ENV_SPEECHEVAL_APP_KEY: str = "SPEECHEVAL_APP_KEY"
ENV_SPEECHEVAL_APP_SECRET: str = "SPEECHEVAL_APP_SECRET"

TOKEN_ENDPOINT_PATH: str = "/auth/generateToken"

# Request body keys
TOKEN_KEY_SIGNATURE: str = "signature"
TOKEN_KEY_APP_KEY: str = "appKey"
TOKEN_KEY_TIMESTAMP: str = "timestamp"

# Response body keys
TOKEN_KEY_CODE: str = "code"
TOKEN_KEY_DATA: str = "data"
TOKEN_KEY_TOKEN: str = "token"

TOKEN_SUCCESS_CODE: str = "00000"

# Signed message layout; both values are bound into the HMAC.
SIGNATURE_MESSAGE_FORMAT: str = "appId={app_key}&timestamp={timestamp}"

AUTHORIZATION_HEADER: str = "Authorization"
BEARER_PREFIX: str = "Bearer"

ENV_TOKEN_TIMEOUT_S: str = "SPEECHEVAL_TOKEN_TIMEOUT_S"
DEFAULT_TOKEN_TIMEOUT_S: float = 10.0

__all__ = [
    "AUTHORIZATION_HEADER",
    "BEARER_PREFIX",
    "DEFAULT_TOKEN_TIMEOUT_S",
    "ENV_SPEECHEVAL_APP_KEY",
    "ENV_SPEECHEVAL_APP_SECRET",
    "ENV_SPEECHEVAL_HOST",
    "ENV_TOKEN_TIMEOUT_S",
    "SIGNATURE_MESSAGE_FORMAT",
    "TOKEN_ENDPOINT_PATH",
    "TOKEN_KEY_APP_KEY",
    "TOKEN_KEY_CODE",
    "TOKEN_KEY_DATA",
    "TOKEN_KEY_SIGNATURE",
    "TOKEN_KEY_TIMESTAMP",
    "TOKEN_KEY_TOKEN",
    "TOKEN_SUCCESS_CODE",
]
