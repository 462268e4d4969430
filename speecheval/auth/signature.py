"""Request signing for the token endpoint."""

from __future__ import annotations

import hmac
import base64
import hashlib

from speecheval.config.auth import SIGNATURE_MESSAGE_FORMAT


def signature_message(app_key: str, timestamp: int) -> str:
    return SIGNATURE_MESSAGE_FORMAT.format(app_key=app_key, timestamp=int(timestamp))


def sign(app_key: str, secret: str, timestamp: int) -> str:
    """Return base64(HMAC-SHA1(secret, "appId=<app_key>&timestamp=<timestamp>")).

    The digest algorithm is fixed by the service. Signatures are only valid
    for the timestamp they were computed with, so never reuse one.
    """
    mac = hmac.new(secret.encode("utf-8"), signature_message(app_key, timestamp).encode("utf-8"), hashlib.sha1)
    return base64.b64encode(mac.digest()).decode("ascii")


__all__ = ["sign", "signature_message"]
