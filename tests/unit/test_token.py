from __future__ import annotations

import orjson
import pytest
import requests

from tests.fakes import FakeHttp
from speecheval.errors import TokenError
from speecheval.auth.signature import sign
from speecheval.state.settings import Credentials
from speecheval.auth.token import acquire_token, parse_token_response

CREDS = Credentials(app_key="app-1", secret="s3cret", host="eval.example.com")


def test_acquire_token_returns_token_on_success_code() -> None:
    http = FakeHttp({"code": "00000", "data": {"token": "tok-abc"}})
    assert acquire_token(CREDS, http=http, now_fn=lambda: 1700000000.7) == "tok-abc"


def test_acquire_token_posts_signed_request() -> None:
    http = FakeHttp()
    acquire_token(CREDS, http=http, now_fn=lambda: 1700000000.0, timeout_s=3.0)

    assert len(http.calls) == 1
    call = http.calls[0]
    assert call["url"] == "https://eval.example.com/auth/generateToken"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["timeout"] == 3.0
    body = orjson.loads(call["data"])
    assert body == {
        "signature": sign("app-1", "s3cret", 1700000000),
        "appKey": "app-1",
        "timestamp": 1700000000,
    }


def test_acquire_token_signs_each_request_fresh() -> None:
    http = FakeHttp()
    acquire_token(CREDS, http=http, now_fn=lambda: 100.0)
    acquire_token(CREDS, http=http, now_fn=lambda: 101.0)
    first, second = (orjson.loads(c["data"]) for c in http.calls)
    assert first["timestamp"] == 100
    assert second["timestamp"] == 101
    assert first["signature"] != second["signature"]


def test_acquire_token_insecure_uses_http() -> None:
    http = FakeHttp()
    acquire_token(CREDS, http=http, secure=False)
    assert http.calls[0]["url"] == "http://eval.example.com/auth/generateToken"


@pytest.mark.parametrize("code", ["00001", "10000", "", None, 0])
def test_acquire_token_rejects_other_codes(code) -> None:
    http = FakeHttp({"code": code, "data": {"token": "tok-abc"}})
    with pytest.raises(TokenError) as exc:
        acquire_token(CREDS, http=http)
    assert "tok-abc" in exc.value.body


def test_acquire_token_network_error() -> None:
    http = FakeHttp(exc=requests.ConnectionError("refused"))
    with pytest.raises(TokenError) as exc:
        acquire_token(CREDS, http=http)
    assert "refused" in exc.value.reason


@pytest.mark.parametrize(
    "body",
    [
        b"<html>bad gateway</html>",
        b"[]",
        orjson.dumps({"code": "00000"}),
        orjson.dumps({"code": "00000", "data": {"token": ""}}),
        orjson.dumps({"code": "00000", "data": "tok"}),
    ],
)
def test_parse_token_response_invalid(body: bytes) -> None:
    with pytest.raises(TokenError):
        parse_token_response(body)
