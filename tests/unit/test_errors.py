from __future__ import annotations

import dataclasses

import pytest

from speecheval.errors import ConfigError, TokenError, ConnectError, HandshakeError, SpeechEvalError


def test_errors_are_frozen_dataclasses() -> None:
    err = ConnectError("wss://h/en-US/word", "upgrade rejected", status=401)

    assert isinstance(err, SpeechEvalError)
    with pytest.raises(dataclasses.FrozenInstanceError):
        err.status = 500  # type: ignore[misc]
    assert str(err) == "dial wss://h/en-US/word failed: status=401 upgrade rejected"


def test_errors_keep_fields_and_cause_when_raised() -> None:
    with pytest.raises(TokenError) as exc:
        try:
            raise ValueError("not json")
        except ValueError as cause:
            raise TokenError("bad body", body="<html>") from cause

    assert exc.value.reason == "bad body"
    assert exc.value.body == "<html>"
    assert isinstance(exc.value.__cause__, ValueError)
    assert exc.value.__traceback__ is not None
    assert str(exc.value) == "get token failed: bad body body=<html>"


def test_error_messages() -> None:
    assert str(HandshakeError("unexpected ack", frame='{"ack":"x"}')) == 'handshake failed: unexpected ack message={"ack":"x"}'
    assert str(ConfigError("missing SPEECHEVAL_HOST")) == "missing SPEECHEVAL_HOST"
