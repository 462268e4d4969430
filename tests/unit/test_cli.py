from __future__ import annotations

import os

import pytest

from speecheval import cli
from speecheval.errors import TokenError
from speecheval.state.session import StreamReport, SessionOutcome, EvaluationSession
from speecheval.session.runner import SessionResult


def _args(audio_file, *extra: str):
    return cli.parse_args([
        "--addr",
        "eval.example.com",
        "--app-key",
        "app-1",
        "--app-secret",
        "s3cret",
        "--audio",
        str(audio_file),
        *extra,
    ])


def test_parse_args_flags(audio_file) -> None:
    args = _args(audio_file, "--no-sleep", "--pl", "3200", "--lang", "en-GB", "--mode", "sentence")
    assert args.host == "eval.example.com"
    assert args.pacing_enabled is False
    assert args.chunk_bytes == 3200
    assert args.language == "en-GB"
    assert args.mode == "sentence"
    assert args.secure is None


@pytest.mark.asyncio
async def test_run_success_exit_code(monkeypatch, audio_file) -> None:
    seen = {}

    async def _fake_run(settings):
        seen["settings"] = settings
        return SessionResult(
            session=EvaluationSession("E1", "en-US", "word", "supermarket", "wav", 16000),
            outcome=SessionOutcome(eval_id="E1", partial_results=2, final_result={"ack": "result", "eof": 1}),
            report=StreamReport(chunks_sent=10, bytes_sent=76800, stop_sent=True),
        )

    monkeypatch.setattr(cli, "run_evaluation", _fake_run)

    assert await cli.run(_args(audio_file, "--pl", "1024")) == cli.EXIT_OK
    assert seen["settings"].stream.chunk_bytes == 1024


@pytest.mark.asyncio
async def test_run_fatal_exit_code(monkeypatch, audio_file) -> None:
    async def _fail(settings):
        raise TokenError("unexpected code '40001'")

    monkeypatch.setattr(cli, "run_evaluation", _fail)
    assert await cli.run(_args(audio_file)) == cli.EXIT_FATAL


@pytest.mark.asyncio
async def test_run_config_error_exit_code(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("SPEECHEVAL_HOST", raising=False)
    args = cli.parse_args(["--app-key", "k", "--app-secret", "s", "--audio", str(tmp_path / "x.wav")])
    assert await cli.run(args) == cli.EXIT_USAGE


@pytest.mark.asyncio
async def test_run_unreadable_audio_is_usage_error(monkeypatch, audio_file) -> None:
    calls = []

    async def _run(settings):
        calls.append(settings)

    monkeypatch.setattr(cli, "run_evaluation", _run)
    audio_file.chmod(0)
    try:
        if os.access(audio_file, os.R_OK):
            pytest.skip("file permissions are not enforced for this user")
        assert await cli.run(_args(audio_file)) == cli.EXIT_USAGE
        assert calls == []
    finally:
        audio_file.chmod(0o644)


def test_main_exits_with_run_code(monkeypatch, audio_file) -> None:
    async def _run(args) -> int:
        return 1

    monkeypatch.setattr(cli, "run", _run)
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)
    with pytest.raises(SystemExit) as exc:
        cli.main(["--addr", "h", "--app-key", "k", "--app-secret", "s", "--audio", str(audio_file)])
    assert exc.value.code == 1
