#!/usr/bin/env python3
"""Streaming speech-evaluation client.

Simulates live usage: audio is sent at microphone cadence while
incremental results come back, and the final result arrives shortly after
the stop frame.
"""

from __future__ import annotations

import asyncio
import logging
import argparse

from speecheval.runtime.logging import configure_logging
from speecheval.session.runner import SessionResult, run_evaluation
from speecheval.runtime.settings_loader import load_settings
from speecheval.errors import ConfigError, SpeechEvalError
from speecheval.config.logging import LOG_LEVEL

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="speecheval", description="Streaming speech-evaluation client")
    # Required (each falls back to its SPEECHEVAL_* env var)
    p.add_argument("--addr", dest="host", default=None, help="api host e.g. xxxxx.speech-eval.com")
    p.add_argument("--app-key", default=None, help="your appKey (uuid format)")
    p.add_argument("--app-secret", dest="secret", default=None, help="your secret")

    # Optional
    p.add_argument("--audio", dest="audio_path", default=None, help="audio file to stream (default supermarket.wav)")
    p.add_argument("--lang", dest="language", default=None, help="evaluation language, e.g. en-US")
    p.add_argument("--mode", default=None, help="assessment question type, e.g. word")
    p.add_argument("--ref-text", default=None, help="reference text the speaker reads")
    p.add_argument("--pl", dest="chunk_bytes", type=int, default=None, help="each audio packet length in bytes")
    p.add_argument(
        "--sleep",
        dest="pacing_enabled",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="sleep between audio packets to emulate real-time capture",
    )
    p.add_argument(
        "--secure",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="use https/wss (disable only for local testing)",
    )
    p.add_argument("--log-level", default=None, help=f"logging level (default {LOG_LEVEL})")
    p.add_argument("--debug", action="store_true", help="shorthand for --log-level DEBUG")
    return p.parse_args(argv)


def report(result: SessionResult) -> None:
    outcome = result.outcome
    stream = result.report
    logger.info(
        "evalId=%s chunks=%d bytes=%d stop_sent=%s partials=%d warnings=%d errors=%d final=%s",
        result.session.eval_id,
        stream.chunks_sent,
        stream.bytes_sent,
        stream.stop_sent,
        outcome.partial_results,
        len(outcome.warnings),
        len(outcome.errors),
        "yes" if outcome.final_result is not None else "no",
    )
    if stream.error:
        logger.warning("audio stream aborted: %s", stream.error)


async def run(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(
            host=args.host,
            app_key=args.app_key,
            secret=args.secret,
            language=args.language,
            mode=args.mode,
            ref_text=args.ref_text,
            audio_path=args.audio_path,
            chunk_bytes=args.chunk_bytes,
            pacing_enabled=args.pacing_enabled,
            secure=args.secure,
        )
    except ConfigError as exc:
        logger.error("config: %s", exc)
        return EXIT_USAGE

    creds = settings.credentials
    logger.info("Your AppKey:%s, Your addr:%s", creds.app_key, creds.host)

    try:
        result = await run_evaluation(settings)
    except SpeechEvalError as exc:
        logger.error("%s", exc)
        return EXIT_FATAL

    report(result)
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging("DEBUG" if args.debug else args.log_level)
    try:
        code = asyncio.run(run(args))
    except KeyboardInterrupt:
        code = EXIT_INTERRUPTED
    raise SystemExit(code)


if __name__ == "__main__":
    main()
