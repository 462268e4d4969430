from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import make_settings
from speecheval.state.settings import AppSettings


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    path = tmp_path / "supermarket.wav"
    path.write_bytes(bytes(range(256)) * 300)  # 76,800 bytes
    return path


@pytest.fixture
def settings(audio_file: Path) -> AppSettings:
    return make_settings(audio_file)
