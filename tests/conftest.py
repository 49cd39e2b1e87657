"""Test configuration helpers and shared fixtures."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("SETTINGS_SKIP_DOTENV", "1")

FIXED_NOW = datetime(2024, 3, 5, 9, 7, 3)


class FakeClock:
    """Deterministic clock that can be moved between calls."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def log_settings(tmp_path: Path):
    """Settings rooted in a temporary directory with stdout mirroring on."""

    from config.config import Settings

    return Settings(log_root=tmp_path, mirror_stdout=True, tag_width=11)


@pytest.fixture
def month_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "2024_MAR"
