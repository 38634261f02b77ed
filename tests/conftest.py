from pathlib import Path

import pytest

from infiniteloop.config import ENV_VARS

PUZZLES = Path(__file__).resolve().parent.parent / "puzzles"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def puzzles_dir() -> Path:
    return PUZZLES
