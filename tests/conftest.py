import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from scores import ScoreStore


class FixedGapSource:
    """Always answers ``value``, clamped by the field like any other source."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.requests = []

    def next_gap_top(self, low: float, high: float) -> float:
        self.requests.append((low, high))
        return self.value


@pytest.fixture
def fixed_gap():
    return FixedGapSource(150.0)


@pytest.fixture
def score_store(tmp_path):
    store = ScoreStore(tmp_path / "highscores.json")
    store.load()
    return store


@pytest.fixture
def make_gap():
    return FixedGapSource
