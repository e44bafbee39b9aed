import json

import pytest

from scores import ScoreStore, default_record
from settings import Difficulty

ZEROS = {tier: 0 for tier in Difficulty}


def write(path, payload):
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")


def test_missing_file_loads_zeros(tmp_path):
    store = ScoreStore(tmp_path / "absent.json")
    assert store.load() == ZEROS
    assert not (tmp_path / "absent.json").exists()


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        "",
        "[1, 2, 3]",
        {"easy": 1, "medium": 2, "hard": 3},
        {"easy": "1", "medium": 2, "hard": 3, "extreme": 4},
        {"easy": 1.5, "medium": 2, "hard": 3, "extreme": 4},
        {"easy": True, "medium": 2, "hard": 3, "extreme": 4},
        {"easy": -5, "medium": 2, "hard": 3, "extreme": 4},
        "[" * 200_000,
    ],
)
def test_malformed_file_loads_zeros(tmp_path, payload):
    path = tmp_path / "highscores.json"
    write(path, payload)
    assert ScoreStore(path).load() == ZEROS


def test_binary_garbage_loads_zeros(tmp_path):
    path = tmp_path / "highscores.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert ScoreStore(path).load() == ZEROS


def test_valid_file_round_trips(tmp_path):
    path = tmp_path / "highscores.json"
    write(path, {"easy": 3, "medium": 7, "hard": 1, "extreme": 0, "other": 99})
    store = ScoreStore(path)
    assert store.load() == {
        Difficulty.EASY: 3,
        Difficulty.MEDIUM: 7,
        Difficulty.HARD: 1,
        Difficulty.EXTREME: 0,
    }
    assert store.best(Difficulty.MEDIUM) == 7


def test_record_if_better_only_on_strict_improvement(score_store):
    assert score_store.record_if_better(Difficulty.HARD, 4) is True
    assert score_store.record_if_better(Difficulty.HARD, 4) is False
    assert score_store.record_if_better(Difficulty.HARD, 2) is False
    assert score_store.best(Difficulty.HARD) == 4
    assert score_store.record_if_better(Difficulty.HARD, 5) is True
    assert score_store.best(Difficulty.HARD) == 5


def test_zero_score_never_beats_default(score_store):
    assert score_store.record_if_better(Difficulty.EASY, 0) is False


def test_best_is_non_decreasing(score_store):
    history = []
    for score in [3, 1, 8, 8, 2, 9, 0]:
        score_store.record_if_better(Difficulty.EXTREME, score)
        history.append(score_store.best(Difficulty.EXTREME))
    assert history == sorted(history)
    assert history[-1] == 9


def test_tiers_are_independent(score_store):
    score_store.record_if_better(Difficulty.EASY, 10)
    assert score_store.best(Difficulty.MEDIUM) == 0
    assert score_store.record_if_better(Difficulty.MEDIUM, 1) is True


def test_improvement_is_persisted_immediately(tmp_path):
    path = tmp_path / "highscores.json"
    write(path, {"easy": 3, "medium": 0, "hard": 0, "extreme": 0})
    store = ScoreStore(path)
    store.load()

    assert store.record_if_better(Difficulty.EASY, 5) is True

    assert json.loads(path.read_text(encoding="utf-8")) == {"easy": 5, "medium": 0, "hard": 0, "extreme": 0}
    assert ScoreStore(path).load()[Difficulty.EASY] == 5


def test_write_failure_keeps_memory_value(tmp_path):
    # A directory where the file should be makes every write fail.
    path = tmp_path / "highscores.json"
    path.mkdir()
    store = ScoreStore(path)
    assert store.load() == ZEROS

    assert store.record_if_better(Difficulty.MEDIUM, 12) is True
    assert store.best(Difficulty.MEDIUM) == 12
    assert store.record_if_better(Difficulty.MEDIUM, 11) is False


def test_default_record_is_fresh_each_time():
    first = default_record()
    first[Difficulty.EASY] = 9
    assert default_record()[Difficulty.EASY] == 0


def test_negative_stored_best_is_not_beaten_by_zero(tmp_path):
    path = tmp_path / "highscores.json"
    write(path, {"easy": -5, "medium": 0, "hard": 0, "extreme": 0})
    store = ScoreStore(path)
    store.load()
    assert store.best(Difficulty.EASY) == 0
    assert store.record_if_better(Difficulty.EASY, 0) is False


def test_interrupted_write_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "highscores.json"
    write(path, {"easy": 3, "medium": 4, "hard": 5, "extreme": 6})
    store = ScoreStore(path)
    store.load()

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("scores.os.replace", fail_replace)
    assert store.record_if_better(Difficulty.EASY, 9) is True
    assert store.best(Difficulty.EASY) == 9

    assert json.loads(path.read_text(encoding="utf-8")) == {"easy": 3, "medium": 4, "hard": 5, "extreme": 6}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["highscores.json"]
