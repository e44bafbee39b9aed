"""Best score per difficulty tier, persisted as a small JSON document."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Union

from settings import SCORES_FILE, Difficulty

logger = logging.getLogger(__name__)

ScoreRecord = Dict[Difficulty, int]


def default_record() -> ScoreRecord:
    return {tier: 0 for tier in Difficulty}


def _parse_record(raw: object) -> ScoreRecord:
    if not isinstance(raw, dict):
        raise ValueError("score file is not a JSON object")
    record = default_record()
    for tier in Difficulty:
        value = raw[tier.value]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{tier.value!r} is not an integer")
        if value < 0:
            raise ValueError(f"{tier.value!r} is negative")
        record[tier] = value
    return record


class ScoreStore:
    """In-memory best scores backed by ``path``.

    Reading never fails: an absent or damaged file starts everybody at zero.
    Writing is best effort; the in-memory value is kept even when the file
    cannot be updated.
    """

    def __init__(self, path: Union[str, Path] = SCORES_FILE) -> None:
        self.path = Path(path)
        self.record: ScoreRecord = default_record()

    def load(self) -> ScoreRecord:
        try:
            text = self.path.read_text(encoding="utf-8")
            self.record = _parse_record(json.loads(text))
        except FileNotFoundError:
            logger.debug("No score file at %s, starting from zero", self.path)
            self.record = default_record()
        except (OSError, UnicodeDecodeError, ValueError, KeyError, RecursionError) as exc:
            logger.debug("Ignoring unreadable score file %s: %s", self.path, exc)
            self.record = default_record()
        return dict(self.record)

    def best(self, tier: Difficulty) -> int:
        return self.record[tier]

    def record_if_better(self, tier: Difficulty, score: int) -> bool:
        if score <= self.record[tier]:
            return False
        self.record[tier] = score
        logger.info("New %s high score: %d", tier.label, score)
        self.save()
        return True

    def save(self) -> None:
        payload = {tier.value: self.record[tier] for tier in Difficulty}
        # Written next to the target and swapped in, so a crash mid-write
        # leaves the previous file intact.
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".highscores-", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            logger.debug("Could not write score file %s: %s", self.path, exc)
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass


__all__ = ["ScoreRecord", "ScoreStore", "default_record"]
