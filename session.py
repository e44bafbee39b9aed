"""Everything that belongs to a single run of the game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from bird import Bird
from particles import ParticleSystem
from pipes import GapSource, PipeField
from settings import BIRD_X, SLOW_MOTION_SCALE, Difficulty, WorldBounds


@dataclass
class DebugFlags:
    show_hitboxes: bool = False
    invincible: bool = False
    slow_motion: bool = False

    @property
    def time_scale(self) -> float:
        return SLOW_MOTION_SCALE if self.slow_motion else 1.0


@dataclass
class Session:
    bounds: WorldBounds
    difficulty: Difficulty
    bird: Bird
    pipes: PipeField
    particles: ParticleSystem
    score: int = 0
    flags: DebugFlags = field(default_factory=DebugFlags)
    new_best: bool = False
    background_offset: float = 0.0

    @classmethod
    def fresh(
        cls,
        bounds: WorldBounds,
        difficulty: Difficulty,
        *,
        gap_source: Optional[GapSource] = None,
        rng: Optional[random.Random] = None,
    ) -> "Session":
        return cls(
            bounds=bounds,
            difficulty=difficulty,
            bird=Bird(x=BIRD_X, y=bounds.height / 2),
            pipes=PipeField(bounds, difficulty.gap_height, gap_source=gap_source),
            particles=ParticleSystem(rng),
        )


__all__ = ["DebugFlags", "Session"]
