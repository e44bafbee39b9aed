"""Tunable constants and the difficulty table shared by every game module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Screen configuration
WIDTH = 800
HEIGHT = 600
GROUND_HEIGHT = 80
FPS = 60

# Bird physics (pixels / frame at 60 FPS)
GRAVITY = 0.5
JUMP_STRENGTH = -8.0
BIRD_SIZE = 30
BIRD_X = 150.0
HITBOX_INSET = 5

# Pipes
PIPE_WIDTH = 60
SPAWN_MARGIN = 50
PIPE_SPACING = 270.0
GAP_MARGIN = 100

# Particles
PARTICLE_GRAVITY = 0.2
PARTICLE_DECAY = 0.02
JUMP_BURST = 5
SCORE_BURST = 15
CRASH_BURST = 30

SLOW_MOTION_SCALE = 0.5
BACKGROUND_STRIPE = 50.0

SCORES_FILE = "highscores.json"

# Colours
SKY_COLOR = (135, 206, 235)
BIRD_COLOR = (253, 249, 0)
BEAK_COLOR = (255, 161, 0)
PIPE_COLOR = (0, 228, 48)
PIPE_EDGE_COLOR = (0, 117, 44)
GROUND_COLOR = (139, 69, 19)
GRASS_COLOR = (34, 139, 34)
TEXT_COLOR = (255, 255, 255)
SHADOW_COLOR = (0, 0, 0)
GOLD = (255, 203, 0)
RED = (230, 41, 55)
SKYBLUE = (102, 191, 255)
HITBOX_COLOR = (230, 41, 55)


@dataclass(frozen=True)
class WorldBounds:
    width: float = WIDTH
    height: float = HEIGHT
    ground_height: float = GROUND_HEIGHT

    @property
    def floor(self) -> float:
        """Y coordinate of the top of the ground strip."""
        return self.height - self.ground_height


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXTREME = "extreme"

    @property
    def gap_height(self) -> float:
        return _TIERS[self][0]

    @property
    def speed(self) -> float:
        return _TIERS[self][1]

    @property
    def label(self) -> str:
        return self.value.capitalize()


# (gap height px, scroll speed px/frame)
_TIERS = {
    Difficulty.EASY: (220.0, 2.0),
    Difficulty.MEDIUM: (180.0, 2.5),
    Difficulty.HARD: (140.0, 3.0),
    Difficulty.EXTREME: (120.0, 3.8),
}


__all__ = [
    "WIDTH",
    "HEIGHT",
    "GROUND_HEIGHT",
    "FPS",
    "GRAVITY",
    "JUMP_STRENGTH",
    "BIRD_SIZE",
    "BIRD_X",
    "HITBOX_INSET",
    "PIPE_WIDTH",
    "SPAWN_MARGIN",
    "PIPE_SPACING",
    "GAP_MARGIN",
    "PARTICLE_GRAVITY",
    "PARTICLE_DECAY",
    "JUMP_BURST",
    "SCORE_BURST",
    "CRASH_BURST",
    "SLOW_MOTION_SCALE",
    "BACKGROUND_STRIPE",
    "SCORES_FILE",
    "WorldBounds",
    "Difficulty",
]
