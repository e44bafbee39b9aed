"""The player's bird: gravity integration and jump impulse."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from settings import BIRD_SIZE, GRAVITY, HITBOX_INSET, JUMP_STRENGTH


@dataclass
class Bird:
    x: float
    y: float
    velocity: float = 0.0

    def jump(self) -> None:
        self.velocity = JUMP_STRENGTH

    def update(self, dt_scale: float = 1.0) -> None:
        self.velocity += GRAVITY * dt_scale
        self.y += self.velocity * dt_scale

    @property
    def rotation(self) -> float:
        """Display tilt in degrees, nose-down positive."""
        return max(-30.0, min(90.0, self.velocity * 3.0))

    @property
    def rect(self) -> pygame.Rect:
        half = BIRD_SIZE / 2
        return pygame.Rect(int(self.x - half), int(self.y - half), BIRD_SIZE, BIRD_SIZE)

    @property
    def hitbox(self) -> pygame.Rect:
        # Smaller than the sprite so grazing a pipe edge is forgiven.
        return self.rect.inflate(-2 * HITBOX_INSET, -2 * HITBOX_INSET)


__all__ = ["Bird"]
