"""Short-lived burst particles shown on jumps, passes and crashes."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from settings import PARTICLE_DECAY, PARTICLE_GRAVITY

Color = Tuple[int, int, int]


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: Color
    life: float = 1.0

    def update(self, dt_scale: float = 1.0) -> None:
        self.x += self.vx * dt_scale
        self.y += self.vy * dt_scale
        self.vy += PARTICLE_GRAVITY * dt_scale
        self.life -= PARTICLE_DECAY * dt_scale

    @property
    def alpha(self) -> int:
        return int(255 * max(0.0, min(1.0, self.life)))

    def is_dead(self) -> bool:
        return self.life <= 0.0


class ParticleSystem:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self.particles: List[Particle] = []

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def __len__(self) -> int:
        return len(self.particles)

    def spawn_burst(self, x: float, y: float, count: int, palette: Sequence[Color]) -> None:
        rng = self._rng
        for _ in range(count):
            self.particles.append(
                Particle(
                    x=x,
                    y=y,
                    vx=rng.uniform(-3.0, 3.0),
                    vy=rng.uniform(-5.0, -1.0),
                    size=rng.uniform(2.0, 6.0),
                    color=rng.choice(palette),
                )
            )

    def update(self, dt_scale: float = 1.0) -> None:
        for particle in self.particles:
            particle.update(dt_scale)
        self.particles = [p for p in self.particles if not p.is_dead()]

    def clear(self) -> None:
        self.particles.clear()


__all__ = ["Particle", "ParticleSystem"]
