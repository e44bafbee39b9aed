"""Bird-versus-world collision tests."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from bird import Bird
from pipes import Pipe
from settings import BIRD_SIZE, WorldBounds


class CollisionResult(Enum):
    NONE = "none"
    GROUND = "ground"
    CEILING = "ceiling"
    PIPE = "pipe"

    def __bool__(self) -> bool:
        return self is not CollisionResult.NONE


def check_collision(
    bird: Bird,
    pipes: Iterable[Pipe],
    bounds: WorldBounds,
    *,
    invincible: bool = False,
) -> CollisionResult:
    """Return the first thing the bird touches, or ``NONE``.

    World bounds are tested against the full sprite, pipes against the inset
    hitbox, oldest pipe first.
    """

    if invincible:
        return CollisionResult.NONE

    half = BIRD_SIZE / 2
    if bird.y - half <= 0:
        return CollisionResult.CEILING
    if bird.y + half >= bounds.floor:
        return CollisionResult.GROUND

    hitbox = bird.hitbox
    for pipe in pipes:
        if hitbox.right <= pipe.x or hitbox.left >= pipe.x + pipe.width:
            continue
        if hitbox.colliderect(pipe.top_rect()) or hitbox.colliderect(pipe.bottom_rect(bounds.floor)):
            return CollisionResult.PIPE
    return CollisionResult.NONE


__all__ = ["CollisionResult", "check_collision"]
