"""Scrolling pipe pairs: spawning, movement, retirement and pass scoring."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Protocol

import pygame

from settings import GAP_MARGIN, PIPE_SPACING, PIPE_WIDTH, SPAWN_MARGIN, WorldBounds


@dataclass
class Pipe:
    x: float
    gap_top: float
    gap_height: float
    scored: bool = False
    width: int = PIPE_WIDTH

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.gap_height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def top_rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), 0, self.width, int(self.gap_top))

    def bottom_rect(self, floor: float) -> pygame.Rect:
        return pygame.Rect(
            int(self.x),
            int(self.gap_bottom),
            self.width,
            int(floor - self.gap_bottom),
        )

    def is_off_screen(self) -> bool:
        return self.x < -self.width


class GapSource(Protocol):
    def next_gap_top(self, low: float, high: float) -> float:
        ...


class RandomGapSource:
    """Uniform gap placement backed by a seedable ``random.Random``."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def next_gap_top(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)


class PipeField:
    """Ordered collection of pipes, oldest first.

    Parameters
    ----------
    bounds:
        World geometry; the gap is always kept inside
        ``[GAP_MARGIN, bounds.floor - GAP_MARGIN]``.
    gap_height:
        Vertical opening of every pipe spawned by this field.
    gap_source:
        Supplies ``gap_top`` for new pipes. Defaults to :class:`RandomGapSource`.
    spacing:
        Horizontal distance the newest pipe must travel before the next spawns.
    """

    def __init__(
        self,
        bounds: WorldBounds,
        gap_height: float,
        *,
        gap_source: Optional[GapSource] = None,
        spacing: float = PIPE_SPACING,
    ) -> None:
        self.bounds = bounds
        self.gap_height = gap_height
        self.gap_source: GapSource = gap_source or RandomGapSource()
        self.spacing = spacing
        self.pipes: List[Pipe] = []

    def __iter__(self) -> Iterator[Pipe]:
        return iter(self.pipes)

    def __len__(self) -> int:
        return len(self.pipes)

    def advance(self, speed: float, dt_scale: float = 1.0) -> None:
        shift = speed * dt_scale
        for pipe in self.pipes:
            pipe.x -= shift
        self.pipes = [pipe for pipe in self.pipes if not pipe.is_off_screen()]

    def gap_range(self) -> tuple[float, float]:
        low = float(GAP_MARGIN)
        high = self.bounds.floor - GAP_MARGIN - self.gap_height
        return low, max(low, high)

    def maybe_spawn(self, world_width: float) -> Optional[Pipe]:
        spawn_x = world_width + SPAWN_MARGIN
        if self.pipes and spawn_x - self.pipes[-1].x < self.spacing:
            return None

        low, high = self.gap_range()
        gap_top = min(max(self.gap_source.next_gap_top(low, high), low), high)
        pipe = Pipe(x=spawn_x, gap_top=gap_top, gap_height=self.gap_height)
        self.pipes.append(pipe)
        return pipe

    def check_scoring(self, body_x: float) -> List[Pipe]:
        """Mark and return every pipe whose centre the bird has just passed.

        The reference point is the pipe's horizontal centre
        (``x + width / 2``): a pipe scores on the first call where that centre
        is strictly left of ``body_x``, and never again.
        """

        passed = []
        for pipe in self.pipes:
            if not pipe.scored and pipe.center_x < body_x:
                pipe.scored = True
                passed.append(pipe)
        return passed


__all__ = ["Pipe", "GapSource", "RandomGapSource", "PipeField"]
