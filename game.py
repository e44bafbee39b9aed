"""Pygame front end: window, clock, input pump and the 60 FPS frame loop."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Union

import pygame

from controls import Action, actions_from_events
from pipes import RandomGapSource
from render import Renderer
from scores import ScoreStore
from settings import FPS, HEIGHT, SCORES_FILE, WIDTH, Difficulty, WorldBounds
from state import GameStateMachine

logger = logging.getLogger(__name__)


class FlappyGame:
    def __init__(
        self,
        *,
        difficulty: Difficulty = Difficulty.MEDIUM,
        scores_path: Union[str, Path] = SCORES_FILE,
        seed: Optional[int] = None,
        enable_hand_control: bool = False,
        debug_hand: bool = False,
    ) -> None:
        pygame.init()
        pygame.display.set_caption("Flappy Bird - Difficulty Tiers")
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)

        self.scores = ScoreStore(scores_path)
        self.scores.load()

        rng = random.Random(seed)
        self.machine = GameStateMachine(
            self.scores,
            bounds=WorldBounds(WIDTH, HEIGHT),
            difficulty=difficulty,
            gap_source=RandomGapSource(rng),
            rng=rng,
        )

        self.detector = None
        if enable_hand_control:
            try:
                from hand_control import HandFlapDetector

                self.detector = HandFlapDetector(debug=debug_hand)
            except Exception as exc:  # pragma: no cover - hardware dependent
                logger.warning("Hand control disabled: %s", exc)
                self.detector = None

    def poll_actions(self) -> List[Action]:
        actions = actions_from_events(pygame.event.get())
        # One gesture flap at most per frame, delivered like a SPACE press.
        if self.detector is not None and self.detector.poll_flap():
            actions.append(Action.FLAP)
        return actions

    def run(self) -> None:
        try:
            while not self.machine.exit_requested:
                self.clock.tick(FPS)
                self.machine.handle_all(self.poll_actions())
                self.machine.tick()
                self.renderer.draw(self.machine, pygame.time.get_ticks() / 1000.0)
                pygame.display.flip()
        finally:
            self._shutdown()

    def _shutdown(self) -> None:
        if self.detector is not None:
            self.detector.stop()
            self.detector = None
        pygame.quit()


__all__ = ["FlappyGame"]
