"""Menu / Playing / Paused / GameOver flow and the per-frame update."""

from __future__ import annotations

import logging
import random
from enum import Enum, auto
from typing import Iterable, Optional

from collision import CollisionResult, check_collision
from controls import Action
from pipes import GapSource
from scores import ScoreStore
from session import Session
from settings import (
    BACKGROUND_STRIPE,
    CRASH_BURST,
    JUMP_BURST,
    GOLD,
    RED,
    SCORE_BURST,
    SKYBLUE,
    Difficulty,
    WorldBounds,
)

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


TIER_SELECTION = {
    Action.SELECT_EASY: Difficulty.EASY,
    Action.SELECT_MEDIUM: Difficulty.MEDIUM,
    Action.SELECT_HARD: Difficulty.HARD,
    Action.SELECT_EXTREME: Difficulty.EXTREME,
}


class GameStateMachine:
    """Owns the current :class:`Session` and moves it between game states.

    Input arrives through :meth:`handle` as already edge-triggered actions;
    :meth:`tick` is called exactly once per frame and only advances the world
    while playing.
    """

    def __init__(
        self,
        scores: ScoreStore,
        *,
        bounds: Optional[WorldBounds] = None,
        difficulty: Difficulty = Difficulty.MEDIUM,
        gap_source: Optional[GapSource] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.scores = scores
        self.bounds = bounds or WorldBounds()
        self.difficulty = difficulty
        self._gap_source = gap_source
        self._rng = rng
        self.state = GameState.MENU
        self.session = self._new_session()
        self.exit_requested = False
        self.last_collision = CollisionResult.NONE

    def _new_session(self) -> Session:
        return Session.fresh(
            self.bounds,
            self.difficulty,
            gap_source=self._gap_source,
            rng=self._rng,
        )

    def _set_state(self, new_state: GameState) -> None:
        if new_state is self.state:
            return
        logger.info("State transition: %s -> %s", self.state.name, new_state.name)
        self.state = new_state

    def start_session(self) -> None:
        self.session = self._new_session()
        self.last_collision = CollisionResult.NONE
        self._set_state(GameState.PLAYING)

    # Input

    def handle_all(self, actions: Iterable[Action]) -> None:
        for action in actions:
            self.handle(action)

    def handle(self, action: Action) -> None:
        if action is Action.EXIT:
            self.exit_requested = True
            return

        if self.state is GameState.MENU:
            self._handle_menu(action)
        elif self.state is GameState.PLAYING:
            self._handle_playing(action)
        elif self.state is GameState.PAUSED:
            self._handle_paused(action)
        elif self.state is GameState.GAME_OVER:
            self._handle_game_over(action)

    def _handle_menu(self, action: Action) -> None:
        if action in TIER_SELECTION:
            self.difficulty = TIER_SELECTION[action]
            logger.debug("Difficulty selected: %s", self.difficulty.label)
        elif action in (Action.FLAP, Action.CONFIRM):
            self.start_session()
        elif action is Action.BACK:
            self.exit_requested = True

    def _handle_playing(self, action: Action) -> None:
        session = self.session
        flags = session.flags
        if action in (Action.FLAP, Action.CLICK):
            session.bird.jump()
            session.particles.spawn_burst(session.bird.x, session.bird.y, JUMP_BURST, (SKYBLUE,))
        elif action in (Action.BACK, Action.PAUSE):
            self._set_state(GameState.PAUSED)
        elif action is Action.TOGGLE_HITBOXES:
            flags.show_hitboxes = not flags.show_hitboxes
        elif action is Action.TOGGLE_INVINCIBLE:
            flags.invincible = not flags.invincible
        elif action is Action.TOGGLE_SLOW_MOTION:
            flags.slow_motion = not flags.slow_motion

    def _handle_paused(self, action: Action) -> None:
        if action in (Action.BACK, Action.PAUSE, Action.FLAP):
            self._set_state(GameState.PLAYING)
        elif action is Action.QUIT:
            self._set_state(GameState.MENU)

    def _handle_game_over(self, action: Action) -> None:
        if action in (Action.FLAP, Action.CONFIRM):
            self.start_session()
        elif action in (Action.BACK, Action.QUIT):
            self._set_state(GameState.MENU)

    # Frame update

    def tick(self, dt_scale: float = 1.0) -> None:
        if self.state is not GameState.PLAYING:
            return

        session = self.session
        scale = dt_scale * session.flags.time_scale
        bird = session.bird

        bird.update(scale)

        session.pipes.advance(session.difficulty.speed, scale)
        session.pipes.maybe_spawn(self.bounds.width)

        for pipe in session.pipes.check_scoring(bird.x):
            session.score += 1
            session.particles.spawn_burst(pipe.center_x, self.bounds.height / 2, SCORE_BURST, (GOLD,))

        result = check_collision(bird, session.pipes, self.bounds, invincible=session.flags.invincible)
        if result:
            self._crash(result)

        session.particles.update(scale)

        session.background_offset -= scale
        if session.background_offset <= -BACKGROUND_STRIPE:
            session.background_offset = 0.0

    def _crash(self, result: CollisionResult) -> None:
        session = self.session
        self.last_collision = result
        session.particles.spawn_burst(session.bird.x, session.bird.y, CRASH_BURST, (RED,))
        session.new_best = self.scores.record_if_better(session.difficulty, session.score)
        logger.info(
            "Crashed into %s on %s with score %d",
            result.value,
            session.difficulty.label,
            session.score,
        )
        self._set_state(GameState.GAME_OVER)


__all__ = ["GameState", "GameStateMachine", "TIER_SELECTION"]
