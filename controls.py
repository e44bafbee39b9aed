"""Translate raw pygame events into abstract, one-shot game actions."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, List

import pygame


class Action(Enum):
    FLAP = auto()
    CLICK = auto()
    CONFIRM = auto()
    BACK = auto()
    PAUSE = auto()
    QUIT = auto()
    SELECT_EASY = auto()
    SELECT_MEDIUM = auto()
    SELECT_HARD = auto()
    SELECT_EXTREME = auto()
    TOGGLE_HITBOXES = auto()
    TOGGLE_INVINCIBLE = auto()
    TOGGLE_SLOW_MOTION = auto()
    EXIT = auto()


KEY_ACTIONS = {
    pygame.K_SPACE: Action.FLAP,
    pygame.K_UP: Action.FLAP,
    pygame.K_RETURN: Action.CONFIRM,
    pygame.K_KP_ENTER: Action.CONFIRM,
    pygame.K_r: Action.CONFIRM,
    pygame.K_ESCAPE: Action.BACK,
    pygame.K_p: Action.PAUSE,
    pygame.K_q: Action.QUIT,
    pygame.K_1: Action.SELECT_EASY,
    pygame.K_2: Action.SELECT_MEDIUM,
    pygame.K_3: Action.SELECT_HARD,
    pygame.K_4: Action.SELECT_EXTREME,
    pygame.K_h: Action.TOGGLE_HITBOXES,
    pygame.K_i: Action.TOGGLE_INVINCIBLE,
    pygame.K_s: Action.TOGGLE_SLOW_MOTION,
}


def actions_from_events(events: Iterable[pygame.event.Event]) -> List[Action]:
    """Map this frame's events to actions, in arrival order.

    Only press events are considered, so a held key yields a single action.
    """

    actions: List[Action] = []
    for event in events:
        if event.type == pygame.QUIT:
            actions.append(Action.EXIT)
        elif event.type == pygame.KEYDOWN:
            action = KEY_ACTIONS.get(event.key)
            if action is not None:
                actions.append(action)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            actions.append(Action.CLICK)
    return actions


__all__ = ["Action", "KEY_ACTIONS", "actions_from_events"]
