"""pygame drawing for every game state.

Nothing in here mutates game state; the renderer only reads the state
machine and its current session.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import pygame

from pipes import Pipe
from scores import ScoreStore
from session import Session
from settings import (
    BACKGROUND_STRIPE,
    BEAK_COLOR,
    BIRD_COLOR,
    BIRD_SIZE,
    GOLD,
    GRASS_COLOR,
    GROUND_COLOR,
    HITBOX_COLOR,
    PIPE_COLOR,
    PIPE_EDGE_COLOR,
    RED,
    SHADOW_COLOR,
    SKY_COLOR,
    SKYBLUE,
    TEXT_COLOR,
    Difficulty,
)
from state import GameState, GameStateMachine

PIPE_CAP_HEIGHT = 20
PIPE_CAP_OVERHANG = 5

CONTROLS_HELP = (
    "SPACE / LEFT CLICK - Jump",
    "ESC / P - Pause",
    "H - Toggle Hitboxes (debug)",
    "I - Toggle Invincibility (cheat)",
    "S - Toggle Slow Motion (cheat)",
)


class Renderer:
    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size()
        self.font_title = pygame.font.SysFont("arial", 64, bold=True)
        self.font_large = pygame.font.SysFont("arial", 40, bold=True)
        self.font_medium = pygame.font.SysFont("arial", 28)
        self.font_small = pygame.font.SysFont("arial", 20)
        self._bird_sprite = self._build_bird_sprite()

    def draw(self, machine: GameStateMachine, time_s: float = 0.0) -> None:
        session = machine.session
        self._draw_background(session)

        if machine.state is GameState.MENU:
            self._draw_menu(machine.difficulty, machine.scores, time_s)
            return

        self._draw_playfield(session, machine.scores)
        if machine.state is GameState.PAUSED:
            self._draw_pause_overlay()
        elif machine.state is GameState.GAME_OVER:
            self._draw_game_over(session, machine.scores)

    # Background

    def _draw_background(self, session: Session) -> None:
        self.surface.fill(SKY_COLOR)
        floor = session.bounds.floor
        offset = session.background_offset
        stripe = int(BACKGROUND_STRIPE)
        for i in range(self.width // stripe + 2):
            shade = (SKY_COLOR[0] + (i % 3) * 10, SKY_COLOR[1], SKY_COLOR[2])
            x = (offset + i * BACKGROUND_STRIPE) % (self.width + BACKGROUND_STRIPE) - BACKGROUND_STRIPE
            pygame.draw.rect(self.surface, shade, (int(x), 0, stripe, int(floor)))

        for i in range(5):
            x = (offset * 0.5 + i * 250.0) % (self.width + 100.0)
            y = 100 + i * 50
            for dx, radius in ((0, 40), (30, 50), (60, 40)):
                pygame.draw.circle(self.surface, TEXT_COLOR, (int(x + dx), y), radius)

    # Playfield

    def _draw_playfield(self, session: Session, scores: ScoreStore) -> None:
        floor = session.bounds.floor
        show_hitboxes = session.flags.show_hitboxes

        for pipe in session.pipes:
            self._draw_pipe(pipe, floor)
            if show_hitboxes:
                pygame.draw.rect(self.surface, HITBOX_COLOR, pipe.top_rect(), 2)
                pygame.draw.rect(self.surface, HITBOX_COLOR, pipe.bottom_rect(floor), 2)

        for particle in session.particles:
            size = max(1, int(particle.size))
            dot = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
            pygame.draw.circle(dot, (*particle.color, particle.alpha), (size, size), size)
            self.surface.blit(dot, (int(particle.x) - size, int(particle.y) - size))

        self._draw_bird(session)
        if show_hitboxes:
            pygame.draw.rect(self.surface, HITBOX_COLOR, session.bird.hitbox, 2)

        pygame.draw.rect(self.surface, GROUND_COLOR, (0, int(floor), self.width, self.height - int(floor)))
        for x in range(0, self.width, 20):
            pygame.draw.rect(self.surface, GRASS_COLOR, (x, int(floor), 20, 10))

        self._draw_hud(session, scores)

    def _draw_pipe(self, pipe: Pipe, floor: float) -> None:
        cap_width = pipe.width + 2 * PIPE_CAP_OVERHANG
        cap_x = int(pipe.x) - PIPE_CAP_OVERHANG
        bottom = pipe.bottom_rect(floor)
        shaft_bottom = pygame.Rect(bottom.x, bottom.y + PIPE_CAP_HEIGHT, bottom.width, bottom.height - PIPE_CAP_HEIGHT)
        caps = (
            pygame.Rect(cap_x, int(pipe.gap_top) - PIPE_CAP_HEIGHT, cap_width, PIPE_CAP_HEIGHT),
            pygame.Rect(cap_x, bottom.y, cap_width, PIPE_CAP_HEIGHT),
        )
        for rect in (pipe.top_rect(), shaft_bottom, *caps):
            pygame.draw.rect(self.surface, PIPE_COLOR, rect)
            pygame.draw.rect(self.surface, PIPE_EDGE_COLOR, rect, 3)

    def _build_bird_sprite(self) -> pygame.Surface:
        size = BIRD_SIZE + 20
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        cx = cy = size // 2
        half = BIRD_SIZE // 2
        pygame.draw.circle(sprite, BIRD_COLOR, (cx, cy), half)
        pygame.draw.circle(sprite, TEXT_COLOR, (cx + 8, cy - 5), 5)
        pygame.draw.circle(sprite, SHADOW_COLOR, (cx + 10, cy - 5), 3)
        pygame.draw.polygon(
            sprite,
            BEAK_COLOR,
            [(cx + half, cy), (cx + half + 10, cy - 5), (cx + half + 10, cy + 5)],
        )
        return sprite

    def _draw_bird(self, session: Session) -> None:
        bird = session.bird
        rotated = pygame.transform.rotate(self._bird_sprite, -bird.rotation)
        self.surface.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))

    def _draw_hud(self, session: Session, scores: ScoreStore) -> None:
        score_text = f"Score: {session.score}"
        self._text(score_text, self.font_large, SHADOW_COLOR, topleft=(20, 20))
        self._text(score_text, self.font_large, TEXT_COLOR, topleft=(18, 18))
        self._text(f"Best: {scores.best(session.difficulty)}", self.font_medium, GOLD, topleft=(20, 68))
        self._text(
            f"Difficulty: {session.difficulty.label}",
            self.font_small,
            TEXT_COLOR,
            topright=(self.width - 20, 24),
        )

        if session.flags.invincible:
            self._text("INVINCIBLE", self.font_medium, GOLD, center=(self.width / 2, 40))
        if session.flags.slow_motion:
            self._text("SLOW MOTION", self.font_medium, SKYBLUE, center=(self.width / 2, 80))

    # Screens

    def _draw_menu(self, selected: Difficulty, scores: ScoreStore, time_s: float) -> None:
        cx = self.width / 2
        self._text("FLAPPY BIRD", self.font_title, BIRD_COLOR, center=(cx, 70))

        bob = math.sin(time_s * 2.0) * 10
        self.surface.blit(self._bird_sprite, self._bird_sprite.get_rect(center=(int(cx), int(140 + bob))))

        lines: list[Tuple[str, pygame.font.Font, Tuple[int, int, int]]] = [
            ("Press SPACE or ENTER to Start", self.font_small, TEXT_COLOR),
            ("Select Difficulty:", self.font_medium, TEXT_COLOR),
        ]
        for number, tier in enumerate(Difficulty, start=1):
            lines.append((f"[{number}] {tier.label} - High Score: {scores.best(tier)}", self.font_small, GRASS_COLOR))
        lines.append((f"Current: {selected.label}", self.font_medium, GOLD))

        y = 190.0
        for text, font, color in lines:
            rect = self._text(text, font, color, midtop=(cx, y))
            y = rect.bottom + 8
        self._lines(CONTROLS_HELP, self.font_small, TEXT_COLOR, start_y=y + 10)

    def _draw_pause_overlay(self) -> None:
        self._overlay(180)
        cy = self.height / 2
        self._text("PAUSED", self.font_title, BIRD_COLOR, center=(self.width / 2, cy - 50))
        self._text("Press SPACE or ESC to Resume", self.font_medium, TEXT_COLOR, center=(self.width / 2, cy + 30))
        self._text("Press Q for Main Menu", self.font_small, TEXT_COLOR, center=(self.width / 2, cy + 80))

    def _draw_game_over(self, session: Session, scores: ScoreStore) -> None:
        self._overlay(200)
        cx, cy = self.width / 2, self.height / 2
        self._text("GAME OVER", self.font_title, RED, center=(cx, cy - 100))
        self._text(f"Score: {session.score}", self.font_large, TEXT_COLOR, center=(cx, cy - 20))
        if session.new_best:
            self._text("NEW HIGH SCORE!", self.font_medium, GOLD, center=(cx, cy + 30))
        else:
            self._text(
                f"High Score: {scores.best(session.difficulty)}",
                self.font_medium,
                BIRD_COLOR,
                center=(cx, cy + 30),
            )
        self._text("Press SPACE or R to Retry", self.font_medium, TEXT_COLOR, center=(cx, cy + 100))
        self._text("Press Q for Main Menu", self.font_small, TEXT_COLOR, center=(cx, cy + 150))

    # Helpers

    def _overlay(self, alpha: int) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.surface.blit(overlay, (0, 0))

    def _text(self, text: str, font: pygame.font.Font, color: Tuple[int, int, int], **anchor: object) -> pygame.Rect:
        rendered = font.render(text, True, color)
        rect = rendered.get_rect(**anchor)
        self.surface.blit(rendered, rect)
        return rect

    def _lines(self, lines: Sequence[str], font: pygame.font.Font, color: Tuple[int, int, int], *, start_y: float) -> None:
        y = start_y
        for line in lines:
            rect = self._text(line, font, color, midtop=(self.width / 2, y))
            y = rect.bottom + 4


__all__ = ["Renderer"]
