"""Orb Snake front end: pygame window, input mapping and the main loop."""

from __future__ import annotations

import logging
import random

import pygame

from .config import (
    FONT_NAME,
    FONT_SIZE,
    FPS,
    TICK_INTERVAL,
    TITLE_FONT_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .engine import GameStatus, SnakeEngine, Snapshot
from .render import button_rect, draw_frame
from .scheduler import FixedStepDriver

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}


class OrbSnake:
    """Wires the engine to a window: reads input, pumps ticks, draws snapshots."""

    def __init__(
        self,
        size: tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT),
        *,
        rng: random.Random | None = None,
    ) -> None:
        pygame.init()
        self.window = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        pygame.display.set_caption("Orb Snake")
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.title_font = pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True)

        self.engine = SnakeEngine(rng)
        self.driver = FixedStepDriver(self.engine, TICK_INTERVAL)
        self.button: pygame.Rect | None = None

    @property
    def status(self) -> GameStatus:
        return self.engine.status

    def snapshot(self) -> Snapshot:
        return self.engine.snapshot()

    # --- Intents -------------------------------------------------------

    def start_or_resume(self, now: int) -> None:
        """What the overlay button does: resume if paused, else (re)start."""
        if self.status is GameStatus.PAUSED:
            self.toggle_pause(now)
            return
        width, height = self.window.get_size()
        self.engine.initialize(width, height, now)
        self.driver.start(now)

    def toggle_pause(self, now: int) -> None:
        if not self.engine.toggle(now):
            return
        if self.status is GameStatus.RUNNING:
            self.driver.start(now)
        else:
            self.driver.stop()

    def handle_key(self, key: int, now: int) -> None:
        if key == pygame.K_SPACE:
            self.toggle_pause(now)
            return
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self.status is not GameStatus.RUNNING:
                self.start_or_resume(now)
            return
        if self.status is not GameStatus.RUNNING:
            return
        name = KEY_TO_DIRECTION.get(key)
        if name:
            self.engine.steer(name)

    # --- Input / events ------------------------------------------------

    def handle_events(self) -> bool:
        """Translate window events into intents; False means quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            now = pygame.time.get_ticks()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                self.handle_key(event.key, now)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.button is not None and self.button.collidepoint(event.pos):
                    self.start_or_resume(now)
        return True

    # --- Frame ---------------------------------------------------------

    def update(self, now: int) -> int:
        """Fire whatever ticks are due; stop the driver once the run ends."""
        fired = self.driver.pump(now)
        if self.status is GameStatus.OVER and self.driver.running:
            self.driver.stop()
        return fired

    def draw(self) -> None:
        hover = False
        if self.status is not GameStatus.RUNNING:
            hover = button_rect(self.window).collidepoint(pygame.mouse.get_pos())
        self.button = draw_frame(
            self.window, self.font, self.title_font, self.snapshot(), hover=hover
        )

    def start(self) -> None:
        """Run the main loop: handle events, step at a fixed rate, then render."""
        clock = pygame.time.Clock()
        running = True
        logger.info("Window open at %dx%d", *self.window.get_size())

        while running:
            clock.tick(FPS)
            running = self.handle_events()
            self.update(pygame.time.get_ticks())
            self.draw()
            pygame.display.update()

        pygame.quit()
