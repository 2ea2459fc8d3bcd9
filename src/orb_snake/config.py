"""Centralized configuration and palette definitions for Orb Snake."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.getenv("ORB_SNAKE_LOG_LEVEL", "WARNING").upper()

GRID_SIZE: int = 20  # side of one snake segment / orb cell, in pixels
UI_HEIGHT: int = 50  # HUD band at the top, orbs never spawn there
ORB_LIFESPAN: int = 5000  # ms
TICK_INTERVAL: int = 100  # ms => 10 moves per second

MAX_SPAWN_ATTEMPTS: int = 1000
MAX_CATCH_UP_TICKS: int = 5

WINDOW_WIDTH: int = 800
WINDOW_HEIGHT: int = 600
FPS: int = 60
FONT_NAME: str = "consolas"
FONT_SIZE: int = 24
TITLE_FONT_SIZE: int = 48

# name -> (axis, sign)
DIRECTIONS: dict[str, tuple[str, int]] = {
    "UP": ("y", -1),
    "DOWN": ("y", 1),
    "LEFT": ("x", -1),
    "RIGHT": ("x", 1),
}

PALETTE: dict[str, tuple[int, ...]] = {
    "background": (26, 26, 26),
    "hud": (17, 17, 17),
    "hud_line": (46, 46, 46),
    "orb": (241, 196, 15),
    "orb_glow": (241, 196, 15, 70),
    "head": (46, 204, 113),
    "body": (39, 174, 96),
    "eye": (255, 255, 255),
    "text": (236, 240, 241),
    "overlay": (0, 0, 0, 170),
    "button": (46, 204, 113),
    "button_hover": (39, 174, 96),
    "button_text": (17, 17, 17),
}
