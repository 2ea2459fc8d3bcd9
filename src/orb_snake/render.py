"""Drawing helpers: every function renders a Snapshot, none mutates it."""

from __future__ import annotations

from typing import Sequence

import pygame

from .config import GRID_SIZE, PALETTE, UI_HEIGHT
from .engine import GameStatus, Snapshot
from .geometry import Position

OVERLAY_TEXT: dict[GameStatus, tuple[str, str]] = {
    GameStatus.NOT_STARTED: ("Orb Snake", "Start"),
    GameStatus.PAUSED: ("Paused", "Resume"),
    GameStatus.OVER: ("Game Over!", "Try Again"),
}


def draw_orb(surface: pygame.Surface, pos: Position) -> None:
    """Yellow orb with a soft halo."""
    center = (pos[0] + GRID_SIZE // 2, pos[1] + GRID_SIZE // 2)
    radius = GRID_SIZE // 2 - 2

    glow_size = GRID_SIZE * 2
    glow = pygame.Surface((glow_size, glow_size), pygame.SRCALPHA)
    pygame.draw.circle(
        glow, PALETTE["orb_glow"], (glow_size // 2, glow_size // 2), radius + 6
    )
    surface.blit(glow, glow.get_rect(center=center))
    pygame.draw.circle(surface, PALETTE["orb"], center, radius)


def draw_snake(surface: pygame.Surface, segments: Sequence[Position]) -> None:
    for idx, (x, y) in enumerate(segments):
        color = PALETTE["head"] if idx == 0 else PALETTE["body"]
        pygame.draw.rect(
            surface, color, pygame.Rect(x + 1, y + 1, GRID_SIZE - 2, GRID_SIZE - 2)
        )
        if idx == 0:
            pygame.draw.rect(surface, PALETTE["eye"], pygame.Rect(x + 4, y + 4, 4, 4))


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Score, run time and orb countdown inside the top band."""
    width = surface.get_width()
    pygame.draw.rect(surface, PALETTE["hud"], pygame.Rect(0, 0, width, UI_HEIGHT))
    pygame.draw.line(
        surface, PALETTE["hud_line"], (0, UI_HEIGHT - 1), (width, UI_HEIGHT - 1)
    )

    items = (
        f"Score: {snap.score}",
        f"Time: {snap.elapsed_seconds}s",
        f"Orb: {snap.orb_remaining_seconds:.1f}s",
    )
    slot = width // len(items)
    for idx, text in enumerate(items):
        surf = font.render(text, True, PALETTE["text"])
        rect = surf.get_rect(center=(slot * idx + slot // 2, UI_HEIGHT // 2))
        surface.blit(surf, rect)


def overlay_lines(snap: Snapshot) -> list[str]:
    title, _ = OVERLAY_TEXT[snap.status]
    lines = [title]
    if snap.status is GameStatus.OVER:
        lines.append(f"Final Score: {snap.score}")
    return lines


def button_rect(surface: pygame.Surface) -> pygame.Rect:
    rect = pygame.Rect(0, 0, 180, 48)
    rect.center = (surface.get_width() // 2, surface.get_height() // 2 + 70)
    return rect


def draw_overlay(
    surface: pygame.Surface,
    title_font: pygame.font.Font,
    font: pygame.font.Font,
    snap: Snapshot,
    *,
    hover: bool = False,
) -> pygame.Rect:
    """Dim the board, print the status and draw the action button.

    Returns the button rect so the caller can hit-test clicks against it.
    """
    width, height = surface.get_size()
    shade = pygame.Surface((width, height), pygame.SRCALPHA)
    shade.fill(PALETTE["overlay"])
    surface.blit(shade, (0, 0))

    for idx, text in enumerate(overlay_lines(snap)):
        face = title_font if idx == 0 else font
        surf = face.render(text, True, PALETTE["text"])
        center = (width // 2, height // 2 - 40 + idx * 50)
        surface.blit(surf, surf.get_rect(center=center))

    rect = button_rect(surface)
    pygame.draw.rect(
        surface,
        PALETTE["button_hover"] if hover else PALETTE["button"],
        rect,
        border_radius=8,
    )
    _, label = OVERLAY_TEXT[snap.status]
    surf = font.render(label, True, PALETTE["button_text"])
    surface.blit(surf, surf.get_rect(center=rect.center))
    return rect


def draw_frame(
    surface: pygame.Surface,
    font: pygame.font.Font,
    title_font: pygame.font.Font,
    snap: Snapshot,
    *,
    hover: bool = False,
) -> pygame.Rect | None:
    """Render one whole frame; returns the overlay button rect if one is shown."""
    surface.fill(PALETTE["background"])
    if snap.orb is not None:
        draw_orb(surface, snap.orb)
    draw_snake(surface, snap.segments)
    draw_hud(surface, font, snap)

    if snap.status is GameStatus.RUNNING:
        return None
    return draw_overlay(surface, title_font, font, snap, hover=hover)
