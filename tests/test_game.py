"""Headless smoke tests for the pygame front end."""

import random

import pygame
import pytest

from orb_snake.engine import GameStatus
from orb_snake.game import OrbSnake


@pytest.fixture
def game(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    app = OrbSnake((400, 450), rng=random.Random(5))
    yield app
    pygame.quit()


class TestOrbSnake:
    def test_waits_for_start(self, game):
        assert game.status is GameStatus.NOT_STARTED
        game.draw()
        assert game.button is not None

    def test_enter_starts_and_ticks(self, game):
        game.handle_key(pygame.K_RETURN, 0)
        assert game.status is GameStatus.RUNNING
        assert game.snapshot().segments[0] == (200, 240)

        assert game.update(350) == 3
        game.draw()
        assert game.button is None

    def test_space_pauses_and_resumes(self, game):
        game.start_or_resume(0)
        game.handle_key(pygame.K_SPACE, 100)
        assert game.status is GameStatus.PAUSED
        assert game.update(5000) == 0
        game.draw()
        assert game.button is not None

        game.handle_key(pygame.K_SPACE, 6000)
        assert game.status is GameStatus.RUNNING
        assert game.update(6100) == 1

    def test_arrow_keys_steer(self, game):
        game.start_or_resume(0)
        game.handle_key(pygame.K_UP, 10)
        assert game.engine.pending_direction == (0, -20)
        game.handle_key(pygame.K_DOWN, 20)
        assert game.engine.pending_direction == (0, 20)
        game.handle_key(pygame.K_LEFT, 30)
        assert game.engine.pending_direction == (0, 20)

    def test_button_resumes_when_paused(self, game):
        game.start_or_resume(0)
        game.toggle_pause(100)
        game.start_or_resume(200)
        assert game.status is GameStatus.RUNNING
        assert game.engine.clock.game_start_time == 100

    def test_driver_stops_after_game_over(self, game):
        game.start_or_resume(0)
        game.engine.status = GameStatus.OVER
        game.update(100)
        assert not game.driver.running
        game.draw()
        assert game.button is not None
