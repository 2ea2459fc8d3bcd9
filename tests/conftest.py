import random

import pytest

from orb_snake.engine import Orb, SnakeEngine

FAR_AWAY = (0, 400)


@pytest.fixture
def far_away():
    """A cell off the snake's starting row, where quiet_engine parks the orb."""
    return FAR_AWAY


@pytest.fixture
def engine():
    """Engine on the 400x450 reference viewport, started at t=0."""
    eng = SnakeEngine(random.Random(1234))
    eng.initialize(400, 450, 0)
    return eng


@pytest.fixture
def quiet_engine(engine, far_away):
    """Same engine with the orb parked away from the snake's row."""
    engine.orb = Orb(far_away, 0)
    return engine
