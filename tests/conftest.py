import os
import random

import pytest

# Headless pygame for render tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from core.engine import RoundEngine
from core.generator import LevelGenerator


@pytest.fixture()
def rng():
    return random.Random(20240607)


@pytest.fixture()
def generator(rng):
    return LevelGenerator(rng)


@pytest.fixture()
def engine(generator):
    return RoundEngine(generator)


@pytest.fixture()
def playing(engine):
    engine.start()
    return engine


def wrong_index(engine):
    """Return a valid cell index that is not the current target."""
    return (engine.current_session().round.target_index + 1) % 25
