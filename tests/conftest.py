import os

# Headless pygame for every test that touches a surface or event.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from src.snake.config import Config
from src.snake.game import Game
from src.snake.grid import Grid


@pytest.fixture
def make_game():
    def _make(width=20, height=20, seed=0, **cfg):
        return Game(Grid(width, height), np.random.default_rng(seed), Config(seed=seed, **cfg))
    return _make


@pytest.fixture
def game(make_game):
    return make_game()
