import os

# pygame без окна: до первого импорта pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from field import Field


@pytest.fixture
def small_field():
    """Поле 5x5 (окно 175x175, клетка 25)"""
    return Field(175, 175, 25)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def pygame_init():
    pygame.init()
    pygame.display.set_mode((1, 1))
    pygame.event.clear()
    yield
    pygame.quit()
