import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from config import GRID_PIXELS, GRID_SIZE
from garden import GardenGrid
from simulation import SimulationState


@pytest.fixture
def grid() -> GardenGrid:
    """A fresh, empty 10x10 grid on a 500 pixel surface."""
    return GardenGrid(GRID_PIXELS / GRID_SIZE)


@pytest.fixture
def state(grid) -> SimulationState:
    return SimulationState(grid=grid)


@pytest.fixture
def pygame_font():
    pygame.init()
    yield pygame.font.Font(None, 16)
    pygame.quit()
