import pygame
import pytest

from config import BACKGROUND_COLOR, GRID_LINE_COLOR, TOOLBAR_COLOR
from notification import Notification
from plant_type import CARROT
from renderer import draw_toolbar, render


@pytest.fixture
def surface():
    return pygame.Surface((500, 590))


def color_at(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_empty_grid(surface, state, pygame_font):
    render(surface, pygame_font, state)
    assert color_at(surface, (25, 0)) == GRID_LINE_COLOR
    assert color_at(surface, (50, 25)) == GRID_LINE_COLOR
    assert color_at(surface, (25, 10)) == BACKGROUND_COLOR


def test_plant_drawn_in_stage_color(surface, state, pygame_font):
    state.grid.plant(0, 0, "carrot", now=0)
    state.grid.plant(2, 1, "carrot", now=0)
    state.grid.get(2, 1).stage_index = 2
    render(surface, pygame_font, state)

    assert color_at(surface, (8, 8)) == CARROT.stages[0].color
    assert color_at(surface, (58, 108)) == CARROT.stages[2].color
    # inset leaves a margin inside the tile
    assert color_at(surface, (3, 3)) == BACKGROUND_COLOR


def test_stage_is_clamped(surface, state, pygame_font):
    state.grid.plant(0, 0, "carrot", now=0)
    state.grid.get(0, 0).stage_index = 10
    render(surface, pygame_font, state)
    assert color_at(surface, (8, 8)) == CARROT.stages[-1].color


def test_unknown_plant_draws_nothing(surface, state, pygame_font):
    state.grid.plant(0, 0, "turnip", now=0)
    render(surface, pygame_font, state)
    assert color_at(surface, (8, 8)) == BACKGROUND_COLOR


def test_render_clears_previous_frame(surface, state, pygame_font):
    state.grid.plant(0, 0, "carrot", now=0)
    render(surface, pygame_font, state)
    state.grid.tile(0, 0).plant = None
    render(surface, pygame_font, state)
    assert color_at(surface, (8, 8)) == BACKGROUND_COLOR


def test_toolbar_background(surface, pygame_font):
    draw_toolbar(surface, pygame_font, 500, [], Notification())
    assert color_at(surface, (499, 505)) == TOOLBAR_COLOR
