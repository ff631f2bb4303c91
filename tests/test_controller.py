import pygame
import pytest

from button import ToolButton
from controller import InputController
from simulation import Tool


@pytest.fixture
def controller(state):
    return InputController(state)


@pytest.mark.parametrize(
    "pos, cell",
    [
        ((0, 0), (0, 0)),
        ((499, 499), (9, 9)),
        ((49, 50), (1, 0)),
        ((120.5, 260.9), (5, 2)),
    ],
)
def test_pixel_to_cell(controller, pos, cell):
    assert controller.pixel_to_cell(*pos) == cell


@pytest.mark.parametrize("pos", [(500, 500), (500, 0), (0, 500), (-1, 10), (10, -1)])
def test_pixel_outside_grid(controller, pos):
    assert controller.pixel_to_cell(*pos) is None


def test_click_outside_grid_is_ignored(controller, state):
    assert controller.handle_click(500, 500, now=0) is False
    assert list(state.grid.occupied()) == []
    assert state.notification.is_idle


def test_plant_click(controller, state):
    assert controller.handle_click(175, 160, now=42) is True
    plant = state.grid.get(3, 3)
    assert plant.stage_index == 0
    assert plant.stage_started_at == 42
    assert state.notification.text == "Planted a carrot seed at row 3, col 3!"


def test_plant_click_on_occupied(controller, state):
    controller.handle_click(10, 10, now=0)
    controller.handle_click(10, 10, now=500)
    assert state.grid.get(0, 0).stage_started_at == 0
    assert state.notification.text == "This plot is already occupied!"


def test_select_tool_messages(controller, state):
    controller.select_tool(Tool.HARVEST, now=0)
    assert state.selected_tool is Tool.HARVEST
    assert state.notification.text.startswith("Harvest tool selected.")
    controller.select_tool(Tool.PLANT, now=0)
    assert state.selected_tool is Tool.PLANT
    assert state.notification.text.startswith("Plant tool selected.")


def test_harvest_empty(controller, state):
    controller.select_tool(Tool.HARVEST, now=0)
    controller.handle_click(10, 10, now=0)
    assert state.notification.text == "Nothing to harvest here!"


def test_harvest_not_ready(controller, state):
    controller.handle_click(260, 60, now=0)
    controller.select_tool(Tool.HARVEST, now=0)
    controller.handle_click(260, 60, now=10)
    assert state.grid.get(1, 5) is not None
    assert state.notification.text == "This Carrot is not fully grown yet (Stage 1/3)!"


def test_harvest_mature(controller, state):
    controller.handle_click(260, 60, now=0)
    state.grid.get(1, 5).stage_index = 2
    controller.select_tool(Tool.HARVEST, now=0)
    controller.handle_click(260, 60, now=10)
    assert state.grid.get(1, 5) is None
    assert state.notification.text == "Harvested 1 Carrot from row 1, col 5!"


def test_tool_buttons_follow_selection(controller):
    selected = []
    plant_btn = ToolButton(pygame.Rect(0, 0, 50, 20), "Plant", Tool.PLANT, selected.append)
    harvest_btn = ToolButton(
        pygame.Rect(60, 0, 50, 20), "Harvest", Tool.HARVEST, selected.append
    )
    controller.bind_buttons([plant_btn, harvest_btn])
    assert plant_btn.active and not harvest_btn.active

    controller.select_tool(Tool.HARVEST, now=0)
    assert harvest_btn.active and not plant_btn.active


def test_button_routes_left_click():
    selected = []
    btn = ToolButton(pygame.Rect(0, 0, 50, 20), "Harvest", Tool.HARVEST, selected.append)
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10))
    miss = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 10))
    right = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10))

    assert btn.handle_event(click) is True
    assert btn.handle_event(miss) is False
    assert btn.handle_event(right) is False
    assert selected == [Tool.HARVEST]
