"""
Drawing for the garden grid and the toolbar underneath it.

Every call redraws the whole area from the current state; nothing is cached
between frames.
"""
from __future__ import annotations

from typing import Iterable

import pygame

from button import ToolButton
from config import BACKGROUND_COLOR, GRID_LINE_COLOR, MESSAGE_COLOR, TOOLBAR_COLOR
from notification import Notification
from simulation import SimulationState


def draw_grid_lines(surface: pygame.Surface, rows: int, cols: int, tile_size: float) -> None:
    width = round(cols * tile_size)
    height = round(rows * tile_size)
    for i in range(rows + 1):
        y = round(i * tile_size)
        pygame.draw.line(surface, GRID_LINE_COLOR, (0, y), (width, y), 1)
    for i in range(cols + 1):
        x = round(i * tile_size)
        pygame.draw.line(surface, GRID_LINE_COLOR, (x, 0), (x, height), 1)


def render(surface: pygame.Surface, font: pygame.font.Font, state: SimulationState) -> None:
    grid = state.grid
    grid_rect = pygame.Rect(
        0, 0, round(grid.cols * grid.tile_size), round(grid.rows * grid.tile_size)
    )
    surface.fill(BACKGROUND_COLOR, grid_rect)
    draw_grid_lines(surface, grid.rows, grid.cols, grid.tile_size)
    for tile in grid.all_tiles():
        tile.draw(surface, font)


def draw_toolbar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    top: int,
    buttons: Iterable[ToolButton],
    notification: Notification,
) -> None:
    panel_rect = pygame.Rect(0, top, surface.get_width(), surface.get_height() - top)
    pygame.draw.rect(surface, TOOLBAR_COLOR, panel_rect)

    for btn in buttons:
        btn.draw(surface, font)

    surf = font.render(notification.text, True, MESSAGE_COLOR)
    surface.blit(surf, (10, panel_rect.bottom - surf.get_height() - 10))
