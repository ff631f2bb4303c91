from __future__ import annotations

from typing import Optional
import pygame

from config import LABEL_COLOR
from plant_instance import PlantInstance
from plant_type import get_plant_type


class Tile:
    def __init__(self, row: int, col: int, rect: pygame.Rect):
        self.row = row
        self.col = col
        self.rect = rect
        self.plant: Optional[PlantInstance] = None

    def is_empty(self) -> bool:
        return self.plant is None

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """
        Draw the plant on this tile: an inset square in the stage color with
        the stage label just below the tile center.
        """
        if self.plant is None:
            return
        pt = get_plant_type(self.plant.plant_id)
        if pt is None:
            return

        stage = pt.stage(self.plant.stage_index)
        plant_rect = pygame.Rect(
            self.rect.left + round(self.rect.width * 0.1),
            self.rect.top + round(self.rect.height * 0.1),
            round(self.rect.width * 0.8),
            round(self.rect.height * 0.8),
        )
        pygame.draw.rect(surface, stage.color, plant_rect)

        text_surf = font.render(stage.label, True, LABEL_COLOR)
        text_rect = text_surf.get_rect(
            center=(self.rect.centerx, self.rect.centery + 5)
        )
        surface.blit(text_surf, text_rect)
