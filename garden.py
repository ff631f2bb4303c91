from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import pygame

from config import GRID_SIZE
from plant_instance import PlantInstance
from plant_type import get_plant_type
from tile import Tile

logger = logging.getLogger(__name__)


class PlantResult(enum.Enum):
    PLANTED = "planted"
    OCCUPIED = "occupied"


class HarvestResult(enum.Enum):
    HARVESTED = "harvested"
    NOT_READY = "not_ready"
    EMPTY = "empty"


@dataclass
class HarvestOutcome:
    result: HarvestResult
    plant: Optional[PlantInstance] = None


class GardenGrid:
    """
    Fixed-size grid of tiles. Cells are addressed by (row, col); every
    accessor expects in-bounds coordinates and raises IndexError otherwise.
    """

    def __init__(self, tile_size: float, rows: int = GRID_SIZE, cols: int = GRID_SIZE):
        self.rows = rows
        self.cols = cols
        self.tile_size = tile_size
        self.tiles: List[List[Tile]] = self.create_tiles()

    def create_tiles(self) -> List[List[Tile]]:
        tiles = []
        size = round(self.tile_size)
        for r in range(self.rows):
            row = []
            for c in range(self.cols):
                rect = pygame.Rect(
                    round(c * self.tile_size), round(r * self.tile_size), size, size
                )
                row.append(Tile(r, c, rect))
            tiles.append(row)
        return tiles

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def tile(self, row: int, col: int) -> Tile:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return self.tiles[row][col]

    def get(self, row: int, col: int) -> Optional[PlantInstance]:
        return self.tile(row, col).plant

    def plant(self, row: int, col: int, plant_id: str, now: int) -> PlantResult:
        tile = self.tile(row, col)
        if not tile.is_empty():
            return PlantResult.OCCUPIED
        tile.plant = PlantInstance(plant_id, now)
        logger.info("Planted %s at row %d, col %d", plant_id, row, col)
        return PlantResult.PLANTED

    def harvest(self, row: int, col: int) -> HarvestOutcome:
        tile = self.tile(row, col)
        plant = tile.plant
        if plant is None:
            return HarvestOutcome(HarvestResult.EMPTY)
        pt = get_plant_type(plant.plant_id)
        if pt is None or not plant.is_mature(pt):
            return HarvestOutcome(HarvestResult.NOT_READY, plant)
        tile.plant = None
        logger.info("Harvested %s at row %d, col %d", plant.plant_id, row, col)
        return HarvestOutcome(HarvestResult.HARVESTED, plant)

    def occupied(self) -> Iterator[Tuple[int, int, PlantInstance]]:
        for row in self.tiles:
            for tile in row:
                if tile.plant is not None:
                    yield tile.row, tile.col, tile.plant

    def all_tiles(self) -> Iterator[Tile]:
        for row in self.tiles:
            yield from row
