from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List

from garden import GardenGrid
from notification import Notification
from plant_instance import PlantInstance
from plant_type import PlantType, get_plant_type

logger = logging.getLogger(__name__)


class Tool(enum.Enum):
    PLANT = "plant"
    HARVEST = "harvest"


@dataclass
class SimulationState:
    """Everything the game mutates: the grid, the active tool and the message slot."""
    grid: GardenGrid
    selected_tool: Tool = Tool.PLANT
    notification: Notification = field(default_factory=Notification)


@dataclass
class GrowthEvent:
    row: int
    col: int
    plant: PlantInstance
    plant_type: PlantType

    @property
    def message(self) -> str:
        # stages are shown 1-based
        return (
            f"A {self.plant_type.name} in row {self.row}, col {self.col} "
            f"grew to stage {self.plant.stage_index + 1}!"
        )


def advance_growth(grid: GardenGrid, now: int) -> List[GrowthEvent]:
    """Advance every occupied cell by at most one stage."""
    events: List[GrowthEvent] = []
    for row, col, plant in grid.occupied():
        pt = get_plant_type(plant.plant_id)
        if pt is None:
            continue
        if plant.try_advance(pt, now):
            logger.debug(
                "%s at (%d, %d) reached stage %d", pt.name, row, col, plant.stage_index
            )
            events.append(GrowthEvent(row, col, plant, pt))
    return events


def tick(state: SimulationState, now: int) -> bool:
    """
    One simulation step. Returns True when something visible changed and the
    frame should be redrawn.
    """
    events = advance_growth(state.grid, now)
    expired = state.notification.update(now)
    for event in events:
        state.notification.show(event.message, now)
    return bool(events) or expired
