from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from config import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlantStage:
    color: Color
    label: str


@dataclass(frozen=True)
class PlantType:
    """
    Immutable definition of a crop type.

    - plant_id: catalog key
    - name: display name
    - stages: growth stages, index 0 is just planted, the last one is mature
    - stage_duration_ms: base time unit for leaving a stage
    - harvest_yield: what the player receives on harvest
    """
    plant_id: str
    name: str
    stages: Tuple[PlantStage, ...]
    stage_duration_ms: int
    harvest_yield: str

    def __post_init__(self) -> None:
        if not self.stages:
            raise ValueError(f"{self.plant_id} needs at least one stage")

    @property
    def stage_count(self) -> int:
        return len(self.stages)

    @property
    def last_stage_index(self) -> int:
        return len(self.stages) - 1

    def stage(self, index: int) -> PlantStage:
        """Return the stage at `index`, clamped into the valid range."""
        return self.stages[max(0, min(index, self.last_stage_index))]


CARROT = PlantType(
    plant_id="carrot",
    name="Carrot",
    stages=(
        PlantStage((139, 69, 19), "Seedling"),
        PlantStage((255, 165, 0), "Growing"),
        PlantStage((255, 140, 0), "Mature"),
    ),
    stage_duration_ms=5000,
    harvest_yield="1 Carrot",
)

PLANT_CATALOG: Dict[str, PlantType] = {CARROT.plant_id: CARROT}

DEFAULT_PLANT_ID = CARROT.plant_id


def get_plant_type(plant_id: Optional[str]) -> Optional[PlantType]:
    if plant_id is None:
        return None
    pt = PLANT_CATALOG.get(plant_id)
    if pt is None:
        logger.debug("Unknown plant type %r", plant_id)
    return pt
