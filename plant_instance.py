from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plant_type import PlantType


class PlantInstance:
    """
    A single planted crop on a tile.

    Stores:
    - plant_id: which crop type this is (key into the plant catalog)
    - stage_index: current growth stage, never decreases
    - stage_started_at: ms timestamp when the current stage began
    """

    def __init__(self, plant_id: str, stage_started_at: int, stage_index: int = 0):
        self.plant_id = plant_id
        self.stage_index = stage_index
        self.stage_started_at = stage_started_at

    def is_mature(self, plant_type: "PlantType") -> bool:
        return self.stage_index >= plant_type.last_stage_index

    def required_duration(self, plant_type: "PlantType") -> int:
        """
        Time needed to leave the current stage. Grows linearly with the
        stage number: stage 0 needs 1x the base duration, stage 1 needs 2x.
        """
        return plant_type.stage_duration_ms * (self.stage_index + 1)

    def try_advance(self, plant_type: "PlantType", now: int) -> bool:
        """
        Move to the next stage if enough time has passed in this one.

        Advances at most one stage per call, even when several durations
        have elapsed.
        """
        if self.is_mature(plant_type):
            return False
        if now - self.stage_started_at < self.required_duration(plant_type):
            return False
        self.stage_index += 1
        self.stage_started_at = now
        return True

    def __repr__(self) -> str:
        return (
            f"PlantInstance({self.plant_id!r}, stage={self.stage_index}, "
            f"started={self.stage_started_at})"
        )
