from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from button import ToolButton
from garden import HarvestResult, PlantResult
from plant_type import DEFAULT_PLANT_ID, get_plant_type
from simulation import SimulationState, Tool

logger = logging.getLogger(__name__)

TOOL_MESSAGES = {
    Tool.PLANT: "Plant tool selected. Click on an empty plot to plant a seed.",
    Tool.HARVEST: "Harvest tool selected. Click on a fully grown plant to harvest.",
}


class InputController:
    """
    Turns tool button presses and grid clicks into state changes and
    player-facing messages.
    """

    def __init__(self, state: SimulationState, plant_id: str = DEFAULT_PLANT_ID):
        self.state = state
        self.plant_id = plant_id
        self.buttons: List[ToolButton] = []

    def bind_buttons(self, buttons: List[ToolButton]) -> None:
        self.buttons = list(buttons)
        self._sync_buttons()

    def _sync_buttons(self) -> None:
        for btn in self.buttons:
            btn.active = btn.tool is self.state.selected_tool

    def pixel_to_cell(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Map surface pixel coordinates to (row, col), or None outside the grid."""
        grid = self.state.grid
        col = int(x // grid.tile_size)
        row = int(y // grid.tile_size)
        if not grid.in_bounds(row, col):
            return None
        return row, col

    def select_tool(self, tool: Tool, now: int) -> None:
        self.state.selected_tool = tool
        self._sync_buttons()
        logger.info("Selected %s tool", tool.value)
        self.state.notification.show(TOOL_MESSAGES[tool], now)

    def handle_click(self, x: float, y: float, now: int) -> bool:
        """
        Apply the selected tool to the clicked cell. Returns True when the
        click hit the grid and the frame should be redrawn right away.
        """
        cell = self.pixel_to_cell(x, y)
        if cell is None:
            logger.debug("Ignoring click outside grid at (%s, %s)", x, y)
            return False
        row, col = cell

        if self.state.selected_tool is Tool.PLANT:
            self._plant(row, col, now)
        elif self.state.selected_tool is Tool.HARVEST:
            self._harvest(row, col, now)
        return True

    def _plant(self, row: int, col: int, now: int) -> None:
        notification = self.state.notification
        result = self.state.grid.plant(row, col, self.plant_id, now)
        if result is PlantResult.PLANTED:
            pt = get_plant_type(self.plant_id)
            name = pt.name.lower() if pt else self.plant_id
            notification.show(f"Planted a {name} seed at row {row}, col {col}!", now)
        else:
            notification.show("This plot is already occupied!", now)

    def _harvest(self, row: int, col: int, now: int) -> None:
        notification = self.state.notification
        outcome = self.state.grid.harvest(row, col)
        if outcome.result is HarvestResult.EMPTY:
            notification.show("Nothing to harvest here!", now)
            return

        pt = get_plant_type(outcome.plant.plant_id)
        if pt is None:
            return
        if outcome.result is HarvestResult.HARVESTED:
            notification.show(
                f"Harvested {pt.harvest_yield} from row {row}, col {col}!", now
            )
        else:
            notification.show(
                f"This {pt.name} is not fully grown yet "
                f"(Stage {outcome.plant.stage_index + 1}/{pt.stage_count})!",
                now,
            )
