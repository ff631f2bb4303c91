import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, List, Optional

import pygame

from button import ToolButton
from config import (
    BUTTON_HEIGHT,
    BUTTON_WIDTH,
    FONT_SIZE,
    LABEL_FONT_SIZE,
    Settings,
    load_settings,
)
from controller import InputController
from garden import GardenGrid
from renderer import draw_toolbar, render
from simulation import SimulationState, Tool, tick

logger = logging.getLogger(__name__)


class Game:
    def __init__(
        self,
        settings: Settings,
        clock_source: Callable[[], int] = pygame.time.get_ticks,
        max_frames: Optional[int] = None,
    ):
        pygame.init()
        self.settings = settings
        self.screen = pygame.display.set_mode(settings.window_size)
        pygame.display.set_caption("Carrot Patch")
        self.clock = pygame.time.Clock()
        self.now = clock_source
        self.font = pygame.font.Font(None, FONT_SIZE)
        self.label_font = pygame.font.Font(None, LABEL_FONT_SIZE)

        self.running = True
        self.max_frames = max_frames
        self.frames = 0

        self.state = SimulationState(grid=GardenGrid(settings.tile_size))
        self.controller = InputController(self.state)
        self.buttons: List[ToolButton] = self.create_buttons()
        self.controller.bind_buttons(self.buttons)

    def create_buttons(self) -> List[ToolButton]:
        top = self.settings.grid_pixels + 10
        buttons = []
        x = 10
        for text, tool in (("Plant", Tool.PLANT), ("Harvest", Tool.HARVEST)):
            rect = pygame.Rect(x, top, BUTTON_WIDTH, BUTTON_HEIGHT)
            buttons.append(ToolButton(rect, text, tool, self.on_tool_selected))
            x += BUTTON_WIDTH + 10
        return buttons

    def on_tool_selected(self, tool: Tool) -> None:
        self.controller.select_tool(tool, self.now())

    def run(self) -> None:
        logger.info("Starting with %dx%d window", *self.settings.window_size)
        while self.running and not self.frame_limit_reached():
            self.clock.tick(self.settings.fps)
            self.handle_events()
            # whole frame is redrawn every tick; tick()'s flag goes unused here
            tick(self.state, self.now())
            self.draw()
            pygame.display.flip()
            self.frames += 1
        self.running = False
        logger.info("Stopped after %d frames", self.frames)
        pygame.quit()

    def frame_limit_reached(self) -> bool:
        return self.max_frames is not None and self.frames >= self.max_frames

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for btn in self.buttons:
                    btn.handle_event(event)

                # Tiles (only when clicking in grid area)
                x, y = event.pos
                if y < self.settings.grid_pixels:
                    if self.controller.handle_click(x, y, self.now()):
                        self.draw()
                        pygame.display.flip()

    def draw(self) -> None:
        render(self.screen, self.label_font, self.state)
        draw_toolbar(
            self.screen,
            self.font,
            self.settings.grid_pixels,
            self.buttons,
            self.state.notification,
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid farming simulation")
    parser.add_argument("--fps", type=positive_int, default=None, help="Frame rate cap")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level",
    )
    parser.add_argument(
        "--max-frames",
        type=positive_int,
        default=None,
        help="Quit after this many frames (useful for headless runs)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)
    settings = load_settings()
    if args.fps is not None:
        settings = replace(settings, fps=args.fps)
    game = Game(settings, max_frames=args.max_frames)
    game.run()


if __name__ == "__main__":
    main()
