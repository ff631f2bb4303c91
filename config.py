"""
Game constants and environment overrides.

Most values are plain module constants. `load_settings()` reads the few knobs
that can be changed without editing code (frame rate, grid pixel size) from
the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

Color = Tuple[int, int, int]

# --- Grid ---
GRID_SIZE = 10  # 10x10 plots
GRID_PIXELS = 500  # square drawing surface for the grid

# --- Window ---
TOOLBAR_HEIGHT = 90
BUTTON_WIDTH = 110
BUTTON_HEIGHT = 32
FPS = 60
FONT_SIZE = 20
LABEL_FONT_SIZE = 16

# --- Notifications ---
NOTIFICATION_DURATION_MS = 3000
IDLE_MESSAGE = "Select a tool."

# --- Colors ---
BACKGROUND_COLOR: Color = (240, 248, 236)
GRID_LINE_COLOR: Color = (160, 208, 160)
LABEL_COLOR: Color = (51, 51, 51)
TOOLBAR_COLOR: Color = (30, 30, 30)
MESSAGE_COLOR: Color = (220, 220, 220)

ENV_PREFIX = "CARROT_PATCH_"


@dataclass(frozen=True)
class Settings:
    fps: int = FPS
    grid_pixels: int = GRID_PIXELS

    @property
    def tile_size(self) -> float:
        return self.grid_pixels / GRID_SIZE

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.grid_pixels, self.grid_pixels + TOOLBAR_HEIGHT


def _positive_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(ENV_PREFIX + key)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{key} must be positive, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from defaults plus CARROT_PATCH_* environment overrides."""
    env = os.environ if environ is None else environ
    return Settings(
        fps=_positive_int(env, "FPS", FPS),
        grid_pixels=_positive_int(env, "GRID_PIXELS", GRID_PIXELS),
    )
