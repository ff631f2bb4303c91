from __future__ import annotations

from typing import Callable
import pygame

from simulation import Tool


class ToolButton:
    """
    Toggle button bound to a single tool.

    - rect: pygame.Rect region
    - text: label text
    - tool: the Tool this button selects
    - callback: called with the button's tool when clicked
    - active: drawn highlighted while its tool is the selected one
    """

    def __init__(
        self,
        rect: pygame.Rect,
        text: str,
        tool: Tool,
        callback: Callable[[Tool], None],
    ):
        self.rect = rect
        self.text = text
        self.tool = tool
        self.callback = callback
        self.active = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Fire the callback on a left click inside the button."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback(self.tool)
                return True
        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        color = (60, 120, 60) if self.active else (80, 80, 80)
        border = (255, 255, 255) if self.active else (200, 200, 200)

        pygame.draw.rect(surface, color, self.rect)
        pygame.draw.rect(surface, border, self.rect, 2)

        text_surf = font.render(self.text, True, (255, 255, 255))
        text_rect = text_surf.get_rect(center=self.rect.center)
        surface.blit(text_surf, text_rect)
