from __future__ import annotations

import logging
from typing import Optional

from config import IDLE_MESSAGE, NOTIFICATION_DURATION_MS

logger = logging.getLogger(__name__)


class Notification:
    """
    Single-slot message display.

    A new message always replaces the current one and restarts the
    countdown. Expiry is a stored timestamp checked by `update()`, so the
    most recent `show()` decides when the idle prompt comes back.
    """

    def __init__(self, idle_text: str = IDLE_MESSAGE):
        self.idle_text = idle_text
        self._text = idle_text
        self.expires_at: Optional[int] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_idle(self) -> bool:
        return self.expires_at is None

    def show(self, text: str, now: int, duration_ms: int = NOTIFICATION_DURATION_MS) -> None:
        self._text = text
        self.expires_at = now + duration_ms

    def update(self, now: int) -> bool:
        """Revert to the idle prompt once expired. Returns True if text changed."""
        if self.expires_at is None or now < self.expires_at:
            return False
        logger.debug("Notification expired: %r", self._text)
        self._text = self.idle_text
        self.expires_at = None
        return True
