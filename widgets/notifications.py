"""
Toast notification queue.

Messages are shown one at a time in arrival order; the view pops the next
one when the current toast has been on screen long enough.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from .config import WidgetConfig

LEVELS = ("info", "success", "error")


@dataclass
class Notification:
    message: str
    level: str = "info"
    duration_ms: int = WidgetConfig.TOAST_DURATION_MS


class NotificationQueue:
    """FIFO of pending toasts with at most one on screen."""

    def __init__(self, config: Optional[WidgetConfig] = None):
        self.config = config or WidgetConfig()
        self.pending: Deque[Notification] = deque(maxlen=self.config.TOAST_QUEUE_LIMIT)
        self.current: Optional[Notification] = None

    def push(self, message: str, level: str = "info") -> Notification:
        if level not in LEVELS:
            level = "info"
        note = Notification(message, level, self.config.TOAST_DURATION_MS)
        self.pending.append(note)
        return note

    def show_next(self) -> Optional[Notification]:
        """
        Move the next pending toast on screen.

        Returns None while one is already showing or nothing is queued.
        """
        if self.current is not None or not self.pending:
            return None
        self.current = self.pending.popleft()
        return self.current

    def dismiss(self):
        """The current toast has finished showing."""
        self.current = None

    def __len__(self) -> int:
        return len(self.pending)
