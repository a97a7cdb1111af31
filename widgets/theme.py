"""
Dark mode preference, remembered between runs.
"""

import logging
from typing import Optional

from storage import KeyValueStore, PersistenceUnavailable

from .config import WidgetConfig

log = logging.getLogger("theme")

LIGHT_COLORS = {
    "bg": "#f4f4f8",
    "fg": "#1a1a2e",
    "panel": "#ffffff",
    "accent": "#0077b6",
    "cell": "#e8eaf6",
    "highlight": "#ffd166",
}

DARK_COLORS = {
    "bg": "#1a1a2e",
    "fg": "#ffffff",
    "panel": "#16213e",
    "accent": "#00d4ff",
    "cell": "#16213e",
    "highlight": "#00ff88",
}


class ThemePreference:
    """Light/dark toggle backed by the key-value store."""

    def __init__(self, store: KeyValueStore, config: Optional[WidgetConfig] = None):
        self.store = store
        self.config = config or WidgetConfig()
        self.dark_mode = False

    @property
    def colors(self) -> dict:
        return DARK_COLORS if self.dark_mode else LIGHT_COLORS

    def load(self) -> bool:
        try:
            self.dark_mode = self.store.get(self.config.DARK_MODE_STORAGE_KEY) == "true"
        except PersistenceUnavailable as e:
            log.warning("Could not read theme, using light mode: %s", e)
            self.dark_mode = False
        return self.dark_mode

    def toggle(self) -> bool:
        self.dark_mode = not self.dark_mode
        try:
            self.store.set(self.config.DARK_MODE_STORAGE_KEY, "true" if self.dark_mode else "false")
        except PersistenceUnavailable as e:
            log.warning("Could not save theme: %s", e)
        return self.dark_mode
