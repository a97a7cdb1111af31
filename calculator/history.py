"""
Calculation history for the calculator widget.

Keeps the last few results, newest first, and saves the whole list to the
key-value store after every change.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Union

from storage import KeyValueStore, PersistenceUnavailable

from .config import CalculatorConfig

log = logging.getLogger("history")

Number = Union[int, float]


@dataclass
class HistoryEntry:
    """A single calculation record."""
    expression: str
    result: Number
    timestamp: datetime

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"

    def to_dict(self) -> dict:
        return {
            "expression": self.expression,
            "result": self.result,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        """
        Rebuild an entry from its stored form.

        Raises:
            ValueError: if a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Entry is not an object: {data!r}")

        expression = data.get("expression")
        result = data.get("result")
        timestamp = data.get("timestamp")

        if not isinstance(expression, str):
            raise ValueError(f"Bad expression: {expression!r}")
        if isinstance(result, bool) or not isinstance(result, (int, float)):
            raise ValueError(f"Bad result: {result!r}")
        if not isinstance(timestamp, str):
            raise ValueError(f"Bad timestamp: {timestamp!r}")

        return cls(
            expression=expression,
            result=result,
            timestamp=datetime.fromisoformat(timestamp),
        )


HistoryListener = Callable[[List[HistoryEntry]], None]


class CalculationHistory:
    """
    Bounded, persisted calculation log.

    - append() puts the new entry first and drops anything past the cap
    - clear() empties the log
    - both save before returning, so the stored copy always matches
    - load() never raises; bad or missing data gives an empty log
    """

    def __init__(
        self,
        store: KeyValueStore,
        config: Optional[CalculatorConfig] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.store = store
        self.config = config or CalculatorConfig()
        self.clock = clock
        self._entries: List[HistoryEntry] = []
        self.listeners: List[HistoryListener] = []

    @property
    def entries(self) -> List[HistoryEntry]:
        """Copy of the log, newest first."""
        return list(self._entries)

    @property
    def max_size(self) -> int:
        return self.config.HISTORY_MAX_ENTRIES

    def __len__(self) -> int:
        return len(self._entries)

    def subscribe(self, listener: HistoryListener):
        """Call listener with the new entries after every change."""
        self.listeners.append(listener)

    def append(self, expression: str, result: Number) -> HistoryEntry:
        """Record a successful calculation."""
        entry = HistoryEntry(
            expression=expression,
            result=result,
            timestamp=self.clock(),
        )
        self._entries.insert(0, entry)
        del self._entries[self.max_size:]

        self.persist()
        self._notify()
        return entry

    def clear(self):
        """Forget every entry."""
        self._entries = []
        self.persist()
        self._notify()

    def load(self) -> List[HistoryEntry]:
        """
        Restore the log from the store.

        Returns:
            The restored entries (empty if nothing usable was stored).
        """
        self._entries = []
        key = self.config.HISTORY_STORAGE_KEY

        try:
            raw = self.store.get(key)
        except PersistenceUnavailable as e:
            log.warning("Could not read history, starting empty: %s", e)
            return self.entries

        if raw is None:
            return self.entries

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("stored history is not a list")
            entries = [HistoryEntry.from_dict(item) for item in data]
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            log.warning("Discarding malformed history under %r: %s", key, e)
            return self.entries

        self._entries = entries[:self.max_size]
        log.debug("Loaded %d history entries", len(self._entries))
        self._notify()
        return self.entries

    def persist(self) -> bool:
        """
        Save the full log.

        Returns:
            True if saved, False if the store was unavailable.
        """
        payload = json.dumps([entry.to_dict() for entry in self._entries])
        try:
            self.store.set(self.config.HISTORY_STORAGE_KEY, payload)
        except PersistenceUnavailable as e:
            log.warning("Could not save history: %s", e)
            return False
        return True

    def _notify(self):
        entries = self.entries
        for listener in list(self.listeners):
            listener(entries)
