"""
To-do list widget.

Items are saved to the key-value store on every change and restored at
start-up; unreadable data gives an empty list.
"""

import json
import logging
from dataclasses import dataclass, asdict
from typing import List, Optional

from storage import KeyValueStore, PersistenceUnavailable

from .config import WidgetConfig
from .errors import WidgetInputError

log = logging.getLogger("todo")


@dataclass
class TodoItem:
    id: int
    text: str
    done: bool = False


class TodoList:
    """Persisted list of tasks, in the order they were added."""

    def __init__(self, store: KeyValueStore, config: Optional[WidgetConfig] = None):
        self.store = store
        self.config = config or WidgetConfig()
        self.items: List[TodoItem] = []

    def _next_id(self) -> int:
        return max((item.id for item in self.items), default=0) + 1

    def _find(self, item_id: int) -> Optional[TodoItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def add(self, text: str) -> TodoItem:
        """
        Add a task.

        Raises:
            WidgetInputError: blank or overly long text.
        """
        text = (text or "").strip()
        if not text:
            raise WidgetInputError("Task can't be empty.")
        if len(text) > self.config.TODO_MAX_LENGTH:
            raise WidgetInputError(f"Task is longer than {self.config.TODO_MAX_LENGTH} characters.")

        item = TodoItem(id=self._next_id(), text=text)
        self.items.append(item)
        self.persist()
        return item

    def toggle(self, item_id: int) -> bool:
        """Flip done/not done. Returns False for an unknown id."""
        item = self._find(item_id)
        if item is None:
            return False
        item.done = not item.done
        self.persist()
        return True

    def remove(self, item_id: int) -> bool:
        item = self._find(item_id)
        if item is None:
            return False
        self.items.remove(item)
        self.persist()
        return True

    def clear_completed(self) -> int:
        """Drop finished tasks. Returns how many were removed."""
        before = len(self.items)
        self.items = [item for item in self.items if not item.done]
        removed = before - len(self.items)
        if removed:
            self.persist()
        return removed

    def load(self) -> List[TodoItem]:
        self.items = []
        try:
            raw = self.store.get(self.config.TODO_STORAGE_KEY)
        except PersistenceUnavailable as e:
            log.warning("Could not read to-do list, starting empty: %s", e)
            return list(self.items)

        if raw is None:
            return list(self.items)

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("stored to-do list is not a list")
            items = []
            for entry in data:
                if not isinstance(entry.get("id"), int) or not isinstance(entry.get("text"), str):
                    raise ValueError(f"bad to-do entry: {entry!r}")
                items.append(TodoItem(id=entry["id"], text=entry["text"], done=bool(entry.get("done"))))
        except (ValueError, AttributeError) as e:
            log.warning("Discarding malformed to-do list: %s", e)
            return list(self.items)

        self.items = items
        return list(self.items)

    def persist(self) -> bool:
        payload = json.dumps([asdict(item) for item in self.items])
        try:
            self.store.set(self.config.TODO_STORAGE_KEY, payload)
        except PersistenceUnavailable as e:
            log.warning("Could not save to-do list: %s", e)
            return False
        return True
