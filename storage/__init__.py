"""
Storage module for the widget menu.
A small key-value string store that survives restarts.
"""

from .config import StorageConfig
from .errors import PersistenceUnavailable
from .key_value_store import KeyValueStore, JsonFileStore, MemoryStore
