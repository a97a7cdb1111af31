"""
Storage configuration for the widget menu.
Where the key-value file lives on disk.
"""

import os
from pathlib import Path


class StorageConfig:
    """
    Configuration class for storage settings.
    """

    # Directory for the data file (created on first write)
    STORAGE_DIR = Path.home() / ".widget_menu"
    STORAGE_FILE = "storage.json"

    # Set this environment variable to use another file
    STORAGE_ENV_VAR = "WIDGET_MENU_STORAGE"

    ENCODING = "utf-8"

    def storage_path(self) -> Path:
        """Path of the data file, honouring the environment override."""
        override = os.environ.get(self.STORAGE_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return self.STORAGE_DIR / self.STORAGE_FILE
