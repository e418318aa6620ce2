"""StoreConfig — Where and how user preferences are persisted."""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_FILENAME = ".postman-clone-recent.properties"


def default_preferences_path() -> str:
    return os.path.join(os.path.expanduser("~"), DEFAULT_FILENAME)


@dataclass
class StoreConfig:
    path: str | None = None
    max_recent: int = 10
    default_theme: str = "dark"
    # Recent-list saves normally replace the whole file; set to keep other keys.
    merge_on_recent_save: bool = False

    def __post_init__(self):
        if self.path is None:
            self.path = default_preferences_path()
        else:
            self.path = os.fspath(self.path)
