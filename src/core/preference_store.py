"""
PreferenceStore — Recent projects and theme, persisted to a properties file.

Keeps the most-recently-used project list in memory and mirrors it to
disk after every change.  The theme is never cached: it is read from the
file on each query and merged back into it on each update.

Storage failures never reach the caller.  They are logged here, at the
public boundary, and reported through ``error_occurred``.
"""
from __future__ import annotations

import os

from PyQt5.QtCore import QObject, pyqtSignal

from core.logger import get_logger
from core.store_config import StoreConfig
from data_io.properties_file import (
    IOStatus, PropertiesResult, read_properties, write_properties,
)

log = get_logger("preferences")

RECENT_KEY_PREFIX = "recent."
THEME_KEY = "theme"

RECENT_COMMENT = "Recent Postman Clone Projects"
PREFERENCES_COMMENT = "Postman Clone Preferences"


class PreferenceStore(QObject):
    """Most-recently-used project paths plus a light/dark theme flag."""

    # Signals
    recent_projects_changed = pyqtSignal(list)   # emits existing recent paths
    theme_changed = pyqtSignal(str)
    error_occurred = pyqtSignal(str)             # emits error message

    def __init__(self, config: StoreConfig | None = None, parent=None):
        super().__init__(parent)
        self._config = config or StoreConfig()
        self._recent: list[str] = []
        self._load_recent_projects()

    # ── Public API ────────────────────────────

    @property
    def path(self) -> str:
        return self._config.path

    @property
    def tracked_projects(self) -> list[str]:
        """Every remembered path, including ones no longer on disk."""
        return list(self._recent)

    def add_recent_project(self, path):
        """Move *path* to the front of the recent list and save it."""
        path = os.path.abspath(os.fspath(path))
        if path in self._recent:
            self._recent.remove(path)
        self._recent.insert(0, path)
        del self._recent[self._config.max_recent:]
        self._save_recent_projects()

    def get_recent_projects(self) -> list[str]:
        """Recent paths that currently exist, most recent first."""
        return [p for p in self._recent if os.path.exists(p)]

    def clear_recent_projects(self):
        self._recent.clear()
        self._save_recent_projects()

    def get_theme_preference(self) -> str:
        result = self._read("read theme preference")
        return result.properties.get(THEME_KEY, self._config.default_theme)

    def set_theme_preference(self, theme: str):
        props = self._read("reload preferences").properties
        props[THEME_KEY] = theme
        if self._write(props, PREFERENCES_COMMENT, "save theme preference"):
            log.info("Theme preference set to %s", theme)
        self.theme_changed.emit(theme)

    # ── Persistence ───────────────────────────

    def _load_recent_projects(self):
        props = self._read("load recent projects").properties
        for i in range(self._config.max_recent):
            value = props.get(f"{RECENT_KEY_PREFIX}{i}")
            if value:
                self._recent.append(value)
        log.debug("Loaded %d recent project(s) from %s", len(self._recent), self.path)

    def _save_recent_projects(self):
        if self._config.merge_on_recent_save:
            existing = self._read("reload preferences").properties
            props = {
                k: v for k, v in existing.items()
                if not k.startswith(RECENT_KEY_PREFIX)
            }
        else:
            props = {}
        for i, path in enumerate(self._recent):
            props[f"{RECENT_KEY_PREFIX}{i}"] = path
        self._write(props, RECENT_COMMENT, "save recent projects")
        self.recent_projects_changed.emit(self.get_recent_projects())

    def _read(self, action: str) -> PropertiesResult:
        result = read_properties(self.path)
        if result.status not in (IOStatus.OK, IOStatus.MISSING):
            log.warning("Could not %s from %s (%s): %s",
                        action, self.path, result.status.name, result.error)
        return result

    def _write(self, props: dict[str, str], comment: str, action: str) -> bool:
        result = write_properties(self.path, props, comment)
        if result.ok:
            return True
        message = f"Could not {action} to {self.path}: {result.error}"
        log.error("%s (%s)", message, result.status.name)
        self.error_occurred.emit(message)
        return False
