"""
MainWindow — Application shell for the Postman Clone desktop client.

Hosts the File and View menus that drive the preference store: opening
projects, the Open Recent list, clearing history and switching between
the light and dark themes.
"""
from __future__ import annotations

import os

from PyQt5.QtWidgets import (
    QMainWindow, QAction, QActionGroup, QFileDialog, QMessageBox,
    QStatusBar, QLabel,
)
from PyQt5.QtCore import QSize, pyqtSignal

from core.logger import get_logger
from core.preference_store import PreferenceStore
from gui.themes import DARK, LIGHT, stylesheet_for

log = get_logger("gui")


class MainWindow(QMainWindow):
    """Postman Clone main application window."""

    project_opened = pyqtSignal(str)    # emits absolute project path

    def __init__(self, store: PreferenceStore | None = None):
        super().__init__()
        self._store = store or PreferenceStore(parent=self)
        self._current_project = None
        self._build_ui()
        self._connect_signals()
        self.apply_theme(self._store.get_theme_preference())
        self._update_status("Ready — open a project to begin")

    @property
    def store(self) -> PreferenceStore:
        return self._store

    # ══════════════════════════════════════════
    #  UI Construction
    # ══════════════════════════════════════════

    def _build_ui(self):
        self.setWindowTitle("Postman Clone")
        self.setMinimumSize(QSize(800, 500))
        self.resize(1200, 800)

        self._create_menus()

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_label = QLabel("Ready")
        self._project_label = QLabel("")
        self._status_bar.addWidget(self._status_label, stretch=1)
        self._status_bar.addPermanentWidget(self._project_label)

    def _create_menus(self):
        menu_bar = self.menuBar()

        # ── File menu ──
        file_menu = menu_bar.addMenu("&File")

        open_action = QAction("&Open Project…", self)
        open_action.setShortcut("Ctrl+O")
        open_action.setStatusTip("Open a saved project")
        open_action.triggered.connect(self._on_open_project)
        file_menu.addAction(open_action)

        self._recent_menu = file_menu.addMenu("Open &Recent")
        self._recent_menu.aboutToShow.connect(self._rebuild_recent_menu)
        self._rebuild_recent_menu()

        clear_action = QAction("&Clear Recent Projects", self)
        clear_action.triggered.connect(self._on_clear_recent)
        file_menu.addAction(clear_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # ── View menu ──
        view_menu = menu_bar.addMenu("&View")
        theme_menu = view_menu.addMenu("&Theme")
        theme_group = QActionGroup(self)
        theme_group.setExclusive(True)
        self._light_action = QAction("&Light", self, checkable=True)
        self._dark_action = QAction("&Dark", self, checkable=True)
        self._light_action.triggered.connect(lambda: self._on_select_theme(LIGHT))
        self._dark_action.triggered.connect(lambda: self._on_select_theme(DARK))
        for action in (self._light_action, self._dark_action):
            theme_group.addAction(action)
            theme_menu.addAction(action)

    def _rebuild_recent_menu(self):
        # An entry may still be emitting triggered() here
        for action in self._recent_menu.actions():
            self._recent_menu.removeAction(action)
            action.deleteLater()
        recent = self._store.get_recent_projects()
        if not recent:
            placeholder = QAction("No Recent Projects", self._recent_menu)
            placeholder.setEnabled(False)
            self._recent_menu.addAction(placeholder)
            return
        for index, path in enumerate(recent, start=1):
            action = QAction(f"&{index % 10} {os.path.basename(path)}", self._recent_menu)
            action.setStatusTip(path)
            action.setToolTip(path)
            action.triggered.connect(lambda _checked=False, p=path: self.open_project(p))
            self._recent_menu.addAction(action)

    def recent_menu_paths(self) -> list[str]:
        """Paths currently listed in the Open Recent submenu."""
        return [a.statusTip() for a in self._recent_menu.actions() if a.isEnabled()]

    # ══════════════════════════════════════════
    #  Signal Connections
    # ══════════════════════════════════════════

    def _connect_signals(self):
        self._store.recent_projects_changed.connect(lambda _paths: self._rebuild_recent_menu())
        self._store.error_occurred.connect(self._on_error)

    # ══════════════════════════════════════════
    #  Slots / Handlers
    # ══════════════════════════════════════════

    def _on_open_project(self):
        filepath, _ = QFileDialog.getOpenFileName(
            self,
            "Open Project",
            "",
            "Project Files (*.json);;All Files (*)",
        )
        if filepath:
            self.open_project(filepath)

    def open_project(self, path: str):
        """Record *path* as the current project and remember it."""
        path = os.path.abspath(path)
        self._current_project = path
        self._store.add_recent_project(path)
        fname = os.path.basename(path)
        self._project_label.setText(f"\U0001f4c1 {fname}")
        self._update_status(f"Opened: {fname}")
        log.info("Opened project %s", path)
        self.project_opened.emit(path)

    def _on_clear_recent(self):
        self._store.clear_recent_projects()
        self._update_status("Recent projects cleared")

    def _on_select_theme(self, theme: str):
        self._store.set_theme_preference(theme)
        self.apply_theme(theme)

    def apply_theme(self, theme: str):
        self.setStyleSheet(stylesheet_for(theme))
        is_light = theme == LIGHT
        self._light_action.setChecked(is_light)
        self._dark_action.setChecked(not is_light)
        self._update_status(f"Theme: {LIGHT if is_light else DARK}")

    def _on_error(self, message: str):
        self._update_status("Could not save preferences")
        if self.isVisible():
            QMessageBox.warning(self, "Preferences", message)

    # ── Helpers ───────────────────────────────

    def _update_status(self, text: str):
        self._status_label.setText(f"  {text}")
