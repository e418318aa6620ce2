"""Light and dark Qt stylesheets for the application shell."""
from __future__ import annotations

DARK = "dark"
LIGHT = "light"

_DARK_STYLE = """
/* ── Global ────────────────────────────── */
QMainWindow, QWidget {
    background-color: #1e1e1e;
    color: #dcdcdc;
    font-family: "Segoe UI", "Roboto", sans-serif;
    font-size: 13px;
}

/* ── Menu bar ──────────────────────────── */
QMenuBar {
    background-color: #2d2d30;
    color: #dcdcdc;
    border-bottom: 1px solid #3e3e42;
    padding: 2px;
}
QMenuBar::item:selected {
    background-color: #3e3e42;
    border-radius: 3px;
}
QMenu {
    background-color: #2d2d30;
    color: #dcdcdc;
    border: 1px solid #3e3e42;
}
QMenu::item:selected {
    background-color: #094771;
}
QMenu::item:disabled {
    color: #6d6d6d;
}

/* ── Status bar ────────────────────────── */
QStatusBar {
    background-color: #007acc;
    color: #ffffff;
    font-size: 12px;
    border-top: none;
}
QStatusBar QLabel {
    color: #ffffff;
    padding: 0 8px;
}

/* ── Tooltips ──────────────────────────── */
QToolTip {
    background-color: #2d2d30;
    color: #dcdcdc;
    border: 1px solid #3e3e42;
    padding: 4px;
}
"""

_LIGHT_STYLE = """
/* ── Global ────────────────────────────── */
QMainWindow, QWidget {
    background-color: #f5f5f5;
    color: #1e1e1e;
    font-family: "Segoe UI", "Roboto", sans-serif;
    font-size: 13px;
}

/* ── Menu bar ──────────────────────────── */
QMenuBar {
    background-color: #ffffff;
    color: #1e1e1e;
    border-bottom: 1px solid #d4d4d4;
    padding: 2px;
}
QMenuBar::item:selected {
    background-color: #e5e5e5;
    border-radius: 3px;
}
QMenu {
    background-color: #ffffff;
    color: #1e1e1e;
    border: 1px solid #d4d4d4;
}
QMenu::item:selected {
    background-color: #cce4f7;
}
QMenu::item:disabled {
    color: #a0a0a0;
}

/* ── Status bar ────────────────────────── */
QStatusBar {
    background-color: #007acc;
    color: #ffffff;
    font-size: 12px;
    border-top: none;
}
QStatusBar QLabel {
    color: #ffffff;
    padding: 0 8px;
}

/* ── Tooltips ──────────────────────────── */
QToolTip {
    background-color: #ffffff;
    color: #1e1e1e;
    border: 1px solid #d4d4d4;
    padding: 4px;
}
"""


def stylesheet_for(theme: str) -> str:
    """Stylesheet for *theme*; anything but ``"light"`` gets the dark one."""
    if theme == LIGHT:
        return _LIGHT_STYLE
    return _DARK_STYLE
