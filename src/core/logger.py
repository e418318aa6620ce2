"""Logging setup for the Postman Clone desktop shell."""
from __future__ import annotations

import logging
import os
import sys

_ROOT = "postman_clone"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Configure the application logger: console and optional file."""
    root = logging.getLogger(_ROOT)
    root.setLevel(level)
    root.handlers.clear()

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the postman_clone namespace."""
    return logging.getLogger(f"{_ROOT}.{name}")
