"""Logging configuration."""

import logging
from typing import Optional

ROOT_LOGGER = "fleetscan"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)

    # Only configure if no handlers exist
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the fleetscan hierarchy."""
    _configure_root()
    return logging.getLogger(name or ROOT_LOGGER)


def set_log_level(level: int) -> None:
    """Change the level of every fleetscan logger."""
    _configure_root().setLevel(level)
