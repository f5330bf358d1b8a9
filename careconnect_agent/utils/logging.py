"""
Logging helpers.
"""

import logging
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root ``careconnect`` logger once."""
    root = logging.getLogger("careconnect")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``careconnect`` namespace."""
    if not name:
        return logging.getLogger("careconnect")
    if name.startswith("careconnect"):
        return logging.getLogger(name)
    return logging.getLogger(f"careconnect.{name}")
