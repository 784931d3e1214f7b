"""Logging setup for the crossword engine.

Every module logs under the ``crossgrid`` namespace. The engine never touches
the root logger; the CLI (or a hosting application) decides where records go.
"""

from __future__ import annotations

import logging
from typing import IO, Optional

ROOT_NAME = "crossgrid"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> logging.Handler:
    """Send ``crossgrid`` records at ``level`` or above to ``stream`` (stderr by default).

    Calling it again replaces the handler installed by the previous call.
    """

    global _handler
    package_logger = logging.getLogger(ROOT_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
    package_logger.addHandler(_handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return _handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``crossgrid`` namespace."""

    if not name or name == ROOT_NAME:
        return logging.getLogger(ROOT_NAME)
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)
