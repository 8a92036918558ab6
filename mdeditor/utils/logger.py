"""Central logging configuration for the editor."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_DEFAULT_LEVEL = logging.WARNING
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger; the root handler is set up by configure_logging."""
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = _DEFAULT_LEVEL) -> None:
    """Send log records to stderr so stdout stays reserved for rendered output."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = _DEFAULT_LEVEL
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, stream=sys.stderr)
    else:
        root.setLevel(level)
