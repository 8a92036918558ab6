from __future__ import annotations
import sys
from typing import TextIO

from mdeditor.utils.logger import get_logger

LOGGER = get_logger(__name__)


class EditorMediator:
    """Central point that editor components report their events to."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def notify(self, sender_name: str, event: str) -> None:
        LOGGER.debug("Mediator event from %s: %s", sender_name, event)
        print(
            f"Mediator: {sender_name} raised '{event}'",
            file=self.stream if self.stream is not None else sys.stdout,
        )
