from __future__ import annotations
from typing import Iterator, Sequence

from mdeditor.models.element import DocumentElement
from mdeditor.models.errors import CursorNotPositionedError


class ElementCursor:
    """Forward-only cursor over a sequence that skips processed elements.

    Life cycle:
    - move_next() -> bool advances to the next unprocessed element; False
      means nothing unprocessed remains ahead.
    - current is only valid after a successful move_next().
    - reset() rewinds to before the first element; processed flags are untouched.

    Iterating the cursor yields the remaining unprocessed elements lazily,
    starting from the cursor's current position.
    """

    def __init__(self, elements: Sequence[DocumentElement]) -> None:
        self._elements = elements
        self._index = -1

    def move_next(self) -> bool:
        idx = self._index + 1
        while idx < len(self._elements):
            if not self._elements[idx].processed:
                self._index = idx
                return True
            idx += 1
        self._index = len(self._elements)
        return False

    @property
    def current(self) -> DocumentElement:
        if not 0 <= self._index < len(self._elements):
            raise CursorNotPositionedError(
                "cursor is not positioned on an element; call move_next() first"
            )
        return self._elements[self._index]

    def mark_current_processed(self) -> None:
        self.current.mark_processed()

    def reset(self) -> None:
        self._index = -1

    def __iter__(self) -> Iterator[DocumentElement]:
        while self.move_next():
            yield self.current
