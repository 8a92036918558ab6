from __future__ import annotations
import sys
from typing import Protocol, TextIO


class EditorState(Protocol):
    editable: bool

    def apply(self, stream: TextIO) -> None: ...


class ReadOnlyState:
    editable = False

    def apply(self, stream: TextIO) -> None:
        print("Editor is in read-only mode.", file=stream)


class EditableState:
    editable = True

    def apply(self, stream: TextIO) -> None:
        print("Editor is in editable mode.", file=stream)


class EditorContext:
    """Holds the active editor state; transitions are explicit set_state calls."""

    def __init__(
        self, state: EditorState | None = None, stream: TextIO | None = None
    ) -> None:
        self._state: EditorState = state or ReadOnlyState()
        self.stream = stream

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def is_editable(self) -> bool:
        return self._state.editable

    def set_state(self, state: EditorState) -> None:
        self._state = state

    def apply_state(self) -> None:
        self._state.apply(self.stream if self.stream is not None else sys.stdout)
