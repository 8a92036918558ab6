from __future__ import annotations
from typing import Any, List, Tuple


class EditorError(Exception):
    """Base class for errors raised by the editor pipeline."""


class UnknownKindError(EditorError, ValueError):
    def __init__(self, kind: Any) -> None:
        super().__init__(f"Unknown element kind: {kind!r}")
        self.kind = kind


class CursorNotPositionedError(EditorError, RuntimeError):
    """Raised when reading the cursor before a successful advance or after exhaustion."""


class ChannelStartError(EditorError, OSError):
    """The change channel could not prepare or watch its directory."""


class MacroCommandError(EditorError):
    """Raised after a continue-on-error macro command finished with failures.

    Attributes:
        failures: (index, command, exception) for each failed command, in order.
    """

    def __init__(self, failures: List[Tuple[int, Any, BaseException]]) -> None:
        names = ", ".join(f"#{idx} {exc!r}" for idx, _cmd, exc in failures)
        super().__init__(f"{len(failures)} command(s) failed: {names}")
        self.failures = failures
