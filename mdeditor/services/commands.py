from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Protocol, Sequence, Tuple

from mdeditor.models.element import DocumentElement
from mdeditor.models.errors import MacroCommandError
from mdeditor.services.render_strategy import RenderStrategy
from mdeditor.utils.logger import get_logger

LOGGER = get_logger(__name__)


class Command(Protocol):
    def execute(self) -> None: ...


class RenderCommand:
    """Deferred render of one element sequence with one strategy."""

    def __init__(
        self, strategy: RenderStrategy, elements: Sequence[DocumentElement]
    ) -> None:
        self.strategy = strategy
        self.elements = elements

    def execute(self) -> None:
        self.strategy.render(self.elements)


class CallableCommand:
    """Wraps an arbitrary no-argument callable as a command."""

    def __init__(self, func: Callable[[], object], name: Optional[str] = None) -> None:
        self.func = func
        self.name = name or getattr(func, "__name__", "command")

    def execute(self) -> None:
        self.func()

    def __repr__(self) -> str:
        return f"CallableCommand({self.name!r})"


class MacroCommand:
    """Runs several commands in insertion order as one unit.

    With fail_fast=False (the default) every command is attempted and the
    failures are raised together afterwards as MacroCommandError. With
    fail_fast=True the first failure propagates immediately and the
    remaining commands are skipped.
    """

    def __init__(
        self, commands: Iterable[Command] = (), fail_fast: bool = False
    ) -> None:
        self._commands: List[Command] = list(commands)
        self.fail_fast = fail_fast

    @property
    def commands(self) -> Tuple[Command, ...]:
        return tuple(self._commands)

    def add(self, command: Command) -> "MacroCommand":
        self._commands.append(command)
        return self

    def execute(self) -> None:
        failures: List[Tuple[int, Command, BaseException]] = []
        for index, command in enumerate(self._commands):
            try:
                command.execute()
            except Exception as exc:
                if self.fail_fast:
                    raise
                LOGGER.warning("Command #%d (%r) failed: %s", index, command, exc)
                failures.append((index, command, exc))
        if failures:
            raise MacroCommandError(failures)
