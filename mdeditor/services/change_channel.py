from __future__ import annotations
import os
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Literal, Optional, TextIO, Tuple, Union

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from mdeditor.models.errors import ChannelStartError
from mdeditor.utils.logger import get_logger

LOGGER = get_logger(__name__)

ChangeKind = Literal["created", "modified", "deleted", "moved"]
Listener = Callable[[str], None]

DEFAULT_PLUGIN_DIR = "./plugins"


@dataclass(frozen=True)
class ChangeEvent:
    kind: ChangeKind
    path: Path

    @property
    def message(self) -> str:
        return f"Plugin {self.kind}: {self.path.name}"


class PluginEventHandler(FileSystemEventHandler):
    """Turns watchdog callbacks into ChangeEvents, one per filesystem event.

    Modification events for directories are skipped: the OS reports them for
    the watched directory itself whenever an entry is added or removed, and
    that entry already has its own event.
    """

    def __init__(self, on_event: Callable[[ChangeEvent], None]) -> None:
        super().__init__()
        self.on_event = on_event

    def on_created(self, event: FileSystemEvent) -> None:
        self._emit("created", event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        self._emit("modified", event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._emit("deleted", event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._emit("moved", getattr(event, "dest_path", event.src_path))

    def _emit(self, kind: ChangeKind, raw_path: Union[str, bytes]) -> None:
        change = ChangeEvent(kind, Path(os.fsdecode(raw_path)))
        try:
            self.on_event(change)
        except Exception:
            LOGGER.exception("Change handler failed for %s", change)


class ChangeChannel:
    """Watches the plugin directory and forwards change messages to listeners.

    Listeners may be attached or detached at any time, including while the
    observer thread is delivering events: the registry is guarded by a lock
    and each notify() works on a snapshot of it. Each filesystem event
    results in exactly one notify() call.
    """

    def __init__(
        self,
        directory: Union[str, Path] = DEFAULT_PLUGIN_DIR,
        observer_timeout: float = 0.5,
    ) -> None:
        self.directory = Path(directory)
        self.observer_timeout = observer_timeout
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()
        # Separate from _lock: stopping joins the observer thread, which may
        # be waiting on _lock inside notify()
        self._watch_lock = threading.Lock()
        self._observer: Optional[BaseObserver] = None

    @property
    def listeners(self) -> Tuple[Listener, ...]:
        with self._lock:
            return tuple(self._listeners)

    @property
    def is_watching(self) -> bool:
        observer = self._observer
        return observer is not None and observer.is_alive()

    def attach(self, listener: Listener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def detach(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def notify(self, message: str) -> None:
        """Invoke every attached listener with message, in registration order.

        A failing listener is logged and does not prevent the remaining
        listeners from receiving the message.
        """
        for listener in self.listeners:
            try:
                listener(message)
            except Exception:
                LOGGER.exception("Listener %r failed on %r", listener, message)

    def start_watching(self) -> None:
        """Create the directory if needed and begin delivering change events.

        Raises ChannelStartError if the directory cannot be created, is not a
        directory, or cannot be watched.
        """
        with self._watch_lock:
            if self.is_watching:
                return
            try:
                self.directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ChannelStartError(
                    f"Cannot create plugin directory {self.directory}: {exc}"
                ) from exc
            if not self.directory.is_dir():
                raise ChannelStartError(
                    f"Plugin path is not a directory: {self.directory}"
                )

            # Observer threads cannot be restarted; every start gets a new one
            observer = Observer(timeout=self.observer_timeout)
            observer.daemon = True
            try:
                observer.schedule(
                    PluginEventHandler(self._on_event),
                    str(self.directory),
                    recursive=False,
                )
                observer.start()
            except OSError as exc:
                raise ChannelStartError(
                    f"Cannot watch plugin directory {self.directory}: {exc}"
                ) from exc
            self._observer = observer
        LOGGER.info("Watching %s for plugin changes", self.directory)

    def stop_watching(self, timeout: float | None = None) -> None:
        with self._watch_lock:
            observer = self._observer
            self._observer = None
        if observer is None:
            return
        observer.stop()
        if observer is not threading.current_thread():
            observer.join(timeout if timeout is not None else self.observer_timeout * 4 + 1)
        LOGGER.info("Stopped watching %s", self.directory)

    def _on_event(self, event: ChangeEvent) -> None:
        LOGGER.debug("Filesystem event: %s %s", event.kind, event.path)
        self.notify(event.message)


class ConsoleChangeListener:
    """Prints every message it receives."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def __call__(self, message: str) -> None:
        print(message, file=self.stream if self.stream is not None else sys.stdout)
