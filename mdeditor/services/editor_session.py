from __future__ import annotations
import sys
import threading
from typing import List, Optional, TextIO

from mdeditor.models.element import DocumentElement
from mdeditor.services.change_channel import ChangeChannel, ConsoleChangeListener
from mdeditor.services.commands import CallableCommand, MacroCommand, RenderCommand
from mdeditor.services.config_service import EditorConfig
from mdeditor.services.editor_state import EditableState, EditorContext, ReadOnlyState
from mdeditor.services.element_factory import ElementFactory, MarkdownBuilder
from mdeditor.services.expression_interpreter import ExpressionInterpreter
from mdeditor.services.mediator import EditorMediator
from mdeditor.services.render_strategy import strategy_for_style
from mdeditor.services.text_filters import (
    ExpandTabsFilter,
    TrimFilter,
    build_filter_chain,
)
from mdeditor.utils.logger import get_logger

LOGGER = get_logger(__name__)

DOCUMENT_CHANGED = "Markdown document has changed."
SAMPLE_RAW_TEXT = "\t\t Some raw text.  "
SAMPLE_EXPRESSIONS = ("2+2", "10*3")


class EditorSession:
    """Wires the element pipeline, the change channel and the editor helpers.

    run_demo() exercises the in-memory pipeline once; serve() keeps the
    plugin directory watched until the given stop event is set.
    """

    def __init__(
        self, config: Optional[EditorConfig] = None, stream: TextIO | None = None
    ) -> None:
        self.config = config or EditorConfig()
        self.stream = stream
        self.factory = ElementFactory()
        self.strategy = strategy_for_style(self.config.render_style, stream)
        self.channel = ChangeChannel(self.config.plugin_dir, self.config.observer_timeout)
        self.channel.attach(ConsoleChangeListener(stream))
        self.editor = EditorContext(ReadOnlyState(), stream)
        self.filters = build_filter_chain(TrimFilter(), ExpandTabsFilter(tab_size=4))
        self.interpreter = ExpressionInterpreter()
        self.mediator = EditorMediator(stream)

    def _print(self, line: str) -> None:
        print(line, file=self.stream if self.stream is not None else sys.stdout)

    def build_document(self) -> List[DocumentElement]:
        elements = [self.factory.create_bold(), self.factory.create_italic()]
        elements.append(elements[0].clone())
        built = MarkdownBuilder(self.factory).add_bold().add_italic().build()
        elements.extend(built)
        return elements

    def _show_states(self) -> None:
        self.editor.apply_state()
        self.editor.set_state(EditableState())
        self.editor.apply_state()

    def _show_filters(self) -> None:
        self._print(f"Filtered text: {self.filters.handle(SAMPLE_RAW_TEXT)}")

    def _show_interpreter(self) -> None:
        for expression in SAMPLE_EXPRESSIONS:
            self._print(f"{expression} = {self.interpreter.interpret(expression)}")

    def _show_mediator(self) -> None:
        self.mediator.notify(type(self).__name__, "document rendered")

    def build_macro(self, elements: List[DocumentElement]) -> MacroCommand:
        return MacroCommand(
            [
                RenderCommand(self.strategy, elements),
                CallableCommand(self._show_mediator, "mediator"),
                CallableCommand(self._show_states, "editor-state"),
                CallableCommand(self._show_filters, "text-filters"),
                CallableCommand(self._show_interpreter, "interpreter"),
            ]
        )

    def run_demo(self) -> List[DocumentElement]:
        elements = self.build_document()
        LOGGER.info("Built document with %d elements", len(elements))
        self.channel.notify(DOCUMENT_CHANGED)
        self.build_macro(elements).execute()
        return elements

    def serve(self, stop_event: threading.Event, wait_interval: float = 0.5) -> None:
        """Watch the plugin directory until stop_event is set.

        ChannelStartError from start_watching() propagates before any waiting.
        """
        self.channel.start_watching()
        try:
            while not stop_event.wait(wait_interval):
                pass
        finally:
            self.channel.stop_watching()
