from __future__ import annotations
import sys
from typing import Protocol, Sequence, TextIO

from pygments import highlight
from pygments.formatters import get_formatter_by_name
from pygments.lexers import get_lexer_by_name

from mdeditor.models.element import DocumentElement
from mdeditor.services.element_cursor import ElementCursor
from mdeditor.utils.logger import get_logger

LOGGER = get_logger(__name__)


class RenderStrategy(Protocol):
    def render(self, elements: Sequence[DocumentElement]) -> None: ...


class ConsoleRenderStrategy:
    """Writes one line per element, in sequence order."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def format_line(self, element: DocumentElement) -> str:
        return element.render()

    def render(self, elements: Sequence[DocumentElement]) -> None:
        # Resolve stdout lazily so redirected/captured output is honoured
        out = self.stream if self.stream is not None else sys.stdout
        for element in elements:
            print(self.format_line(element), file=out)


class HighlightRenderStrategy(ConsoleRenderStrategy):
    """Console rendering with each line colourised by Pygments' Markdown lexer."""

    def __init__(
        self, stream: TextIO | None = None, formatter_name: str = "terminal"
    ) -> None:
        super().__init__(stream)
        self._lexer = get_lexer_by_name("markdown")
        self._formatter = get_formatter_by_name(formatter_name)

    def format_line(self, element: DocumentElement) -> str:
        return highlight(element.render(), self._lexer, self._formatter).rstrip("\n")


class PendingRenderStrategy:
    """Renders only elements not yet processed, then marks them processed.

    Rendering the same document again therefore emits only elements that
    were added since the previous pass.
    """

    def __init__(self, inner: RenderStrategy) -> None:
        self.inner = inner

    def render(self, elements: Sequence[DocumentElement]) -> None:
        pending = list(ElementCursor(elements))
        LOGGER.debug("Rendering %d of %d elements", len(pending), len(elements))
        self.inner.render(pending)
        for element in pending:
            element.mark_processed()


def strategy_for_style(style: str, stream: TextIO | None = None) -> ConsoleRenderStrategy:
    name = style.strip().lower()
    if name == "plain":
        return ConsoleRenderStrategy(stream)
    if name == "highlight":
        return HighlightRenderStrategy(stream)
    raise ValueError(f"Unknown render style: {style!r}")
