from __future__ import annotations
from typing import List, Tuple, Union

from mdeditor.models.element import DocumentElement, ElementKind
from mdeditor.models.errors import UnknownKindError

KindLike = Union[ElementKind, str]


class ElementFactory:
    """Creates document elements from a kind or a kind name.

    Names are matched case-insensitively against the enum values, so
    "bold" and "Bold" both create a bold element.
    """

    def resolve_kind(self, kind: KindLike) -> ElementKind:
        if isinstance(kind, ElementKind):
            return kind
        if isinstance(kind, str):
            try:
                return ElementKind(kind.strip().lower())
            except ValueError:
                pass
        raise UnknownKindError(kind)

    def create(self, kind: KindLike) -> DocumentElement:
        return DocumentElement(kind=self.resolve_kind(kind))

    def create_bold(self) -> DocumentElement:
        return self.create(ElementKind.BOLD)

    def create_italic(self) -> DocumentElement:
        return self.create(ElementKind.ITALIC)

    @staticmethod
    def kinds() -> Tuple[ElementKind, ...]:
        return tuple(ElementKind)


class MarkdownBuilder:
    """Accumulates elements through chained calls.

    build() returns a tuple snapshot: later additions never show up in a
    sequence that was already handed out.
    """

    def __init__(self, factory: ElementFactory | None = None) -> None:
        self._factory = factory or ElementFactory()
        self._elements: List[DocumentElement] = []

    def __len__(self) -> int:
        return len(self._elements)

    def add(self, kind: KindLike) -> "MarkdownBuilder":
        self._elements.append(self._factory.create(kind))
        return self

    def add_bold(self) -> "MarkdownBuilder":
        return self.add(ElementKind.BOLD)

    def add_italic(self) -> "MarkdownBuilder":
        return self.add(ElementKind.ITALIC)

    def build(self) -> Tuple[DocumentElement, ...]:
        return tuple(self._elements)
