from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class ElementKind(Enum):
    BOLD = "bold"
    ITALIC = "italic"


# Fixed output for each kind; rendering never varies per instance
TEMPLATES = {
    ElementKind.BOLD: "**Bold Text**",
    ElementKind.ITALIC: "*Italic Text*",
}


@dataclass
class DocumentElement:
    """One markup unit of a document.

    Attributes:
        kind: Which markup variant this element is.
        processed: Set once the element has been handled by an incremental pass.
    """

    kind: ElementKind
    processed: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        # kind is fixed once set; only processed may change afterwards
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError("DocumentElement.kind is read-only")
        super().__setattr__(name, value)

    @property
    def template(self) -> str:
        return TEMPLATES[self.kind]

    def render(self) -> str:
        return self.template

    def clone(self) -> "DocumentElement":
        """Returns an independent copy of the same kind, always unprocessed."""
        return DocumentElement(kind=self.kind)

    def mark_processed(self) -> None:
        self.processed = True
