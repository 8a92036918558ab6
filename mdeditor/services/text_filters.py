from __future__ import annotations
from typing import Optional


class TextFilter:
    """One stage of a text-processing chain.

    Subclasses implement transform(); handle() applies it and forwards the
    result to the next stage. A stage without a successor ends the chain.
    """

    def __init__(self) -> None:
        self._next: Optional[TextFilter] = None

    @property
    def next(self) -> Optional["TextFilter"]:
        return self._next

    def set_next(self, successor: "TextFilter") -> "TextFilter":
        """Links successor after this stage and returns it for chaining."""
        self._next = successor
        return successor

    def transform(self, text: str) -> str:
        return text

    def handle(self, text: str) -> str:
        result = self.transform(text)
        if self._next is None:
            return result
        return self._next.handle(result)


class TrimFilter(TextFilter):
    def transform(self, text: str) -> str:
        return text.strip()


class ExpandTabsFilter(TextFilter):
    def __init__(self, tab_size: int = 4) -> None:
        super().__init__()
        self.tab_size = tab_size

    def transform(self, text: str) -> str:
        return text.replace("\t", " " * self.tab_size)


def build_filter_chain(*filters: TextFilter) -> TextFilter:
    """Links filters in the given order and returns the head of the chain."""
    if not filters:
        return TextFilter()
    head = filters[0]
    current = head
    for successor in filters[1:]:
        current = current.set_next(successor)
    return head
