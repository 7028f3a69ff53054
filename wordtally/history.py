"""The list of counted texts shown to the user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .database import HistoryDatabase

DEFAULT_LIMIT = 80


def truncate(text: str, limit: int = DEFAULT_LIMIT) -> str:
    """Cut *text* to *limit* characters, marking the cut with an ellipsis."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


@dataclass(frozen=True)
class HistoryItem:
    """One counted text with its word count."""

    text: str
    word_count: int

    def label(self) -> str:
        """Return the shortened text shown for this item."""
        return truncate(self.text)


class WordCountHistory:
    """Counted texts, backed by a database and loaded from it on creation."""

    def __init__(self, database: HistoryDatabase) -> None:
        self._database = database
        self._items: list[HistoryItem] = []
        self.load()

    def add(self, text: str, word_count: int) -> HistoryItem:
        """Show a counted text, storing it unless already stored."""
        if not self._database.contains(text, word_count):
            self._database.add(text, word_count)
        item = HistoryItem(text, word_count)
        self._items.append(item)
        return item

    def load(self) -> None:
        """Append every stored entry, newest first."""
        for text, word_count in self._database.history():
            self.add(text, word_count)

    def __iter__(self) -> Iterator[HistoryItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)