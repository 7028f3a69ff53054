"""SQLite storage for the word count history."""

from __future__ import annotations

import sqlite3
from os import PathLike
from typing import Union

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS word_count_history ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "text TEXT, "
    "word_count INTEGER)"
)


class HistoryDatabase:
    """A history of counted texts kept in an SQLite file."""

    def __init__(self, path: Union[str, "PathLike[str]"]) -> None:
        self._connection = sqlite3.connect(str(path))
        with self._connection:
            self._connection.execute(_CREATE_TABLE)

    def add(self, text: str, word_count: int) -> None:
        """Store one counted text."""
        with self._connection:
            self._connection.execute(
                "INSERT INTO word_count_history (text, word_count) VALUES (?, ?)",
                (text, word_count),
            )

    def contains(self, text: str, word_count: int) -> bool:
        """Return whether this text with this count is already stored."""
        (count,) = self._connection.execute(
            "SELECT COUNT(*) FROM word_count_history "
            "WHERE text = ? AND word_count = ?",
            (text, word_count),
        ).fetchone()
        return count > 0

    def history(self) -> list[tuple[str, int]]:
        """Return stored entries, newest first."""
        rows = self._connection.execute(
            "SELECT text, word_count FROM word_count_history ORDER BY id DESC"
        )
        return [(str(text), int(count)) for text, count in rows]

    def close(self) -> None:
        """Close the underlying connection."""
        self._connection.close()

    def __enter__(self) -> "HistoryDatabase":
        return self

    def __exit__(self, *args) -> None:
        self.close()