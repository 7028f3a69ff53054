"""Word counting."""

from __future__ import annotations

from dataclasses import dataclass


def count_words(text: str) -> int:
    """Return the number of whitespace-separated words in *text*."""
    return len(text.split())


@dataclass
class WordCountRequest:
    """A piece of text whose words are to be counted."""

    text: str = ""

    def count(self) -> int:
        """Return the number of words in the request's text."""
        return count_words(self.text)