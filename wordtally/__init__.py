"""Count words in text and keep a history of past counts in SQLite."""

__version__ = "0.1.0"

__all__ = ["cli", "database", "history", "service"]