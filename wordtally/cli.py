"""Command line entry point for counting words and keeping a history."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .database import HistoryDatabase
from .history import WordCountHistory
from .service import WordCountRequest

RESULT_PREFIX = "Количество слов: "
ITEM_COUNT_PREFIX = "Кол-во слов: "


def read_text_file(path: str | Path) -> str:
    """Return the contents of a text file."""
    return Path(path).read_text(encoding="utf-8")


def format_result(word_count: int) -> str:
    """Return the result line for a word count."""
    return f"{RESULT_PREFIX}{word_count}"


def default_database_path() -> Path:
    """Return the history file next to the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    directory = Path(program).resolve().parent if program else Path.cwd()
    return directory / "history.db"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordtally", description="Count words and keep a history."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("file", nargs="?", help="text file to count")
    source.add_argument("-t", "--text", help="text to count")
    parser.add_argument("--db", type=Path, help="history database file")
    parser.add_argument(
        "--history", action="store_true", help="show the history and exit"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = _build_parser().parse_args(argv)
    db_path = args.db if args.db is not None else default_database_path()

    with HistoryDatabase(db_path) as database:
        history = WordCountHistory(database)

        if args.history:
            for item in history:
                print(f"{item.label()}\t{ITEM_COUNT_PREFIX}{item.word_count}")
            return 0

        if args.text is not None:
            text = args.text
        elif args.file is not None:
            try:
                text = read_text_file(args.file)
            except (OSError, UnicodeDecodeError) as error:
                print(f"wordtally: cannot read {args.file}: {error}", file=sys.stderr)
                return 1
        else:
            text = sys.stdin.read()

        request = WordCountRequest(text)
        word_count = request.count()
        print(format_result(word_count))
        history.add(request.text, word_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())