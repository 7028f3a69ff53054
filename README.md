# wordtally

wordtally counts the words in a piece of text. It also keeps a history of the texts it has counted in a small SQLite database.

A word is any run of characters that is not whitespace. Leading, trailing and repeated whitespace is ignored. An empty text counts as zero words, and so does a text made only of whitespace.

## Installation

```
pip install .
```

To run the test suite, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
wordtally notes.txt          # count the words in a UTF-8 text file
wordtally --text "a b c"     # count the words in the given text
wordtally < notes.txt        # count the words read from standard input
wordtally --history          # list the history, newest entry first
wordtally --db other.db ...  # use a different history database
```

Give either a file or `-t/--text`, not both. With neither, the text is read from standard input. The command prints a line such as `Количество слов: 3` and records the text and its count in the history. If the text and count are already stored, nothing new is written.

`--history` prints one line per entry. Each line holds the entry's text and its count, separated by a tab, for example `hello world\tКол-во слов: 2`. A text longer than 80 characters is cut to its first 80 characters, followed by `...`.

If the file cannot be read, or is not valid UTF-8, the command prints an error to standard error and exits with status 1.

Without `--db`, the history file is `history.db` in the directory of the running program, as returned by `wordtally.cli.default_database_path()`. If no program path is known, the current directory is used instead.

## Library use

```python
from wordtally.service import WordCountRequest, count_words
from wordtally.database import HistoryDatabase
from wordtally.history import WordCountHistory, truncate

count_words("hello world")              # 2
WordCountRequest("  a  b   c ").count()  # 3

with HistoryDatabase("history.db") as db:
    history = WordCountHistory(db)       # loads stored entries, newest first
    history.add("hello world", 2)
    for item in history:
        print(item.label(), item.word_count)
```

- `HistoryDatabase` opens or creates the SQLite file and its `word_count_history` table. Its methods are:
  - `add(text, word_count)` stores an entry.
  - `contains(text, word_count)` tells whether that exact pair is stored.
  - `history()` returns `(text, word_count)` pairs, newest first.
  - `close()` closes the database. The object also works as a context manager.
- `WordCountHistory(database)` loads every stored entry when it is created.
  - `add(text, word_count)` writes to the database only if that exact pair is not stored yet. The entry is added to the in-memory list either way, and the new `HistoryItem` is returned.
  - `load()` appends the stored entries again. Calling it on a history that is already loaded lists those entries twice.
  - A `WordCountHistory` supports iteration and `len()`.
- `truncate(text, limit=80)` keeps the first `limit` characters of a longer text and adds `...`. `HistoryItem.label()` applies it with the default limit.
- `wordtally.cli` also provides `read_text_file(path)` and `format_result(word_count)`.

## What it does not do

wordtally works only from the command line. It has no graphical window, and it cannot copy a history entry to the clipboard. There is no way to delete or edit history entries, except by working on the SQLite file directly.