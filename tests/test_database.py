import sqlite3

import pytest

from wordtally.database import HistoryDatabase


@pytest.fixture
def db(tmp_path):
    with HistoryDatabase(tmp_path / "history.db") as database:
        yield database


def test_new_database_is_empty(db):
    assert db.history() == []


def test_add_and_read_back(db):
    db.add("hello world", 2)
    assert db.history() == [("hello world", 2)]


def test_history_is_newest_first(db):
    db.add("first", 1)
    db.add("second one", 2)
    db.add("third one here", 3)
    assert db.history() == [
        ("third one here", 3),
        ("second one", 2),
        ("first", 1),
    ]


def test_contains(db):
    db.add("hello", 1)
    assert db.contains("hello", 1)
    assert not db.contains("hello", 2)
    assert not db.contains("other", 1)


def test_add_keeps_duplicates(db):
    db.add("same", 1)
    db.add("same", 1)
    assert db.history() == [("same", 1), ("same", 1)]


def test_data_survives_reopening(tmp_path):
    path = tmp_path / "history.db"
    with HistoryDatabase(path) as database:
        database.add("kept text", 2)
    with HistoryDatabase(path) as database:
        assert database.history() == [("kept text", 2)]


def test_closed_database_rejects_use(tmp_path):
    database = HistoryDatabase(tmp_path / "history.db")
    database.close()
    with pytest.raises(sqlite3.ProgrammingError):
        database.history()


def test_context_manager_closes(tmp_path):
    with HistoryDatabase(tmp_path / "history.db") as database:
        database.add("x", 1)
    with pytest.raises(sqlite3.ProgrammingError):
        database.add("y", 1)