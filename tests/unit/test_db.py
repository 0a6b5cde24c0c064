# tests/unit/test_db.py
import sqlite3

import pytest

from tracker import db
from tracker.db import MIGRATIONS_TABLE, load_migrations


def test_init_creates_schema(tmp_tracker_dir):
    """Verify that db.init() creates the database and the store table."""
    with db.get_db() as conn:
        tables = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
        table_names = {t[0] for t in tables}
    assert "store" in table_names
    assert MIGRATIONS_TABLE in table_names


def test_db_init_creates_file(tmp_tracker_dir):
    assert (tmp_tracker_dir / "tracker.db").exists()


def test_init_records_applied_migrations(tmp_tracker_dir):
    with db.get_db() as conn:
        applied = {row[0] for row in conn.execute(f"SELECT name FROM {MIGRATIONS_TABLE}")}
    assert applied == {name for name, _ in load_migrations()}


def test_init_is_idempotent(tmp_tracker_dir):
    assert db.init() == []


def test_init_creates_missing_parent(tmp_path):
    target = tmp_path / "nested" / "dir" / "tracker.db"
    applied = db.init(target)
    assert target.exists()
    assert applied == [name for name, _ in load_migrations()]


def test_init_leaves_no_backup_after_success(tmp_tracker_dir):
    assert not list((tmp_tracker_dir / "backups").glob("*.backup"))


def test_get_db_auto_commit(tmp_tracker_dir):
    with db.get_db() as conn:
        conn.execute("INSERT INTO store (key, value) VALUES (?, ?)", ("habits", "[]"))

    with db.get_db() as conn:
        result = conn.execute("SELECT value FROM store WHERE key = ?", ("habits",)).fetchone()
    assert result[0] == "[]"


def test_get_db_auto_rollback(tmp_tracker_dir):
    with pytest.raises(sqlite3.IntegrityError):
        with db.get_db() as conn:
            conn.execute("INSERT INTO store (key, value) VALUES (?, ?)", ("tasks", "[]"))
            conn.execute("INSERT INTO store (key, value) VALUES (?, ?)", ("tasks", "[]"))

    with db.get_db() as conn:
        result = conn.execute("SELECT * FROM store WHERE key = ?", ("tasks",)).fetchone()
    assert result is None


def test_migrations_are_sorted():
    names = [name for name, _ in load_migrations()]
    assert names
    assert names == sorted(names)
