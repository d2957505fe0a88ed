"""Tests for the database session helpers."""

from pathlib import Path

from bargainwala.db.session import _sqlite_path, get_engine, init_db


class TestSqlitePath:
    def test_file_url(self):
        assert _sqlite_path("sqlite:///data/bargainwala.db") == Path("data/bargainwala.db")

    def test_memory_url(self):
        assert _sqlite_path("sqlite:///:memory:") is None

    def test_other_backend(self):
        assert _sqlite_path("postgresql://localhost/bargainwala") is None


class TestGetEngine:
    def test_creates_parent_dir(self, tmp_path):
        db_file = tmp_path / "nested" / "bargainwala.db"
        engine = init_db(get_engine(f"sqlite:///{db_file}"))
        assert db_file.parent.is_dir()
        engine.dispose()
