import io
from contextlib import redirect_stderr, redirect_stdout
from dataclasses import dataclass
from datetime import date, datetime

import pytest

from tracker import config, db
from tracker.cli import run
from tracker.lib import ansi, clock

FIXED_TODAY = date(2026, 1, 12)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.yaml")
    config.reload()


@pytest.fixture
def tmp_tracker_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "TRACKER_DIR", tmp_path)
    monkeypatch.setattr(config, "DB_PATH", tmp_path / "tracker.db")
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(config, "BACKUP_DIR", tmp_path / "backups")
    config.reload()
    db.init()
    return tmp_path


@pytest.fixture
def fixed_today(monkeypatch):
    monkeypatch.setattr(clock, "now", lambda: datetime.combine(FIXED_TODAY, datetime.min.time()))
    return FIXED_TODAY


@dataclass
class Result:
    exit_code: int
    stdout: str
    stderr: str


class FnCLIRunner:
    def invoke(self, args: list[str]) -> Result:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            try:
                code = run(args)
            except SystemExit as e:
                code = e.code if isinstance(e.code, int) else 1
        return Result(code or 0, ansi.strip(out.getvalue()), ansi.strip(err.getvalue()))
