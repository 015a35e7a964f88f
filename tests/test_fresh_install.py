import os
import sqlite3
import subprocess
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]
PURGE_TASK_NAME = "visitors-retention-purge"


def _visitors(action: str, env: dict[str, str]) -> None:
    subprocess.run(
        [sys.executable, "manage.py", "visitors", action],
        cwd=BASE_DIR,
        env=env,
        check=True,
    )


def _tables(db_path: Path) -> set[str]:
    with sqlite3.connect(db_path) as connection:
        rows = connection.execute("SELECT name FROM sqlite_master WHERE type='table'")
        return {name for (name,) in rows}


def _scheduled(db_path: Path) -> int:
    with sqlite3.connect(db_path) as connection:
        (count,) = connection.execute(
            "SELECT COUNT(*) FROM django_celery_beat_periodictask WHERE name = ?",
            (PURGE_TASK_NAME,),
        ).fetchone()
    return count


def test_install_and_uninstall_on_unmigrated_database(tmp_path: Path) -> None:
    db_path = tmp_path / "fresh.sqlite3"
    env_dir = tmp_path / "envs"
    env_dir.mkdir()
    env = os.environ.copy()
    env.update(
        DJANGO_SETTINGS_MODULE="config.settings",
        VISITORS_DB_PATH=str(db_path),
        VISITORS_ENV_DIR=str(env_dir),
        LOG_DIR=str(tmp_path / "logs"),
        CELERY_BROKER_URL="memory://",
    )

    _visitors("install", env)

    assert "visitors_visit" in _tables(db_path)
    assert _scheduled(db_path) == 1

    _visitors("install", env)

    assert _scheduled(db_path) == 1

    _visitors("uninstall", env)

    assert "visitors_visit" not in _tables(db_path)
    assert _scheduled(db_path) == 0
