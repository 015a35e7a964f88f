import logging
import os
from pathlib import Path

from django.conf import settings
from django.test import override_settings

from config.celery import app as celery_app
from config.loadenv import loadenv
from config.logging import ServiceFileHandler, running_tests


def test_loadenv_reads_env_files_without_overriding(tmp_path: Path, monkeypatch):
    (tmp_path / "10-base.env").write_text(
        "VISITORS_SAMPLE=from-file\nVISITORS_OTHER=x\n"
    )
    (tmp_path / "notes.txt").write_text("VISITORS_IGNORED=1\n")
    monkeypatch.setenv("VISITORS_OTHER", "from-env")
    monkeypatch.delenv("VISITORS_SAMPLE", raising=False)
    monkeypatch.delenv("VISITORS_IGNORED", raising=False)

    loaded = loadenv(tmp_path)

    assert loaded == [tmp_path / "10-base.env"]

    assert os.environ["VISITORS_SAMPLE"] == "from-file"
    assert os.environ["VISITORS_OTHER"] == "from-env"
    assert "VISITORS_IGNORED" not in os.environ
    monkeypatch.delenv("VISITORS_SAMPLE")


def test_loadenv_missing_directory(tmp_path: Path):
    assert loadenv(tmp_path / "absent") == []


def test_running_tests_detection():
    assert running_tests(["manage.py", "test"])
    assert running_tests(["/usr/bin/pytest", "-q"])
    assert running_tests(["/venv/lib/site-packages/pytest/__main__.py"])
    assert not running_tests(["manage.py", "runserver"])
    assert not running_tests([])


def test_file_handler_writes_test_log(tmp_path: Path):
    with override_settings(LOG_DIR=tmp_path):
        handler = ServiceFileHandler()
        record = logging.LogRecord(
            "apps.visitors", logging.INFO, __file__, 1, "hello", None, None
        )
        try:
            handler.emit(record)
        finally:
            handler.close()

    assert "hello" in (tmp_path / "tests.log").read_text()


def test_celery_reads_django_settings():
    assert celery_app.main == "config"
    assert celery_app.conf.beat_scheduler == settings.CELERY_BEAT_SCHEDULER


def test_visitor_middleware_installed():
    assert "apps.visitors.middleware.VisitRecorderMiddleware" in settings.MIDDLEWARE
    assert settings.VISITORS_DATABASE in settings.DATABASES
