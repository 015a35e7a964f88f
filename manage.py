#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import subprocess
import sys
from typing import Sequence

from config.loadenv import loadenv


def _start_celery() -> list[subprocess.Popen]:
    """Start a Celery worker and beat scheduler alongside the command."""

    worker = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "celery",
            "-A",
            "config",
            "worker",
            "-l",
            "info",
            "--concurrency=1",
        ]
    )
    beat = subprocess.Popen(
        [sys.executable, "-m", "celery", "-A", "config", "beat", "-l", "info"]
    )
    return [worker, beat]


def main(argv: Sequence[str] | None = None) -> None:
    """Run administrative tasks.

    ``--celery`` also runs the worker and beat that execute the scheduled
    retention purge.
    """

    loadenv()
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

    args = list(sys.argv[1:] if argv is None else argv)
    celery_enabled = "--celery" in args
    if celery_enabled:
        args.remove("--celery")

    processes: list[subprocess.Popen] = []
    try:
        if celery_enabled:
            processes = _start_celery()
        from django.core.management import execute_from_command_line

        execute_from_command_line(["manage.py", *args])
    finally:
        for process in processes:
            process.terminate()


if __name__ == "__main__":  # pragma: no cover - script entry
    main(sys.argv[1:])
