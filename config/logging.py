import sys
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from django.conf import settings


LOG_NAME = "visitors"


def running_tests(argv=None) -> bool:
    """Return whether the process was started by a test runner."""

    argv = sys.argv if argv is None else argv
    if "test" in argv:
        return True
    if not argv:
        return False
    return any(part.startswith(("pytest", "py.test")) for part in Path(argv[0]).parts)


class ServiceFileHandler(TimedRotatingFileHandler):
    """File handler that keeps test output out of the service log."""

    def __init__(self, *args, **kwargs):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)
        kwargs.setdefault("filename", str(self._current_file()))
        kwargs.setdefault("when", "midnight")
        kwargs.setdefault("backupCount", 7)
        kwargs.setdefault("encoding", "utf-8")
        kwargs.setdefault("delay", True)
        super().__init__(*args, **kwargs)

    def _current_file(self) -> Path:
        if running_tests():
            return Path(settings.LOG_DIR) / "tests.log"
        return Path(settings.LOG_DIR) / f"{LOG_NAME}.log"

    def emit(self, record: logging.LogRecord) -> None:
        current = str(self._current_file())
        if self.baseFilename != current:
            self.baseFilename = current
            if self.stream:
                self.stream.close()
            self.stream = self._open()
        super().emit(record)
