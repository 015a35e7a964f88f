from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Callable

import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")

FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def now() -> datetime:
    """A fixed, timezone-aware "current" moment for window arithmetic."""

    return FIXED_NOW


@pytest.fixture
def clock(now: datetime) -> Callable[[], datetime]:
    return lambda: now


@pytest.fixture
def visit_at(db, now: datetime):
    """Create a visit ``offset`` before ``now``."""

    from apps.visitors.models import Visit

    def _create(offset: timedelta, client_identifier: str = "203.0.113.7"):
        return Visit.objects.create(
            timestamp=now - offset, client_identifier=client_identifier
        )

    return _create
