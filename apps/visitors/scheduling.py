from __future__ import annotations

import logging

from django.db.utils import OperationalError, ProgrammingError
from django_celery_beat.models import IntervalSchedule, PeriodicTask

from .tasks import purge_visits

logger = logging.getLogger(__name__)

PURGE_TASK_NAME = "visitors-retention-purge"
PURGE_TASK_PATH = purge_visits.name
PURGE_INTERVAL_DAYS = 1


def ensure_purge_task(sender=None, **kwargs) -> bool:
    """Register the daily retention purge unless it is already scheduled.

    Returns ``True`` when a new registration was created. Returns ``False``
    while the beat tables are not migrated yet; the ``post_migrate`` run that
    creates them registers the task.
    """

    del sender, kwargs

    try:
        if PeriodicTask.objects.filter(name=PURGE_TASK_NAME).exists():
            return False

        schedule, _ = IntervalSchedule.objects.get_or_create(
            every=PURGE_INTERVAL_DAYS,
            period=IntervalSchedule.DAYS,
        )
        PeriodicTask.objects.create(
            name=PURGE_TASK_NAME,
            task=PURGE_TASK_PATH,
            interval=schedule,
        )
    except (OperationalError, ProgrammingError):
        logger.debug("Beat tables unavailable; %s not scheduled yet", PURGE_TASK_NAME)
        return False
    logger.info("Scheduled %s every %s day(s)", PURGE_TASK_PATH, PURGE_INTERVAL_DAYS)
    return True


def remove_purge_task() -> bool:
    """Remove the retention purge registration if present."""

    try:
        deleted, _ = PeriodicTask.objects.filter(name=PURGE_TASK_NAME).delete()
    except (OperationalError, ProgrammingError):
        return False
    if deleted:
        logger.info("Removed scheduled task %s", PURGE_TASK_NAME)
    return bool(deleted)


__all__ = [
    "PURGE_TASK_NAME",
    "PURGE_TASK_PATH",
    "ensure_purge_task",
    "remove_purge_task",
]
