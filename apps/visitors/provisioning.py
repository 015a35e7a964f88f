"""Install and uninstall hooks for the visitor counter."""

from __future__ import annotations

import logging

from django.core.management import call_command

from .scheduling import ensure_purge_task, remove_purge_task

logger = logging.getLogger(__name__)

APP_LABEL = "visitors"
SCHEDULER_APP_LABEL = "django_celery_beat"


def install(verbosity: int = 0) -> None:
    """Create the visits table if needed and schedule the retention purge."""

    # the purge registration lives in the beat tables
    call_command("migrate", SCHEDULER_APP_LABEL, interactive=False, verbosity=verbosity)
    call_command("migrate", APP_LABEL, interactive=False, verbosity=verbosity)
    ensure_purge_task()
    logger.info("Visitor counter installed")


def uninstall(verbosity: int = 0) -> None:
    """Drop the visits table and remove the retention purge registration."""

    # migrate emits post_migrate, which schedules the task again
    call_command("migrate", APP_LABEL, "zero", interactive=False, verbosity=verbosity)
    remove_purge_task()
    logger.info("Visitor counter uninstalled")
