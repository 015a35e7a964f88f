"""Celery tasks for the visitors application."""

from __future__ import annotations

import logging

from celery import shared_task

from .services import get_sweeper

logger = logging.getLogger(__name__)


@shared_task
def purge_visits() -> int:
    """Remove visits older than the retention horizon."""

    deleted = get_sweeper().purge()
    logger.debug("Retention purge finished; %s visits removed", deleted)
    return deleted
