"""Recording, counting and purging of visits.

Each component receives the queryset it talks to and a clock when it is
built. :func:`get_recorder`, :func:`get_counter` and :func:`get_sweeper`
assemble the defaults used by the middleware, template tag, Celery task and
management command.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from django.conf import settings
from django.utils import formats, timezone

from .models import CLIENT_IDENTIFIER_MAX_LENGTH, Visit, VisitQuerySet
from .windows import RETENTION_HORIZON, WINDOWS, Window, resolve_window

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class VisitRecorder:
    """Append one visit per qualifying page load."""

    def __init__(self, visits: VisitQuerySet, clock: Clock = timezone.now):
        self.visits = visits
        self.clock = clock

    def record(self, client_identifier: str) -> Visit:
        identifier = (client_identifier or "")[:CLIENT_IDENTIFIER_MAX_LENGTH]
        return self.visits.create(timestamp=self.clock(), client_identifier=identifier)


class VisitCounter:
    """Count visits inside a named window."""

    def __init__(
        self,
        visits: VisitQuerySet,
        clock: Clock = timezone.now,
        windows: dict[str, Window] | None = None,
    ):
        self.visits = visits
        self.clock = clock
        self.windows = WINDOWS if windows is None else windows

    def count(self, window_name: str | None = None) -> int:
        """Return the number of visits recorded within ``window_name``.

        Every row is one visit; repeat visits from the same client identifier
        are counted each time. Raises :class:`~.windows.UnknownWindowError`
        for names that are not configured.
        """

        window = resolve_window(window_name, self.windows)
        return self.visits.newer_than(window.cutoff(self.clock())).count()

    def formatted_count(self, window_name: str | None = None) -> str:
        return format_count(self.count(window_name))


class RetentionSweeper:
    """Delete visits older than the retention horizon."""

    def __init__(self, visits: VisitQuerySet, clock: Clock = timezone.now):
        self.visits = visits
        self.clock = clock
        self.horizon = RETENTION_HORIZON

    def purge(self) -> int:
        cutoff = self.clock() - self.horizon
        deleted, _ = self.visits.older_than(cutoff).delete()
        if deleted:
            logger.info("Purged %s visits recorded before %s", deleted, cutoff)
        return deleted


def format_count(value: int) -> str:
    """Return ``value`` with the active locale's thousands grouping."""

    return formats.number_format(value, use_l10n=True, force_grouping=True)


def _visits() -> VisitQuerySet:
    alias = getattr(settings, "VISITORS_DATABASE", "default")
    return Visit.objects.using(alias)


def get_recorder() -> VisitRecorder:
    return VisitRecorder(_visits())


def get_counter() -> VisitCounter:
    return VisitCounter(_visits())


def get_sweeper() -> RetentionSweeper:
    return RetentionSweeper(_visits())
