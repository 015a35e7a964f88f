from __future__ import annotations

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


CLIENT_IDENTIFIER_MAX_LENGTH = 100


class VisitQuerySet(models.QuerySet):
    def newer_than(self, cutoff):
        return self.filter(timestamp__gt=cutoff)

    def older_than(self, cutoff):
        return self.filter(timestamp__lt=cutoff)


class Visit(models.Model):
    """Single page load recorded for the recent visitor counter."""

    timestamp = models.DateTimeField(
        _("time of visit"), default=timezone.now, db_index=True, editable=False
    )
    client_identifier = models.CharField(
        _("client identifier"),
        max_length=CLIENT_IDENTIFIER_MAX_LENGTH,
        blank=True,
        editable=False,
        help_text=_("Forwarded or remote address of the visitor, stored as sent."),
    )

    objects = VisitQuerySet.as_manager()

    class Meta:
        ordering = ["-timestamp", "-pk"]
        verbose_name = _("Visit")
        verbose_name_plural = _("Visits")

    def __str__(self) -> str:  # pragma: no cover - simple representation
        return f"{self.client_identifier} @ {self.timestamp:%Y-%m-%d %H:%M:%S}"
