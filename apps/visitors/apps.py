from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class VisitorsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.visitors"
    label = "visitors"
    verbose_name = _("Visitors")

    def ready(self):  # pragma: no cover - import for side effects
        super().ready()

        from django.db.models.signals import post_migrate

        from . import checks  # noqa: F401
        from .scheduling import ensure_purge_task

        post_migrate.connect(ensure_purge_task, sender=self)
