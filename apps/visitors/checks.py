from django.core.checks import Error, register

from .windows import RETENTION_HORIZON, WINDOWS, horizon_covers_windows


@register()
def check_retention_horizon(app_configs=None, **kwargs):
    """Ensure purged visits can never fall inside a counted window."""

    if horizon_covers_windows(RETENTION_HORIZON, WINDOWS):
        return []
    return [
        Error(
            "The visit retention horizon is shorter than the longest counting window.",
            hint="Lengthen RETENTION_HORIZON or drop the longer windows.",
            id="visitors.E001",
        )
    ]
