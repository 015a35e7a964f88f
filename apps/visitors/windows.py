"""Named lookback windows used to bound visitor counts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone
from typing import Mapping

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class Window:
    """A named lookback duration."""

    name: str
    duration: relativedelta

    def cutoff(self, now: datetime) -> datetime:
        """Return the oldest moment still covered by the window."""

        return now - self.duration


WINDOWS: Mapping[str, Window] = {
    window.name: window
    for window in (
        Window("now", relativedelta(minutes=15)),
        Window("hour", relativedelta(hours=1)),
        Window("day", relativedelta(days=1)),
        Window("week", relativedelta(weeks=1)),
        Window("month", relativedelta(months=1)),
    )
}

DEFAULT_WINDOW = "now"

# Must be at least as long as the longest window or counts under-report.
RETENTION_HORIZON = relativedelta(months=1)


class UnknownWindowError(ValueError):
    """Raised when a count is requested for a window that is not configured."""

    def __init__(self, requested: str, valid_options: list[str]):
        self.requested = requested
        self.valid_options = valid_options
        super().__init__(
            f"Unknown window {requested!r}; choose one of: {', '.join(valid_options)}"
        )


def window_names(windows: Mapping[str, Window] = WINDOWS) -> list[str]:
    return sorted(windows)


def resolve_window(name: str | None, windows: Mapping[str, Window] = WINDOWS) -> Window:
    """Return the window called ``name``.

    ``None`` and the empty string select :data:`DEFAULT_WINDOW`. Any other
    unknown name raises :class:`UnknownWindowError` rather than falling back.
    """

    key = name or DEFAULT_WINDOW
    try:
        return windows[key]
    except KeyError:
        raise UnknownWindowError(key, window_names(windows)) from None


def horizon_covers_windows(
    horizon: relativedelta,
    windows: Mapping[str, Window] = WINDOWS,
    reference: datetime | None = None,
) -> bool:
    """Return whether ``horizon`` reaches at least as far back as every window.

    ``relativedelta`` values are not directly comparable, so both are applied
    to ``reference`` and the resulting cutoffs compared. The default reference
    is a 31-day month so that calendar-month durations compare at their
    longest.
    """

    reference = reference or datetime(2024, 1, 31, tzinfo=dt_timezone.utc)
    horizon_cutoff = reference - horizon
    return all(
        horizon_cutoff <= window.cutoff(reference) for window in windows.values()
    )
