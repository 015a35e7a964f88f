from datetime import datetime, timezone as dt_timezone

import pytest
from dateutil.relativedelta import relativedelta

from apps.visitors.windows import (
    DEFAULT_WINDOW,
    RETENTION_HORIZON,
    WINDOWS,
    UnknownWindowError,
    Window,
    horizon_covers_windows,
    resolve_window,
    window_names,
)


def test_configured_windows():
    assert window_names() == ["day", "hour", "month", "now", "week"]
    assert WINDOWS["now"].duration == relativedelta(minutes=15)
    assert WINDOWS["hour"].duration == relativedelta(hours=1)
    assert WINDOWS["day"].duration == relativedelta(days=1)
    assert WINDOWS["week"].duration == relativedelta(weeks=1)
    assert WINDOWS["month"].duration == relativedelta(months=1)


@pytest.mark.parametrize("name", [None, ""])
def test_missing_name_selects_default(name):
    assert resolve_window(name) is WINDOWS[DEFAULT_WINDOW]
    assert DEFAULT_WINDOW == "now"


def test_unknown_name_lists_sorted_options():
    with pytest.raises(UnknownWindowError) as excinfo:
        resolve_window("fortnight")

    error = excinfo.value
    assert error.requested == "fortnight"
    assert error.valid_options == ["day", "hour", "month", "now", "week"]
    assert set(error.valid_options) == {"now", "hour", "day", "week", "month"}
    assert "fortnight" in str(error)


def test_names_are_case_sensitive():
    with pytest.raises(UnknownWindowError):
        resolve_window("Hour")


def test_month_cutoff_uses_calendar_months():
    now = datetime(2024, 3, 31, 8, 30, tzinfo=dt_timezone.utc)

    assert WINDOWS["month"].cutoff(now) == datetime(
        2024, 2, 29, 8, 30, tzinfo=dt_timezone.utc
    )


def test_retention_horizon_covers_every_window():
    assert horizon_covers_windows(RETENTION_HORIZON)


def test_short_horizon_does_not_cover_month_window():
    assert not horizon_covers_windows(relativedelta(minutes=60))
    assert horizon_covers_windows(
        relativedelta(minutes=60), {"hour": Window("hour", relativedelta(hours=1))}
    )
