import datetime as dt

import pytest

from strayfund.models.enums import ReportPeriod
from strayfund.services.periods import PeriodWindow, comparison_windows, shift_months, step_back

UTC = dt.timezone.utc


def test_shift_months_clamps_to_month_end() -> None:
    moment = dt.datetime(2024, 3, 31, 9, 30, tzinfo=UTC)

    assert shift_months(moment, 1) == dt.datetime(2024, 2, 29, 9, 30, tzinfo=UTC)
    assert shift_months(moment, 12) == dt.datetime(2023, 3, 31, 9, 30, tzinfo=UTC)


def test_shift_months_crosses_year_boundary() -> None:
    moment = dt.datetime(2024, 1, 15, tzinfo=UTC)

    assert shift_months(moment, 1) == dt.datetime(2023, 12, 15, tzinfo=UTC)
    assert shift_months(moment, 13) == dt.datetime(2022, 12, 15, tzinfo=UTC)


def test_leap_day_minus_one_year() -> None:
    moment = dt.datetime(2024, 2, 29, tzinfo=UTC)

    assert step_back(moment, ReportPeriod.YEAR) == dt.datetime(2023, 2, 28, tzinfo=UTC)


def test_step_back_week() -> None:
    moment = dt.datetime(2024, 1, 3, tzinfo=UTC)

    assert step_back(moment, ReportPeriod.WEEK) == dt.datetime(2023, 12, 27, tzinfo=UTC)


def test_step_back_all_is_rejected() -> None:
    with pytest.raises(ValueError):
        step_back(dt.datetime(2024, 1, 3, tzinfo=UTC), ReportPeriod.ALL)


def test_comparison_windows_are_adjacent() -> None:
    now = dt.datetime(2024, 5, 20, 8, tzinfo=UTC)

    current, previous = comparison_windows(now, ReportPeriod.WEEK)

    assert current == PeriodWindow(start=dt.datetime(2024, 5, 13, 8, tzinfo=UTC), end=now)
    assert previous.end == current.start
    assert previous.start == dt.datetime(2024, 5, 6, 8, tzinfo=UTC)


def test_window_is_half_open() -> None:
    window = PeriodWindow(start=dt.datetime(2024, 5, 1, tzinfo=UTC), end=dt.datetime(2024, 5, 2, tzinfo=UTC))

    assert window.contains(window.start)
    assert not window.contains(window.end)
