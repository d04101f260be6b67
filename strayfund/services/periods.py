import calendar
import datetime as dt
from dataclasses import dataclass

from strayfund.models.enums import ReportPeriod


@dataclass(slots=True, frozen=True)
class PeriodWindow:
    start: dt.datetime
    end: dt.datetime

    def contains(self, moment: dt.datetime) -> bool:
        return self.start <= moment < self.end


def shift_months(moment: dt.datetime, months: int) -> dt.datetime:
    """Move ``moment`` back by whole calendar months, clamping to the last valid day."""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month_zero = divmod(month_index, 12)
    month = month_zero + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def step_back(moment: dt.datetime, period: ReportPeriod) -> dt.datetime:
    if period == ReportPeriod.WEEK:
        return moment - dt.timedelta(days=7)
    if period == ReportPeriod.MONTH:
        return shift_months(moment, 1)
    if period == ReportPeriod.YEAR:
        return shift_months(moment, 12)
    raise ValueError(f"Period '{period.value}' has no comparison window")


def comparison_windows(now: dt.datetime, period: ReportPeriod) -> tuple[PeriodWindow, PeriodWindow]:
    boundary = step_back(now, period)
    previous_start = step_back(boundary, period)
    return PeriodWindow(start=boundary, end=now), PeriodWindow(start=previous_start, end=boundary)
