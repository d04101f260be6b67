from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from decimal import ROUND_HALF_UP, Decimal

from strayfund.models.enums import ReportPeriod, TransactionCategory
from strayfund.services.periods import PeriodWindow, comparison_windows

logger = logging.getLogger(__name__)

GENERAL_DONATION_LABEL = "general donation"
GENERAL_EXPENSE_LABEL = "general operating expense"
ALL_CAMPAIGNS = "all"
RECENT_LIMIT = 10

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

ZERO = Decimal("0")
HUNDRED = Decimal("100")
PERCENT_QUANT = Decimal("0.01")


@dataclass(slots=True)
class LedgerEntry:
    id: int
    description: str
    amount: Decimal
    category: TransactionCategory
    date: dt.datetime
    campaign_id: int | None = None
    campaign_title: str | None = None

    @property
    def signed_amount(self) -> Decimal:
        magnitude = abs(self.amount)
        return magnitude if self.category == TransactionCategory.INCOME else -magnitude


@dataclass(slots=True)
class Totals:
    income: Decimal = ZERO
    expense: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass(slots=True)
class Bucket:
    label: str
    income: Decimal = ZERO
    expense: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass(slots=True)
class CategorySlice:
    source_name: str
    total: Decimal


@dataclass(slots=True)
class PeriodComparison:
    current: Totals
    previous: Totals
    current_window: PeriodWindow
    previous_window: PeriodWindow
    income_change_percent: Decimal
    expense_change_percent: Decimal


@dataclass(slots=True)
class FundReport:
    period: ReportPeriod
    campaign_id: int | None
    totals: Totals
    buckets: list[Bucket]
    income_slices: list[CategorySlice]
    expense_slices: list[CategorySlice]
    comparison: PeriodComparison | None
    recent: list[LedgerEntry] = field(default_factory=list)
    transactions: list[LedgerEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.transactions


def parse_campaign_filter(value: str | int | None) -> int | None:
    """Turn a campaign selector into an id; ``None`` means every campaign."""
    if value is None or isinstance(value, int):
        return value
    normalized = value.strip().lower()
    if not normalized or normalized == ALL_CAMPAIGNS:
        return None
    try:
        campaign_id = int(normalized)
    except ValueError as exc:
        raise ValueError("Campaign filter must be 'all' or a campaign id") from exc
    if campaign_id < 1:
        raise ValueError("Campaign id must be positive")
    return campaign_id


def collect_campaign_ids(entries: Iterable[LedgerEntry]) -> set[int]:
    return {entry.campaign_id for entry in entries if entry.campaign_id is not None}


def enrich_entries(entries: Iterable[LedgerEntry], campaign_titles: Mapping[int, str]) -> list[LedgerEntry]:
    enriched: list[LedgerEntry] = []
    for entry in entries:
        title = campaign_titles.get(entry.campaign_id) if entry.campaign_id is not None else None
        if title is None:
            if entry.campaign_id is not None and entry.campaign_title is None:
                logger.debug("Campaign %s not found for transaction %s", entry.campaign_id, entry.id)
            enriched.append(entry)
            continue
        enriched.append(replace(entry, campaign_title=title))
    return enriched


def filter_by_campaign(entries: Iterable[LedgerEntry], campaign_id: int | None) -> list[LedgerEntry]:
    if campaign_id is None:
        return list(entries)
    return [entry for entry in entries if entry.campaign_id == campaign_id]


def summarize(entries: Iterable[LedgerEntry]) -> Totals:
    totals = Totals()
    for entry in entries:
        if entry.category == TransactionCategory.INCOME:
            totals.income += abs(entry.amount)
        elif entry.category == TransactionCategory.EXPENSE:
            totals.expense += abs(entry.amount)
    return totals


def period_key(moment: dt.datetime, period: ReportPeriod) -> tuple[int, ...]:
    if period == ReportPeriod.WEEK:
        return (moment.weekday(),)
    if period == ReportPeriod.MONTH:
        return (moment.year, moment.month, moment.day)
    if period == ReportPeriod.YEAR:
        return (moment.month,)
    return (moment.year, moment.month)


def period_label(key: tuple[int, ...], period: ReportPeriod, with_year: bool = False) -> str:
    if period == ReportPeriod.WEEK:
        return WEEKDAY_LABELS[key[0]]
    if period == ReportPeriod.MONTH:
        year, month, day = key
        label = f"{day:02d} {MONTH_LABELS[month - 1]}"
        return f"{label} {year}" if with_year else label
    if period == ReportPeriod.YEAR:
        return MONTH_LABELS[key[0] - 1]
    year, month = key
    return f"{MONTH_LABELS[month - 1]} {year}"


def _dense_keys(keys: set[tuple[int, ...]], period: ReportPeriod) -> list[tuple[int, ...]]:
    if period == ReportPeriod.WEEK:
        return [(weekday,) for weekday in range(7)]
    if period == ReportPeriod.YEAR:
        return [(month,) for month in range(1, 13)]
    if not keys:
        return []

    first, last = min(keys), max(keys)
    if period == ReportPeriod.MONTH:
        day = dt.date(*first)
        end = dt.date(*last)
        dense = []
        while day <= end:
            dense.append((day.year, day.month, day.day))
            day += dt.timedelta(days=1)
        return dense

    year, month = first
    dense = []
    while (year, month) <= last:
        dense.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return dense


def bucket_by_period(
    entries: Iterable[LedgerEntry],
    period: ReportPeriod,
    fill_gaps: bool = False,
) -> list[Bucket]:
    """Group entries into income/expense buckets ordered by period.

    Buckets are sorted chronologically by their period key (Monday first for
    weeks, January first for years). With ``fill_gaps`` every period in the
    covered range is emitted, empty ones as zero buckets.
    """
    grouped: dict[tuple[int, ...], Bucket] = {}
    for entry in entries:
        key = period_key(entry.date, period)
        bucket = grouped.get(key)
        if bucket is None:
            bucket = grouped[key] = Bucket(label="")
        if entry.category == TransactionCategory.INCOME:
            bucket.income += abs(entry.amount)
        else:
            bucket.expense += abs(entry.amount)

    keys = _dense_keys(set(grouped), period) if fill_gaps else sorted(grouped)
    # Day labels carry the year once the range spans more than one year.
    with_year = period == ReportPeriod.MONTH and len({key[0] for key in keys}) > 1

    buckets = []
    for key in keys:
        bucket = grouped.get(key) or Bucket(label="")
        bucket.label = period_label(key, period, with_year=with_year)
        buckets.append(bucket)
    return buckets


def percent_change(current: Decimal, previous: Decimal) -> Decimal:
    # A zero previous period reports a flat 100 % increase.
    if previous == ZERO:
        return HUNDRED.quantize(PERCENT_QUANT)
    change = (current - previous) / previous * HUNDRED
    return change.quantize(PERCENT_QUANT, rounding=ROUND_HALF_UP)


def compare_periods(
    entries: Iterable[LedgerEntry],
    period: ReportPeriod,
    now: dt.datetime,
) -> PeriodComparison | None:
    if period == ReportPeriod.ALL:
        return None

    current_window, previous_window = comparison_windows(now, period)
    items = list(entries)
    current = summarize(entry for entry in items if current_window.contains(entry.date))
    previous = summarize(entry for entry in items if previous_window.contains(entry.date))

    return PeriodComparison(
        current=current,
        previous=previous,
        current_window=current_window,
        previous_window=previous_window,
        income_change_percent=percent_change(current.income, previous.income),
        expense_change_percent=percent_change(current.expense, previous.expense),
    )


def source_name(entry: LedgerEntry) -> str:
    if entry.campaign_title:
        return entry.campaign_title
    if entry.category == TransactionCategory.INCOME:
        return GENERAL_DONATION_LABEL
    return GENERAL_EXPENSE_LABEL


def _slices_for(entries: Iterable[LedgerEntry]) -> list[CategorySlice]:
    totals: dict[str, Decimal] = {}
    for entry in entries:
        name = source_name(entry)
        totals[name] = totals.get(name, ZERO) + abs(entry.amount)
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [CategorySlice(source_name=name, total=total) for name, total in ordered]


def slice_by_source(entries: Iterable[LedgerEntry]) -> tuple[list[CategorySlice], list[CategorySlice]]:
    items = list(entries)
    income = _slices_for(entry for entry in items if entry.category == TransactionCategory.INCOME)
    expense = _slices_for(entry for entry in items if entry.category == TransactionCategory.EXPENSE)
    return income, expense


def sort_newest_first(entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
    # sorted() keeps input order for equal dates, also with reverse=True.
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


def recent_entries(entries: Iterable[LedgerEntry], limit: int = RECENT_LIMIT) -> list[LedgerEntry]:
    return sort_newest_first(entries)[:limit]


def build_fund_report(
    entries: Iterable[LedgerEntry],
    campaign_titles: Mapping[int, str],
    period: ReportPeriod,
    now: dt.datetime,
    campaign_id: int | None = None,
    fill_gaps: bool = False,
    recent_limit: int = RECENT_LIMIT,
) -> FundReport:
    selected = filter_by_campaign(enrich_entries(entries, campaign_titles), campaign_id)
    income_slices, expense_slices = slice_by_source(selected)
    listing = sort_newest_first(selected)

    report = FundReport(
        period=period,
        campaign_id=campaign_id,
        totals=summarize(selected),
        buckets=bucket_by_period(selected, period, fill_gaps=fill_gaps),
        income_slices=income_slices,
        expense_slices=expense_slices,
        comparison=compare_periods(selected, period, now),
        recent=listing[:recent_limit],
        transactions=listing,
    )
    logger.info(
        "Fund report built: period=%s campaign=%s rows=%d buckets=%d",
        period.value,
        campaign_id if campaign_id is not None else ALL_CAMPAIGNS,
        len(listing),
        len(report.buckets),
    )
    return report
