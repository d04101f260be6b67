import datetime as dt
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.models.enums import ChartType, ReportPeriod
from strayfund.schemas.report import (
    BucketItem,
    FundReportResponse,
    PeriodComparisonRead,
    SliceItem,
    SummaryCards,
)
from strayfund.services.campaigns import load_campaign_titles
from strayfund.services.reporting import (
    RECENT_LIMIT,
    CategorySlice,
    FundReport,
    build_fund_report,
    collect_campaign_ids,
)
from strayfund.services.transactions import fetch_ledger, serialize_entry


async def load_fund_report(
    session: AsyncSession,
    period: ReportPeriod,
    now: dt.datetime,
    campaign_id: int | None = None,
    fill_gaps: bool = False,
    recent_limit: int = RECENT_LIMIT,
    tz: ZoneInfo | None = None,
) -> FundReport:
    entries = await fetch_ledger(session, campaign_id=campaign_id, tz=tz)
    titles = await load_campaign_titles(session, collect_campaign_ids(entries))
    return build_fund_report(
        entries,
        titles,
        period=period,
        now=now,
        campaign_id=campaign_id,
        fill_gaps=fill_gaps,
        recent_limit=recent_limit,
    )


def _slices(items: list[CategorySlice]) -> list[SliceItem]:
    return [SliceItem(name=item.source_name, value=item.total) for item in items]


def serialize_fund_report(
    report: FundReport,
    chart_type: ChartType,
    currency: str,
    generated_at: dt.datetime,
) -> FundReportResponse:
    comparison = None
    if report.comparison is not None:
        comparison = PeriodComparisonRead(
            current_from=report.comparison.current_window.start,
            current_to=report.comparison.current_window.end,
            previous_from=report.comparison.previous_window.start,
            previous_to=report.comparison.previous_window.end,
            current_income=report.comparison.current.income,
            current_expense=report.comparison.current.expense,
            previous_income=report.comparison.previous.income,
            previous_expense=report.comparison.previous.expense,
            income_change_percent=report.comparison.income_change_percent,
            expense_change_percent=report.comparison.expense_change_percent,
        )

    return FundReportResponse(
        period=report.period,
        campaign_id=report.campaign_id,
        chart_type=chart_type,
        currency=currency,
        generated_at=generated_at,
        is_empty=report.is_empty,
        summary=SummaryCards(
            total_income=report.totals.income,
            total_expense=report.totals.expense,
            balance=report.totals.balance,
            income_change_percent=comparison.income_change_percent if comparison else None,
            expense_change_percent=comparison.expense_change_percent if comparison else None,
        ),
        chart=[
            BucketItem(label=item.label, income=item.income, expense=item.expense, balance=item.balance)
            for item in report.buckets
        ],
        income_slices=_slices(report.income_slices),
        expense_slices=_slices(report.expense_slices),
        comparison=comparison,
        recent_transactions=[serialize_entry(item) for item in report.recent],
        transactions=[serialize_entry(item) for item in report.transactions],
    )
