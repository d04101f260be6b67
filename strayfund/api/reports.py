import datetime as dt
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.db.session import get_session
from strayfund.db.settings import get_settings
from strayfund.models.enums import ChartType, ReportPeriod
from strayfund.schemas.report import FundReportResponse
from strayfund.services.export import export_filename, render_transactions_csv
from strayfund.services.fund_report import load_fund_report, serialize_fund_report
from strayfund.services.reporting import parse_campaign_filter

router = APIRouter(prefix="/api/reports", tags=["reports"])


def resolve_campaign(campaign: str) -> int | None:
    try:
        return parse_campaign_filter(campaign)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


@router.get("/fund", response_model=FundReportResponse)
async def fund_report(
    period: ReportPeriod = Query(default=ReportPeriod.MONTH),
    campaign: str = Query(default="all", description="'all' or a campaign id"),
    chart: ChartType = Query(default=ChartType.BAR),
    fill_gaps: bool = Query(default=False),
    session: AsyncSession = Depends(get_session),
) -> FundReportResponse:
    settings = get_settings()
    campaign_id = resolve_campaign(campaign)
    tz = ZoneInfo(settings.report_timezone)
    now = dt.datetime.now(tz=tz)

    report = await load_fund_report(
        session,
        period=period,
        now=now,
        campaign_id=campaign_id,
        fill_gaps=fill_gaps,
        recent_limit=settings.recent_limit,
        tz=tz,
    )
    return serialize_fund_report(report, chart_type=chart, currency=settings.currency, generated_at=now)


@router.get("/fund/export.csv")
async def export_fund_report(
    campaign: str = Query(default="all", description="'all' or a campaign id"),
    session: AsyncSession = Depends(get_session),
) -> Response:
    settings = get_settings()
    campaign_id = resolve_campaign(campaign)
    tz = ZoneInfo(settings.report_timezone)

    report = await load_fund_report(
        session,
        period=ReportPeriod.ALL,
        now=dt.datetime.now(tz=tz),
        campaign_id=campaign_id,
        tz=tz,
    )
    return Response(
        content=render_transactions_csv(report.transactions),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(campaign_id)}"'},
    )
