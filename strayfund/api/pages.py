import datetime as dt
from pathlib import Path
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.api.reports import resolve_campaign
from strayfund.db.session import get_session
from strayfund.db.settings import get_settings
from strayfund.models.enums import ReportPeriod, TransactionCategory
from strayfund.services.formatting import format_currency, format_percent
from strayfund.services.fund_report import load_fund_report

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.filters["currency"] = format_currency
templates.env.filters["percent"] = format_percent


@router.get("/", response_class=HTMLResponse)
async def transparency_page(
    request: Request,
    period: ReportPeriod = Query(default=ReportPeriod.MONTH),
    campaign: str = Query(default="all"),
    session: AsyncSession = Depends(get_session),
) -> HTMLResponse:
    settings = get_settings()
    tz = ZoneInfo(settings.report_timezone)
    report = await load_fund_report(
        session,
        period=period,
        now=dt.datetime.now(tz=tz),
        campaign_id=resolve_campaign(campaign),
        recent_limit=settings.recent_limit,
        tz=tz,
    )
    return templates.TemplateResponse(
        request,
        "transparency.html",
        {
            "report": report,
            "currency": settings.currency,
            "income": TransactionCategory.INCOME,
            "app_name": settings.app_name,
        },
    )
