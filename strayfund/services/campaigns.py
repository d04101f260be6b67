import datetime as dt
import math
from collections.abc import Iterable
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.models.campaign import Campaign


async def load_campaign_titles(session: AsyncSession, campaign_ids: Iterable[int]) -> dict[int, str]:
    ids = sorted(set(campaign_ids))
    if not ids:
        return {}

    rows = await session.execute(select(Campaign.id, Campaign.title).where(Campaign.id.in_(ids)))
    return {campaign_id: title for campaign_id, title in rows.all()}


def calculate_progress(current: Decimal, target: Decimal) -> Decimal:
    if target <= 0:
        return Decimal("0")
    progress = current / target * Decimal("100")
    return min(progress, Decimal("100")).quantize(Decimal("0.01"))


def calculate_days_left(end_date: dt.datetime, now: dt.datetime) -> int:
    remaining = (end_date - now).total_seconds() / 86400
    days = math.ceil(remaining)
    return days if days > 0 else 0
