import datetime as dt
import logging
from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.models.campaign import Campaign
from strayfund.models.enums import CampaignCategory, TransactionCategory
from strayfund.models.transaction import Transaction

logger = logging.getLogger(__name__)

DEMO_CAMPAIGNS: Sequence[tuple[str, CampaignCategory, str]] = (
    ("Feeding Program", CampaignCategory.FEEDING, "Daily meals for street cats in the old town"),
    ("Street Cat Vaccination", CampaignCategory.HEALTHCARE, "Vaccines and check-ups for community cats"),
    ("Mini Shelters", CampaignCategory.SHELTER, "Weatherproof shelters for colonies"),
)

DEMO_TRANSACTIONS: Sequence[tuple[str, str, TransactionCategory, str | None, int]] = (
    ("Cat food purchase 25kg", "1250000", TransactionCategory.EXPENSE, "Feeding Program", 2),
    ("Vaccination for 12 street cats", "840000", TransactionCategory.EXPENSE, "Street Cat Vaccination", 7),
    ("Building 3 mini shelters", "650000", TransactionCategory.EXPENSE, "Mini Shelters", 12),
    ("Medical care for a sick cat", "450000", TransactionCategory.EXPENSE, "Feeding Program", 16),
    ("Monthly community donations", "5000000", TransactionCategory.INCOME, None, 3),
    ("Feeding drive donations", "2100000", TransactionCategory.INCOME, "Feeding Program", 9),
    ("Office supplies", "120000", TransactionCategory.EXPENSE, None, 20),
)


async def _seed_demo(session: AsyncSession) -> None:
    campaign_count = await session.scalar(select(func.count(Campaign.id)))
    if campaign_count:
        return

    now = dt.datetime.now(tz=dt.timezone.utc)
    campaigns: dict[str, Campaign] = {}
    for title, category, short_description in DEMO_CAMPAIGNS:
        campaign = Campaign(
            title=title,
            description=short_description,
            short_description=short_description,
            image_url="/static/campaigns/placeholder.jpg",
            target_amount=Decimal("10000000"),
            current_amount=Decimal("0"),
            start_date=now - dt.timedelta(days=30),
            end_date=now + dt.timedelta(days=60),
            category=category,
            featured=category == CampaignCategory.FEEDING,
        )
        session.add(campaign)
        campaigns[title] = campaign
    await session.flush()

    for description, amount, category, campaign_title, days_ago in DEMO_TRANSACTIONS:
        campaign = campaigns.get(campaign_title) if campaign_title else None
        session.add(
            Transaction(
                description=description,
                amount=Decimal(amount),
                category=category,
                campaign_id=campaign.id if campaign is not None else None,
                date=now - dt.timedelta(days=days_ago),
            )
        )
    logger.info("Seeded %d demo campaigns and %d transactions", len(DEMO_CAMPAIGNS), len(DEMO_TRANSACTIONS))


async def seed_initial_data(session: AsyncSession, seed_demo: bool = False) -> None:
    if seed_demo:
        await _seed_demo(session)
    await session.commit()
