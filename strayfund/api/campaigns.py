import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.api.deps import require_admin
from strayfund.db.session import get_session
from strayfund.models.campaign import Campaign
from strayfund.models.enums import CampaignCategory
from strayfund.schemas.campaign import CampaignCreate, CampaignOption, CampaignPage, CampaignRead
from strayfund.schemas.donation import DonationRead
from strayfund.services.campaigns import calculate_days_left, calculate_progress
from strayfund.services.donations import list_completed_donations, serialize_donation

router = APIRouter(prefix="/api/campaigns", tags=["campaigns"])


def serialize_campaign(campaign: Campaign, now: dt.datetime) -> CampaignRead:
    return CampaignRead(
        id=campaign.id,
        title=campaign.title,
        description=campaign.description,
        short_description=campaign.short_description,
        image_url=campaign.image_url,
        target_amount=campaign.target_amount,
        current_amount=campaign.current_amount,
        start_date=campaign.start_date,
        end_date=campaign.end_date,
        category=campaign.category,
        location=campaign.location,
        status=campaign.status,
        featured=campaign.featured,
        progress_percent=calculate_progress(campaign.current_amount, campaign.target_amount),
        days_left=calculate_days_left(campaign.end_date, now),
    )


@router.get("", response_model=CampaignPage)
async def list_campaigns(
    category: CampaignCategory | None = Query(default=None),
    featured: bool | None = Query(default=None),
    search: str | None = Query(default=None, max_length=100),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
) -> CampaignPage:
    filters = []
    if category is not None:
        filters.append(Campaign.category == category)
    if featured is not None:
        filters.append(Campaign.featured.is_(featured))
    if search:
        filters.append(Campaign.title.ilike(f"%{search.strip()}%"))

    total = await session.scalar(select(func.count(Campaign.id)).where(*filters))
    rows = await session.scalars(
        select(Campaign)
        .where(*filters)
        .order_by(Campaign.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    now = dt.datetime.now(tz=dt.timezone.utc)
    return CampaignPage(
        campaigns=[serialize_campaign(item, now) for item in rows.all()],
        total=total or 0,
    )


@router.get("/options", response_model=list[CampaignOption])
async def list_campaign_options(session: AsyncSession = Depends(get_session)) -> list[CampaignOption]:
    rows = await session.execute(select(Campaign.id, Campaign.title).order_by(Campaign.id.desc()))
    return [CampaignOption(id=campaign_id, title=title) for campaign_id, title in rows.all()]


@router.get("/{campaign_id}", response_model=CampaignRead)
async def get_campaign(campaign_id: int, session: AsyncSession = Depends(get_session)) -> CampaignRead:
    campaign = await session.get(Campaign, campaign_id)
    if campaign is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campaign not found")
    return serialize_campaign(campaign, dt.datetime.now(tz=dt.timezone.utc))


@router.post(
    "",
    response_model=CampaignRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_campaign(
    payload: CampaignCreate,
    session: AsyncSession = Depends(get_session),
) -> CampaignRead:
    now = dt.datetime.now(tz=dt.timezone.utc)
    end_date = payload.end_date if payload.end_date.tzinfo else payload.end_date.replace(tzinfo=dt.timezone.utc)
    if end_date <= now:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="End date must be in the future")

    campaign = Campaign(
        title=payload.title,
        description=payload.description,
        short_description=payload.short_description,
        image_url=payload.image_url,
        target_amount=payload.target_amount,
        current_amount=0,
        start_date=now,
        end_date=end_date,
        category=payload.category,
        location=payload.location,
        featured=payload.featured,
    )
    session.add(campaign)
    await session.commit()
    await session.refresh(campaign)
    return serialize_campaign(campaign, now)


@router.get("/{campaign_id}/donations", response_model=list[DonationRead])
async def list_campaign_donations(
    campaign_id: int,
    session: AsyncSession = Depends(get_session),
) -> list[DonationRead]:
    campaign = await session.get(Campaign, campaign_id)
    if campaign is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campaign not found")

    donations = await list_completed_donations(session, campaign_id)
    return [serialize_donation(item) for item in donations]
