from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.api.deps import require_admin
from strayfund.db.session import get_session
from strayfund.models.campaign import Campaign
from strayfund.models.success_story import SuccessStory
from strayfund.schemas.success_story import SuccessStoryCreate, SuccessStoryRead
from strayfund.services.transactions import resolve_timestamp

router = APIRouter(prefix="/api/success-stories", tags=["success-stories"])


@router.get("", response_model=list[SuccessStoryRead])
async def list_success_stories(session: AsyncSession = Depends(get_session)) -> list[SuccessStoryRead]:
    rows = await session.scalars(select(SuccessStory).order_by(SuccessStory.date.desc(), SuccessStory.id.desc()))
    return [SuccessStoryRead.model_validate(item) for item in rows.all()]


@router.post(
    "",
    response_model=SuccessStoryRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_success_story(
    payload: SuccessStoryCreate,
    session: AsyncSession = Depends(get_session),
) -> SuccessStoryRead:
    if payload.campaign_id is not None and await session.get(Campaign, payload.campaign_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campaign not found")

    story = SuccessStory(
        title=payload.title.strip(),
        description=payload.description,
        image_url=payload.image_url,
        date=resolve_timestamp(payload.date),
        campaign_id=payload.campaign_id,
    )
    session.add(story)
    await session.commit()
    await session.refresh(story)
    return SuccessStoryRead.model_validate(story)
