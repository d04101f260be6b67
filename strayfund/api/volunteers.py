import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.api.deps import require_admin
from strayfund.db.session import get_session
from strayfund.models.volunteer import Volunteer
from strayfund.schemas.volunteer import VolunteerCreate, VolunteerRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/volunteers", tags=["volunteers"])


@router.post("", response_model=VolunteerRead, status_code=status.HTTP_201_CREATED)
async def apply_as_volunteer(
    payload: VolunteerCreate,
    session: AsyncSession = Depends(get_session),
) -> VolunteerRead:
    volunteer = Volunteer(
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        email=payload.email,
        phone_number=payload.phone_number.strip(),
        address=payload.address.strip(),
        area_of_interest=payload.area_of_interest,
        experience=payload.experience,
    )
    session.add(volunteer)
    await session.commit()
    await session.refresh(volunteer)
    logger.info("Volunteer application %s received (%s)", volunteer.id, volunteer.area_of_interest.value)
    return VolunteerRead.model_validate(volunteer)


@router.get("", response_model=list[VolunteerRead], dependencies=[Depends(require_admin)])
async def list_volunteers(session: AsyncSession = Depends(get_session)) -> list[VolunteerRead]:
    rows = await session.scalars(select(Volunteer).order_by(Volunteer.created_at.desc(), Volunteer.id.desc()))
    return [VolunteerRead.model_validate(item) for item in rows.all()]
