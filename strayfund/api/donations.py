import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.api.deps import require_admin
from strayfund.db.session import get_session
from strayfund.db.settings import get_settings
from strayfund.models.donation import Donation
from strayfund.models.enums import PaymentStatus
from strayfund.schemas.donation import DonationCreate, DonationRead
from strayfund.services.donations import (
    complete_donation,
    credit_campaign,
    ensure_minimum_amount,
    get_open_campaign,
    serialize_donation,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/donations", tags=["donations"])


@router.post("", response_model=DonationRead, status_code=status.HTTP_201_CREATED)
async def create_donation(
    payload: DonationCreate,
    session: AsyncSession = Depends(get_session),
) -> DonationRead:
    settings = get_settings()
    try:
        ensure_minimum_amount(payload.amount, settings.min_donation_amount)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    try:
        campaign = await get_open_campaign(session, payload.campaign_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    donation = Donation(
        amount=payload.amount,
        campaign_id=campaign.id,
        donor_name=payload.donor_name,
        donor_email=payload.donor_email,
        message=payload.message,
        anonymous=payload.anonymous,
        payment_status=PaymentStatus.PENDING,
    )
    session.add(donation)

    if settings.auto_complete_donations:
        credit_campaign(campaign, donation)
    else:
        donation.payment_status = PaymentStatus.AWAITING_PAYMENT

    await session.commit()
    await session.refresh(donation)
    logger.info(
        "Donation %s for campaign %s recorded with status %s",
        donation.id,
        campaign.id,
        donation.payment_status.value,
    )
    return serialize_donation(donation)


@router.post(
    "/{donation_id}/complete",
    response_model=DonationRead,
    dependencies=[Depends(require_admin)],
)
async def complete_donation_endpoint(
    donation_id: int,
    session: AsyncSession = Depends(get_session),
) -> DonationRead:
    try:
        donation = await complete_donation(session, donation_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return serialize_donation(donation)
