from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.models.campaign import Campaign
from strayfund.models.donation import Donation
from strayfund.models.enums import CampaignStatus, PaymentStatus
from strayfund.schemas.donation import DonationRead

logger = logging.getLogger(__name__)

ANONYMOUS_DONOR = "Anonymous"


def donor_display_name(anonymous: bool, donor_name: str | None) -> str:
    if anonymous or not donor_name:
        return ANONYMOUS_DONOR
    return donor_name


def ensure_minimum_amount(amount: Decimal, minimum: Decimal) -> None:
    if amount < minimum:
        raise ValueError(f"Minimum donation is {minimum}")


async def get_open_campaign(session: AsyncSession, campaign_id: int) -> Campaign:
    campaign = await session.get(Campaign, campaign_id)
    if campaign is None:
        raise LookupError("Campaign not found")
    if campaign.status != CampaignStatus.ACTIVE:
        raise ValueError("Campaign is not accepting donations")
    return campaign


def credit_campaign(campaign: Campaign, donation: Donation) -> bool:
    """Mark ``donation`` completed and add it to the campaign total.

    Returns False when the donation was already credited.
    """
    if donation.payment_status == PaymentStatus.COMPLETED:
        return False
    donation.payment_status = PaymentStatus.COMPLETED
    campaign.current_amount = (campaign.current_amount or Decimal("0")) + donation.amount
    return True


async def complete_donation(session: AsyncSession, donation_id: int) -> Donation:
    donation = await session.get(Donation, donation_id)
    if donation is None:
        raise LookupError("Donation not found")

    campaign = await session.get(Campaign, donation.campaign_id)
    if campaign is None:
        raise LookupError("Campaign not found")

    if credit_campaign(campaign, donation):
        logger.info("Donation %s completed, campaign %s credited %s", donation.id, campaign.id, donation.amount)
    else:
        logger.info("Donation %s already completed", donation.id)
    await session.commit()
    return donation


async def list_completed_donations(session: AsyncSession, campaign_id: int) -> list[Donation]:
    rows = await session.scalars(
        select(Donation)
        .where(Donation.campaign_id == campaign_id, Donation.payment_status == PaymentStatus.COMPLETED)
        .order_by(Donation.created_at.desc(), Donation.id.desc())
    )
    return list(rows.all())


def serialize_donation(donation: Donation) -> DonationRead:
    return DonationRead(
        id=donation.id,
        amount=donation.amount,
        campaign_id=donation.campaign_id,
        donor_name=donor_display_name(donation.anonymous, donation.donor_name),
        message=donation.message,
        anonymous=donation.anonymous,
        payment_status=donation.payment_status,
        created_at=donation.created_at,
    )
