import asyncio
from decimal import Decimal
from types import SimpleNamespace

import pytest

from strayfund.models.campaign import Campaign
from strayfund.models.donation import Donation
from strayfund.models.enums import CampaignStatus, PaymentStatus
from strayfund.services.donations import (
    ANONYMOUS_DONOR,
    complete_donation,
    credit_campaign,
    donor_display_name,
    ensure_minimum_amount,
    get_open_campaign,
)


class FakeSession:
    def __init__(self, rows):
        self.rows = rows
        self.commits = 0

    async def get(self, model, key):
        return self.rows.get((model, key))

    async def commit(self):
        self.commits += 1


def test_anonymous_donor_is_masked() -> None:
    assert donor_display_name(True, "Sari") == ANONYMOUS_DONOR
    assert donor_display_name(False, "") == ANONYMOUS_DONOR
    assert donor_display_name(False, "Sari") == "Sari"


def test_minimum_amount_enforced() -> None:
    ensure_minimum_amount(Decimal("10000"), Decimal("10000"))
    with pytest.raises(ValueError):
        ensure_minimum_amount(Decimal("9999"), Decimal("10000"))


def test_credit_campaign_only_once() -> None:
    campaign = SimpleNamespace(current_amount=Decimal("100000"))
    donation = SimpleNamespace(amount=Decimal("25000"), payment_status=PaymentStatus.PENDING)

    assert credit_campaign(campaign, donation) is True
    assert credit_campaign(campaign, donation) is False
    assert campaign.current_amount == Decimal("125000")
    assert donation.payment_status == PaymentStatus.COMPLETED


def test_complete_donation_credits_campaign() -> None:
    campaign = SimpleNamespace(id=1, current_amount=Decimal("0"))
    donation = SimpleNamespace(
        id=5,
        campaign_id=1,
        amount=Decimal("50000"),
        payment_status=PaymentStatus.AWAITING_PAYMENT,
    )
    session = FakeSession({(Donation, 5): donation, (Campaign, 1): campaign})

    result = asyncio.run(complete_donation(session, 5))

    assert result is donation
    assert donation.payment_status == PaymentStatus.COMPLETED
    assert campaign.current_amount == Decimal("50000")
    assert session.commits == 1


def test_complete_missing_donation_raises_lookup_error() -> None:
    with pytest.raises(LookupError):
        asyncio.run(complete_donation(FakeSession({}), 404))


def test_closed_campaign_rejects_donations() -> None:
    closed = SimpleNamespace(id=2, status=CampaignStatus.CLOSED)
    session = FakeSession({(Campaign, 2): closed})

    with pytest.raises(ValueError):
        asyncio.run(get_open_campaign(session, 2))
    with pytest.raises(LookupError):
        asyncio.run(get_open_campaign(session, 3))
