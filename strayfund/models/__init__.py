from strayfund.models.campaign import Campaign
from strayfund.models.donation import Donation
from strayfund.models.enums import (
    AreaOfInterest,
    CampaignCategory,
    CampaignStatus,
    ChartType,
    PaymentStatus,
    ReportPeriod,
    TransactionCategory,
    VolunteerStatus,
)
from strayfund.models.success_story import SuccessStory
from strayfund.models.transaction import Transaction
from strayfund.models.volunteer import Volunteer

__all__ = [
    "Campaign",
    "Donation",
    "SuccessStory",
    "Transaction",
    "Volunteer",
    "AreaOfInterest",
    "CampaignCategory",
    "CampaignStatus",
    "ChartType",
    "PaymentStatus",
    "ReportPeriod",
    "TransactionCategory",
    "VolunteerStatus",
]
