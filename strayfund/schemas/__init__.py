from strayfund.schemas.campaign import CampaignCreate, CampaignOption, CampaignPage, CampaignRead
from strayfund.schemas.donation import DonationCreate, DonationRead
from strayfund.schemas.report import (
    BucketItem,
    FundReportResponse,
    PeriodComparisonRead,
    SliceItem,
    SummaryCards,
)
from strayfund.schemas.success_story import SuccessStoryCreate, SuccessStoryRead
from strayfund.schemas.transaction import TransactionCreate, TransactionRead
from strayfund.schemas.volunteer import VolunteerCreate, VolunteerRead

__all__ = [
    "CampaignCreate",
    "CampaignOption",
    "CampaignPage",
    "CampaignRead",
    "DonationCreate",
    "DonationRead",
    "BucketItem",
    "FundReportResponse",
    "PeriodComparisonRead",
    "SliceItem",
    "SummaryCards",
    "SuccessStoryCreate",
    "SuccessStoryRead",
    "TransactionCreate",
    "TransactionRead",
    "VolunteerCreate",
    "VolunteerRead",
]
