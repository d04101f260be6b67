from enum import Enum

from sqlalchemy.dialects.postgresql import ENUM


class TransactionCategory(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    AWAITING_PAYMENT = "awaiting_payment"
    COMPLETED = "completed"
    FAILED = "failed"


class VolunteerStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AreaOfInterest(str, Enum):
    FEEDING = "feeding"
    HEALTHCARE = "healthcare"
    CAMPAIGN = "campaign"
    FUNDRAISING = "fundraising"
    OTHER = "other"


class CampaignCategory(str, Enum):
    FEEDING = "feeding"
    HEALTHCARE = "healthcare"
    SHELTER = "shelter"
    STERILIZATION = "sterilization"
    EDUCATION = "education"


class CampaignStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CLOSED = "closed"


class ReportPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class ChartType(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"


def _pg_enum(enum_cls: type[Enum], name: str) -> ENUM:
    return ENUM(
        enum_cls,
        name=name,
        create_type=False,
        values_callable=lambda items: [item.value for item in items],
    )


transaction_category_enum = _pg_enum(TransactionCategory, "transaction_category")
payment_status_enum = _pg_enum(PaymentStatus, "payment_status")
volunteer_status_enum = _pg_enum(VolunteerStatus, "volunteer_status")
area_of_interest_enum = _pg_enum(AreaOfInterest, "area_of_interest")
campaign_category_enum = _pg_enum(CampaignCategory, "campaign_category")
campaign_status_enum = _pg_enum(CampaignStatus, "campaign_status")
