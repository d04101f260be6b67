import datetime as dt
import re
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from strayfund.models.enums import PaymentStatus

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class DonationCreate(BaseModel):
    amount: Decimal = Field(gt=0)
    campaign_id: int = Field(ge=1)
    donor_name: str = Field(min_length=2, max_length=120)
    donor_email: str = Field(max_length=255)
    message: str | None = Field(default=None, max_length=1000)
    anonymous: bool = False

    @field_validator("donor_name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if len(stripped) < 2:
            raise ValueError("Donor name is required")
        return stripped

    @field_validator("donor_email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise ValueError("Invalid email address")
        return normalized


class DonationRead(BaseModel):
    id: int
    amount: Decimal
    campaign_id: int
    donor_name: str
    message: str | None
    anonymous: bool
    payment_status: PaymentStatus
    created_at: dt.datetime
