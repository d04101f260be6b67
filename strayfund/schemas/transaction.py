import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from strayfund.models.enums import TransactionCategory


class TransactionCreate(BaseModel):
    description: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(gt=0)
    category: TransactionCategory
    campaign_id: int | None = Field(default=None, ge=1)
    date: dt.datetime | None = None

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Description cannot be empty")
        return normalized


class TransactionRead(BaseModel):
    id: int
    description: str
    amount: Decimal
    signed_amount: Decimal
    category: TransactionCategory
    campaign_id: int | None
    campaign_title: str | None = None
    date: dt.datetime
