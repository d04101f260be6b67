import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from strayfund.models.enums import CampaignCategory, CampaignStatus


class CampaignCreate(BaseModel):
    title: str = Field(min_length=3, max_length=200)
    description: str = Field(min_length=1)
    short_description: str = Field(min_length=1, max_length=300)
    image_url: str = Field(min_length=1, max_length=500)
    target_amount: Decimal = Field(gt=0)
    end_date: dt.datetime
    category: CampaignCategory
    location: str | None = Field(default=None, max_length=200)
    featured: bool = False

    @field_validator("title", "short_description")
    @classmethod
    def strip_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Field cannot be empty")
        return stripped


class CampaignRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    short_description: str
    image_url: str
    target_amount: Decimal
    current_amount: Decimal
    start_date: dt.datetime
    end_date: dt.datetime
    category: CampaignCategory
    location: str | None
    status: CampaignStatus
    featured: bool
    progress_percent: Decimal
    days_left: int


class CampaignPage(BaseModel):
    campaigns: list[CampaignRead]
    total: int


class CampaignOption(BaseModel):
    id: int
    title: str
