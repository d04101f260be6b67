import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class SuccessStoryCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    image_url: str = Field(min_length=1, max_length=500)
    date: dt.datetime | None = None
    campaign_id: int | None = Field(default=None, ge=1)


class SuccessStoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    image_url: str
    date: dt.datetime
    campaign_id: int | None
