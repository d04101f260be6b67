import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

from strayfund.models.enums import AreaOfInterest, VolunteerStatus
from strayfund.schemas.donation import EMAIL_PATTERN


class VolunteerCreate(BaseModel):
    first_name: str = Field(min_length=2, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    phone_number: str = Field(min_length=10, max_length=32)
    address: str = Field(min_length=5, max_length=300)
    area_of_interest: AreaOfInterest
    experience: str | None = None
    terms_accepted: bool

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise ValueError("Invalid email address")
        return normalized

    @field_validator("terms_accepted")
    @classmethod
    def require_terms(cls, value: bool) -> bool:
        if not value:
            raise ValueError("Terms must be accepted")
        return value


class VolunteerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
    address: str
    area_of_interest: AreaOfInterest
    experience: str | None
    status: VolunteerStatus
    created_at: dt.datetime
