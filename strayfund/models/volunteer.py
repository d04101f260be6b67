import datetime as dt

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from strayfund.db.base import Base
from strayfund.models.enums import (
    AreaOfInterest,
    VolunteerStatus,
    area_of_interest_enum,
    volunteer_status_enum,
)


class Volunteer(Base):
    __tablename__ = "volunteers"

    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False)
    address: Mapped[str] = mapped_column(String(300), nullable=False)
    area_of_interest: Mapped[AreaOfInterest] = mapped_column(area_of_interest_enum, nullable=False)
    experience: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[VolunteerStatus] = mapped_column(
        volunteer_status_enum,
        nullable=False,
        default=VolunteerStatus.PENDING,
        server_default=VolunteerStatus.PENDING.value,
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
