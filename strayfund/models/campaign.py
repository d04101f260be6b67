import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from strayfund.db.base import Base
from strayfund.models.enums import (
    CampaignCategory,
    CampaignStatus,
    campaign_category_enum,
    campaign_status_enum,
)


class Campaign(Base):
    __tablename__ = "campaigns"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    short_description: Mapped[str] = mapped_column(String(300), nullable=False)
    image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    target_amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    current_amount: Mapped[Decimal] = mapped_column(
        Numeric(14, 2), nullable=False, default=Decimal("0"), server_default="0"
    )
    start_date: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    end_date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    category: Mapped[CampaignCategory] = mapped_column(campaign_category_enum, nullable=False)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    status: Mapped[CampaignStatus] = mapped_column(
        campaign_status_enum,
        nullable=False,
        default=CampaignStatus.ACTIVE,
        server_default=CampaignStatus.ACTIVE.value,
    )
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")

    donations = relationship("Donation", back_populates="campaign")
    transactions = relationship("Transaction", back_populates="campaign")
    success_stories = relationship("SuccessStory", back_populates="campaign")
