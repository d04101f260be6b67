import datetime as dt
from decimal import Decimal

from pydantic import BaseModel

from strayfund.models.enums import ChartType, ReportPeriod
from strayfund.schemas.transaction import TransactionRead


class SummaryCards(BaseModel):
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    income_change_percent: Decimal | None
    expense_change_percent: Decimal | None


class BucketItem(BaseModel):
    label: str
    income: Decimal
    expense: Decimal
    balance: Decimal


class SliceItem(BaseModel):
    name: str
    value: Decimal


class PeriodComparisonRead(BaseModel):
    current_from: dt.datetime
    current_to: dt.datetime
    previous_from: dt.datetime
    previous_to: dt.datetime
    current_income: Decimal
    current_expense: Decimal
    previous_income: Decimal
    previous_expense: Decimal
    income_change_percent: Decimal
    expense_change_percent: Decimal


class FundReportResponse(BaseModel):
    period: ReportPeriod
    campaign_id: int | None
    chart_type: ChartType
    currency: str
    generated_at: dt.datetime
    is_empty: bool
    summary: SummaryCards
    chart: list[BucketItem]
    income_slices: list[SliceItem]
    expense_slices: list[SliceItem]
    comparison: PeriodComparisonRead | None
    recent_transactions: list[TransactionRead]
    transactions: list[TransactionRead]
