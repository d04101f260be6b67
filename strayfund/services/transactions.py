import datetime as dt
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.models.transaction import Transaction
from strayfund.schemas.transaction import TransactionRead
from strayfund.services.reporting import LedgerEntry


def to_ledger_entry(transaction: Transaction, tz: ZoneInfo | None = None) -> LedgerEntry:
    moment = transaction.date
    if tz is not None and moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return LedgerEntry(
        id=transaction.id,
        description=transaction.description,
        amount=abs(transaction.amount),
        category=transaction.category,
        date=moment,
        campaign_id=transaction.campaign_id,
    )


async def fetch_ledger(
    session: AsyncSession,
    campaign_id: int | None = None,
    tz: ZoneInfo | None = None,
) -> list[LedgerEntry]:
    query = select(Transaction).order_by(Transaction.date.desc(), Transaction.id.desc())
    if campaign_id is not None:
        query = query.where(Transaction.campaign_id == campaign_id)

    rows = await session.scalars(query)
    return [to_ledger_entry(item, tz) for item in rows.all()]


def serialize_entry(entry: LedgerEntry) -> TransactionRead:
    return TransactionRead(
        id=entry.id,
        description=entry.description,
        amount=entry.amount,
        signed_amount=entry.signed_amount,
        category=entry.category,
        campaign_id=entry.campaign_id,
        campaign_title=entry.campaign_title,
        date=entry.date,
    )


def resolve_timestamp(value: dt.datetime | None) -> dt.datetime:
    if value is None:
        return dt.datetime.now(tz=dt.timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value
