import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from strayfund.api.deps import require_admin
from strayfund.db.session import get_session
from strayfund.models.campaign import Campaign
from strayfund.models.transaction import Transaction
from strayfund.schemas.transaction import TransactionCreate, TransactionRead
from strayfund.services.campaigns import load_campaign_titles
from strayfund.services.reporting import collect_campaign_ids, enrich_entries, sort_newest_first
from strayfund.services.transactions import (
    fetch_ledger,
    resolve_timestamp,
    serialize_entry,
    to_ledger_entry,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["transactions"])


@router.get("/transactions", response_model=list[TransactionRead])
async def list_transactions(
    campaign_id: int | None = Query(default=None, ge=1),
    session: AsyncSession = Depends(get_session),
) -> list[TransactionRead]:
    entries = await fetch_ledger(session, campaign_id=campaign_id)
    titles = await load_campaign_titles(session, collect_campaign_ids(entries))
    return [serialize_entry(item) for item in sort_newest_first(enrich_entries(entries, titles))]


@router.post(
    "/transactions",
    response_model=TransactionRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_transaction(
    payload: TransactionCreate,
    session: AsyncSession = Depends(get_session),
) -> TransactionRead:
    campaign_title = None
    if payload.campaign_id is not None:
        campaign = await session.get(Campaign, payload.campaign_id)
        if campaign is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campaign not found")
        campaign_title = campaign.title

    transaction = Transaction(
        description=payload.description,
        amount=payload.amount,
        category=payload.category,
        campaign_id=payload.campaign_id,
        date=resolve_timestamp(payload.date),
    )
    session.add(transaction)
    await session.commit()
    await session.refresh(transaction)
    logger.info(
        "Transaction %s recorded: %s %s",
        transaction.id,
        transaction.category.value,
        transaction.amount,
    )

    entry = to_ledger_entry(transaction)
    if campaign_title is not None:
        entry = enrich_entries([entry], {transaction.campaign_id: campaign_title})[0]
    return serialize_entry(entry)
