import csv
import io
from collections.abc import Iterable

from strayfund.models.enums import TransactionCategory
from strayfund.services.reporting import LedgerEntry, sort_newest_first

NO_CAMPAIGN = "-"
CSV_HEADER = ("date", "description", "campaign", "category", "amount")


def render_transactions_csv(entries: Iterable[LedgerEntry]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADER)
    for entry in sort_newest_first(entries):
        writer.writerow(
            (
                entry.date.isoformat(),
                entry.description,
                entry.campaign_title or NO_CAMPAIGN,
                "income" if entry.category == TransactionCategory.INCOME else "expense",
                f"{entry.signed_amount:.2f}",
            )
        )
    return buffer.getvalue()


def export_filename(campaign_id: int | None) -> str:
    suffix = "all" if campaign_id is None else f"campaign_{campaign_id}"
    return f"fund_report_{suffix}.csv"
