import csv
import datetime as dt
import io
from decimal import Decimal

from strayfund.models.enums import TransactionCategory
from strayfund.services.export import CSV_HEADER, export_filename, render_transactions_csv
from strayfund.services.reporting import LedgerEntry

UTC = dt.timezone.utc


def test_csv_rows_follow_full_listing_order() -> None:
    entries = [
        LedgerEntry(
            id=1,
            description="Cat food, 25kg",
            amount=Decimal("1250000"),
            category=TransactionCategory.EXPENSE,
            date=dt.datetime(2023, 6, 15, tzinfo=UTC),
            campaign_id=1,
            campaign_title="Feeding Program",
        ),
        LedgerEntry(
            id=2,
            description="Donations",
            amount=Decimal("5000000"),
            category=TransactionCategory.INCOME,
            date=dt.datetime(2023, 6, 16, tzinfo=UTC),
        ),
    ]

    rows = list(csv.reader(io.StringIO(render_transactions_csv(entries))))

    assert tuple(rows[0]) == CSV_HEADER
    assert rows[1] == ["2023-06-16T00:00:00+00:00", "Donations", "-", "income", "5000000.00"]
    assert rows[2] == [
        "2023-06-15T00:00:00+00:00",
        "Cat food, 25kg",
        "Feeding Program",
        "expense",
        "-1250000.00",
    ]


def test_csv_for_empty_listing_has_only_header() -> None:
    rows = list(csv.reader(io.StringIO(render_transactions_csv([]))))

    assert rows == [list(CSV_HEADER)]


def test_export_filename() -> None:
    assert export_filename(None) == "fund_report_all.csv"
    assert export_filename(4) == "fund_report_campaign_4.csv"
