import asyncio
import datetime as dt
from decimal import Decimal

from strayfund.models.enums import ChartType, ReportPeriod, TransactionCategory
from strayfund.services import fund_report
from strayfund.services.reporting import GENERAL_DONATION_LABEL, LedgerEntry, build_fund_report

UTC = dt.timezone.utc
NOW = dt.datetime(2023, 6, 20, tzinfo=UTC)


def ledger() -> list[LedgerEntry]:
    return [
        LedgerEntry(
            id=1,
            description="Cat food",
            amount=Decimal("1250000"),
            category=TransactionCategory.EXPENSE,
            date=dt.datetime(2023, 6, 15, tzinfo=UTC),
            campaign_id=1,
        ),
        LedgerEntry(
            id=2,
            description="Donations",
            amount=Decimal("5000000"),
            category=TransactionCategory.INCOME,
            date=dt.datetime(2023, 6, 16, tzinfo=UTC),
        ),
    ]


def test_serialized_report_is_json_ready() -> None:
    report = build_fund_report(ledger(), {1: "Feeding Program"}, ReportPeriod.MONTH, now=NOW)

    response = fund_report.serialize_fund_report(report, ChartType.PIE, "IDR", NOW)
    payload = response.model_dump(mode="json")

    assert payload["summary"]["balance"] == "3750000"
    assert payload["summary"]["income_change_percent"] == "100.00"
    assert payload["expense_slices"] == [{"name": "Feeding Program", "value": "1250000"}]
    assert payload["income_slices"] == [{"name": GENERAL_DONATION_LABEL, "value": "5000000"}]
    assert [item["label"] for item in payload["chart"]] == ["15 Jun", "16 Jun"]
    assert payload["recent_transactions"][0]["signed_amount"] == "5000000"
    assert payload["transactions"][1]["signed_amount"] == "-1250000"
    assert payload["transactions"][1]["campaign_title"] == "Feeding Program"
    assert payload["chart_type"] == "pie"
    assert payload["is_empty"] is False


def test_all_period_has_no_percentages() -> None:
    report = build_fund_report(ledger(), {}, ReportPeriod.ALL, now=NOW)

    response = fund_report.serialize_fund_report(report, ChartType.BAR, "IDR", NOW)

    assert response.comparison is None
    assert response.summary.income_change_percent is None
    assert response.summary.expense_change_percent is None


def test_load_fund_report_resolves_titles_once(monkeypatch) -> None:
    seen = {}

    async def fake_fetch_ledger(session, campaign_id=None, tz=None):
        seen["campaign_id"] = campaign_id
        return ledger()

    async def fake_load_titles(session, campaign_ids):
        seen["ids"] = set(campaign_ids)
        return {1: "Feeding Program"}

    monkeypatch.setattr(fund_report, "fetch_ledger", fake_fetch_ledger)
    monkeypatch.setattr(fund_report, "load_campaign_titles", fake_load_titles)

    report = asyncio.run(
        fund_report.load_fund_report(None, period=ReportPeriod.WEEK, now=NOW, campaign_id=1)
    )

    assert seen == {"campaign_id": 1, "ids": {1}}
    assert [item.id for item in report.transactions] == [1]
    assert report.transactions[0].campaign_title == "Feeding Program"
