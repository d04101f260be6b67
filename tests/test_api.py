import datetime as dt
from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from strayfund.api import deps, pages, reports
from strayfund.db.session import get_session
from strayfund.main import app
from strayfund.models.enums import TransactionCategory
from strayfund.services.reporting import LedgerEntry, build_fund_report


class FakeRows:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return self._rows


class FakeSession:
    async def scalars(self, statement):
        return FakeRows([])


@pytest.fixture
def client():
    async def override_session():
        yield FakeSession()

    app.dependency_overrides[get_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_healthcheck(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_endpoints_require_token(client) -> None:
    response = client.post(
        "/api/transactions",
        json={"description": "Cat food", "amount": "100000", "category": "expense"},
    )

    assert response.status_code == 403


def test_admin_token_grants_access(client, monkeypatch) -> None:
    monkeypatch.setattr(deps, "get_settings", lambda: SimpleNamespace(admin_token="s3cret"))

    denied = client.get("/api/volunteers", headers={"X-Admin-Token": "wrong"})
    allowed = client.get("/api/volunteers", headers={"X-Admin-Token": "s3cret"})

    assert denied.status_code == 403
    assert allowed.status_code == 200
    assert allowed.json() == []


def test_invalid_campaign_filter_is_rejected(client) -> None:
    response = client.get("/api/reports/fund", params={"campaign": "kittens"})

    assert response.status_code == 422


def test_unknown_period_is_rejected(client) -> None:
    response = client.get("/api/reports/fund", params={"period": "decade"})

    assert response.status_code == 422


def test_fund_report_endpoint(client, monkeypatch) -> None:
    captured = {}

    async def fake_load_fund_report(session, period, now, campaign_id=None, fill_gaps=False, recent_limit=10, tz=None):
        captured.update(period=period, campaign_id=campaign_id, fill_gaps=fill_gaps)
        entries = [
            LedgerEntry(
                id=1,
                description="Vaccines",
                amount=Decimal("840000"),
                category=TransactionCategory.EXPENSE,
                date=now - dt.timedelta(days=2),
                campaign_id=2,
            )
        ]
        return build_fund_report(entries, {2: "Vaccination"}, period, now, campaign_id=campaign_id, fill_gaps=fill_gaps)

    monkeypatch.setattr(reports, "load_fund_report", fake_load_fund_report)

    response = client.get("/api/reports/fund", params={"period": "week", "campaign": "2", "fill_gaps": "true"})

    assert response.status_code == 200
    payload = response.json()
    assert captured["campaign_id"] == 2
    assert captured["fill_gaps"] is True
    assert len(payload["chart"]) == 7
    assert payload["summary"]["total_expense"] == "840000"
    assert payload["expense_slices"] == [{"name": "Vaccination", "value": "840000"}]


def test_csv_export_endpoint(client, monkeypatch) -> None:
    async def fake_load_fund_report(session, period, now, campaign_id=None, fill_gaps=False, recent_limit=10, tz=None):
        return build_fund_report([], {}, period, now, campaign_id=campaign_id)

    monkeypatch.setattr(reports, "load_fund_report", fake_load_fund_report)

    response = client.get("/api/reports/fund/export.csv", params={"campaign": "3"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="fund_report_campaign_3.csv"' in response.headers["content-disposition"]
    assert response.text.strip() == "date,description,campaign,category,amount"


def test_transparency_page_lists_all_transactions(client, monkeypatch) -> None:
    async def fake_load_fund_report(session, period, now, campaign_id=None, fill_gaps=False, recent_limit=10, tz=None):
        entries = [
            LedgerEntry(
                id=1,
                description="Rescue van fuel",
                amount=Decimal("150000"),
                category=TransactionCategory.EXPENSE,
                date=dt.datetime(2023, 6, 15, 9, tzinfo=dt.timezone.utc),
            ),
            LedgerEntry(
                id=2,
                description="Bake sale",
                amount=Decimal("300000"),
                category=TransactionCategory.INCOME,
                date=dt.datetime(2023, 6, 14, 9, tzinfo=dt.timezone.utc),
                campaign_id=4,
            ),
        ]
        return build_fund_report(entries, {4: "Shelter roof"}, period, now, recent_limit=recent_limit)

    monkeypatch.setattr(pages, "load_fund_report", fake_load_fund_report)

    response = client.get("/", params={"period": "all"})

    assert response.status_code == 200
    assert "All transactions" in response.text
    assert "(N/A)" in response.text
    assert "<td>Rescue van fuel</td>" in response.text
    assert "<td>-</td>" in response.text
    assert "<td>Shelter roof</td>" in response.text
    assert "<td>-Rp 150.000</td>" in response.text
