import asyncio
import datetime as dt
from decimal import Decimal

from strayfund.services.campaigns import calculate_days_left, calculate_progress, load_campaign_titles

UTC = dt.timezone.utc


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return self._rows


class FakeSession:
    def __init__(self, rows):
        self.rows = rows
        self.calls = 0

    async def execute(self, statement):
        self.calls += 1
        return FakeResult(self.rows)


def test_progress_is_capped_at_100() -> None:
    assert calculate_progress(Decimal("2500000"), Decimal("10000000")) == Decimal("25.00")
    assert calculate_progress(Decimal("12000000"), Decimal("10000000")) == Decimal("100")
    assert calculate_progress(Decimal("5"), Decimal("0")) == Decimal("0")


def test_days_left_rounds_up_and_never_negative() -> None:
    now = dt.datetime(2024, 5, 1, 12, tzinfo=UTC)

    assert calculate_days_left(now + dt.timedelta(days=2, hours=1), now) == 3
    assert calculate_days_left(now + dt.timedelta(days=2), now) == 2
    assert calculate_days_left(now - dt.timedelta(days=5), now) == 0


def test_campaign_titles_resolved_in_single_query() -> None:
    session = FakeSession([(1, "Feeding Program"), (3, "Mini Shelters")])

    titles = asyncio.run(load_campaign_titles(session, [1, 3, 1, 3, 7]))

    assert titles == {1: "Feeding Program", 3: "Mini Shelters"}
    assert session.calls == 1


def test_campaign_titles_skip_query_without_ids() -> None:
    session = FakeSession([])

    assert asyncio.run(load_campaign_titles(session, [])) == {}
    assert session.calls == 0
