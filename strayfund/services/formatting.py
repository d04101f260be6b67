from decimal import ROUND_HALF_UP, Decimal

CURRENCY_PREFIXES = {"IDR": "Rp"}


def format_currency(amount: Decimal | int | float, currency: str = "IDR") -> str:
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    grouped = f"{abs(value):,}".replace(",", ".")
    prefix = CURRENCY_PREFIXES.get(currency.upper(), currency.upper())
    sign = "-" if value < 0 else ""
    return f"{sign}{prefix} {grouped}"


def format_percent(value: Decimal | None) -> str:
    if value is None:
        return "N/A"
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}%"
