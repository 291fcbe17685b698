"""
Money rounding and display formatting.
"""

from decimal import Decimal, ROUND_HALF_UP


def round_price(price: float) -> float:
    """Round to whole cents, halves rounding up."""
    return float(_to_cents(price))


def format_price(price: float, currency_symbol: str = "$") -> str:
    """Format a price with a currency symbol and two decimals, e.g. "$6.00"."""
    return f"{currency_symbol}{_to_cents(price)}"


def _to_cents(price: float) -> Decimal:
    # str() gives the shortest repr, so 1.005 stays 1.005 rather than 1.00499...
    return Decimal(str(price)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
