"""
Price calculations for usage records.

Derives the cost of a line item from its per-unit price and quantity.
"""

import logging
import math
from dataclasses import replace
from decimal import Decimal, DecimalException, InvalidOperation
from typing import Iterable, List, Tuple

from .errors import PriceParseError
from usage_report.storage.models import IssueKind, ReportIssue, UsageRecord

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY_SYMBOL = "$"


def parse_unit_price(price_per_unit: str, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> Decimal:
    """Parse a currency prefixed per-unit price such as "$0.008".

    Args:
        price_per_unit: Price string starting with the currency symbol
        currency_symbol: Expected prefix

    Returns:
        Per-unit price as an exact Decimal

    Raises:
        PriceParseError: If the prefix is missing or the rest is not a number
    """
    text = price_per_unit.strip()
    if not text.startswith(currency_symbol):
        raise PriceParseError(
            f"Price per unit {price_per_unit!r} does not start with {currency_symbol!r}",
            price_per_unit
        )

    amount = text[len(currency_symbol):]
    try:
        unit_price = Decimal(amount)
    except InvalidOperation:
        raise PriceParseError(f"Price per unit {price_per_unit!r} is not a number", price_per_unit)
    if not unit_price.is_finite():
        raise PriceParseError(f"Price per unit {price_per_unit!r} is not a number", price_per_unit)
    return unit_price


def calculate_price(
    price_per_unit: str,
    quantity: float,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> float:
    """Calculate the cost of a line item.

    The product is computed with Decimal so "$0.0080" x 500 yields
    exactly 4.0. No rounding is applied; totals are rounded for display.

    Raises:
        PriceParseError: If the per-unit price cannot be parsed or the
            product is not a finite number
    """
    unit_price = parse_unit_price(price_per_unit, currency_symbol)
    try:
        price = float(unit_price * Decimal(str(quantity)))
    except DecimalException:
        raise PriceParseError(
            f"Price {price_per_unit!r} x {quantity} is not a finite number",
            price_per_unit
        )
    if not math.isfinite(price):
        raise PriceParseError(
            f"Price {price_per_unit!r} x {quantity} is not a finite number",
            price_per_unit
        )
    return price


def price_records(
    records: Iterable[UsageRecord],
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> Tuple[Tuple[UsageRecord, ...], Tuple[ReportIssue, ...]]:
    """Price every record, collecting failures instead of propagating NaN.

    Args:
        records: Parsed records without a price
        currency_symbol: Expected per-unit price prefix

    Returns:
        Tuple of (priced records, PRICE issues for records left out)
    """
    priced: List[UsageRecord] = []
    issues: List[ReportIssue] = []

    for record in records:
        try:
            price = calculate_price(record.price_per_unit, record.quantity, currency_symbol)
        except PriceParseError as e:
            logger.warning("Excluding line %d from totals: %s", record.line, e)
            issues.append(ReportIssue(line=record.line, kind=IssueKind.PRICE, reason=str(e)))
            continue
        priced.append(replace(record, price=price))

    return tuple(priced), tuple(issues)
