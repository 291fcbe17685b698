"""
Data models for the report pipeline.

Defines usage line items, per-day totals and the result of a report load.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from usage_report.core.money import format_price


@dataclass(frozen=True)
class UsageRecord:
    """Immutable line item of a usage report.

    Records leave the parser without a price; pricing returns a new
    record with ``price`` set.
    """
    actions_workflow: str
    date: str  # YYYY-MM-DD
    price_per_unit: str  # Currency prefixed, e.g. "$0.008"
    product: str
    quantity: float
    repository_slug: str
    unit_type: str
    price: Optional[float] = None
    line: int = 0  # Physical line in the source file


@dataclass(frozen=True)
class DailyTotal:
    """Aggregated cost of all records sharing one date."""
    date: str
    price: float

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "price": self.price}


class IssueKind(Enum):
    """Kinds of per-line failures collected during a load."""
    ROW = "row"
    PRICE = "price"


@dataclass(frozen=True)
class ReportIssue:
    """A line that was left out of the report, and why."""
    line: int
    kind: IssueKind
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"line": self.line, "kind": self.kind.value, "reason": self.reason}


@dataclass(frozen=True)
class ReportResult:
    """Complete result of processing one report file."""
    records: Tuple[UsageRecord, ...]
    daily_totals: Tuple[DailyTotal, ...]
    total: float
    issues: Tuple[ReportIssue, ...] = field(default_factory=tuple)
    currency_symbol: str = "$"

    @property
    def skipped_rows(self) -> Tuple[ReportIssue, ...]:
        """Rows that could not be parsed."""
        return tuple(i for i in self.issues if i.kind == IssueKind.ROW)

    @property
    def rejected_prices(self) -> Tuple[ReportIssue, ...]:
        """Records left out of the totals because their price was malformed."""
        return tuple(i for i in self.issues if i.kind == IssueKind.PRICE)

    @property
    def date_range(self) -> Optional[Tuple[str, str]]:
        """First and last date in report order, or None for an empty report."""
        if not self.daily_totals:
            return None
        return self.daily_totals[0].date, self.daily_totals[-1].date

    @property
    def formatted_total(self) -> str:
        return format_price(self.total, self.currency_symbol)

    def to_dict(self) -> Dict[str, Any]:
        """Plain structure handed to a presentation layer."""
        return {
            "daily_totals": [t.to_dict() for t in self.daily_totals],
            "total": self.total,
            "formatted_total": self.formatted_total,
            "issues": [i.to_dict() for i in self.issues],
        }
