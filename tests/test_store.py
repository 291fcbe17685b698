"""
Unit tests for the report store.
"""

from usage_report.storage.models import DailyTotal, ReportResult
from usage_report.storage.store import ReportStore


def make_result(total: float) -> ReportResult:
    """Create a single-day test result."""
    return ReportResult(
        records=(),
        daily_totals=(DailyTotal(date="2024-01-01", price=total),),
        total=total
    )


class TestReportStore:
    """Test the replace-on-load lifecycle."""

    def test_starts_empty(self):
        """Verify a new store holds no result."""
        assert ReportStore().current is None

    def test_replace_returns_previous(self):
        """Verify replace swaps whole results."""
        store = ReportStore()
        first, second = make_result(1.0), make_result(2.0)

        assert store.replace(first) is None
        assert store.replace(second) is first
        assert store.current is second

    def test_clear(self):
        """Verify clear drops the current result."""
        store = ReportStore(initial=make_result(1.0))
        store.clear()
        assert store.current is None

    def test_listeners_notified(self):
        """Verify subscribers see every new result."""
        store = ReportStore()
        seen = []
        unsubscribe = store.subscribe(seen.append)

        result = make_result(3.0)
        store.replace(result)
        unsubscribe()
        store.replace(make_result(4.0))

        assert seen == [result]

    def test_unsubscribe_twice_is_harmless(self):
        """Verify removing a listener twice does not raise."""
        store = ReportStore()
        unsubscribe = store.subscribe(lambda result: None)
        unsubscribe()
        unsubscribe()

    def test_stored_result_formats_total(self):
        """Verify a result formats its own total without the pipeline."""
        store = ReportStore(initial=make_result(2.5))
        assert store.current.formatted_total == "$2.50"
