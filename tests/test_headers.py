"""
Unit tests for header normalization.
"""

import pytest

from usage_report.core.headers import normalize_header


class TestNormalizeHeader:
    """Test conversion of raw headers into camel-case keys."""

    @pytest.mark.parametrize("raw, expected", [
        ("Price Per Unit", "pricePerUnit"),
        ("Repository Slug", "repositorySlug"),
        ("Actions Workflow", "actionsWorkflow"),
        ("Unit Type", "unitType"),
        ("Date", "date"),
        ("QUANTITY", "quantity"),
    ])
    def test_github_headers(self, raw, expected):
        """Verify the headers of a GitHub usage report."""
        assert normalize_header(raw) == expected

    def test_separator_runs_collapse(self):
        """Verify a run of separators is dropped as a whole."""
        assert normalize_header("price -- per__unit") == "pricePerUnit"

    def test_trailing_currency_suffix_dropped(self):
        """Verify separators at the end of a header are discarded."""
        assert normalize_header("Price Per Unit ($)") == "pricePerUnit"

    def test_leading_bom_and_whitespace_dropped(self):
        """Verify a BOM or padding before the header is discarded."""
        assert normalize_header("\ufeffDate") == "date"
        assert normalize_header("  Unit Type ") == "unitType"

    def test_digits_are_kept(self):
        """Verify digits count as alphanumeric."""
        assert normalize_header("Cost 2 Day") == "cost2Day"

    def test_empty_input(self):
        """Verify empty input yields empty output."""
        assert normalize_header("") == ""

    @pytest.mark.parametrize("raw", [
        "Price Per Unit",
        "Repository Slug",
        "  Unit Type ",
        "Price Per Unit ($)",
        "DATE",
    ])
    def test_idempotent(self, raw):
        """Verify normalizing twice gives the same key."""
        once = normalize_header(raw)
        assert normalize_header(once) == once

    def test_normalized_key_unchanged(self):
        """Verify already normalized keys pass through."""
        assert normalize_header("pricePerUnit") == "pricePerUnit"
        assert normalize_header("date") == "date"
