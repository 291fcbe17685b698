"""
Report pipeline.

Runs a usage report through parsing, pricing, day aggregation and the
grand total. Row and price failures are collected on the result; a file
that cannot be read aborts the load without a partial result.
"""

import logging
from pathlib import Path
from typing import Optional

from .aggregation import aggregate_by_day, total_price
from .errors import ReportReadError
from .parser import parse_report
from .pricing import price_records
from usage_report.config.loader import DEFAULT_CONFIG, ReportConfig
from usage_report.storage.models import ReportResult
from usage_report.storage.store import ReportStore

logger = logging.getLogger(__name__)


def read_report_file(path: str, encoding: str = "utf-8-sig") -> str:
    """Read a report file into text.

    Args:
        path: Path to the report file
        encoding: Text encoding, BOM tolerant by default

    Returns:
        File contents

    Raises:
        ReportReadError: If the file is missing, unreadable, undecodable or blank
    """
    report_path = Path(path)
    try:
        with open(report_path, 'r', encoding=encoding, newline='') as f:
            text = f.read()
    except FileNotFoundError:
        raise ReportReadError(f"Report file not found: {path}", path)
    except (OSError, UnicodeDecodeError) as e:
        raise ReportReadError(f"Could not read report file {path}: {e}", path)

    if not text.strip():
        raise ReportReadError(f"Report file is empty: {path}", path)
    return text


def build_report(text: str, config: ReportConfig = DEFAULT_CONFIG) -> ReportResult:
    """Process report text into per-day totals and a grand total.

    Args:
        text: Report contents with a header row
        config: Parsing and pricing settings

    Returns:
        ReportResult with every skipped row and rejected price listed in issues

    Raises:
        ReportReadError: If the text holds no header row
    """
    parsed = parse_report(text, delimiter=config.delimiter)
    priced, price_issues = price_records(parsed.records, config.currency_symbol)
    daily_totals = aggregate_by_day(priced)

    issues = tuple(sorted(parsed.issues + price_issues, key=lambda i: i.line))
    result = ReportResult(
        records=priced,
        daily_totals=daily_totals,
        total=total_price(daily_totals),
        issues=issues,
        currency_symbol=config.currency_symbol
    )
    logger.debug(
        "Report built: %d records over %d days, %d issues",
        len(priced), len(daily_totals), len(issues)
    )
    return result


def load_report(
    path: str,
    config: ReportConfig = DEFAULT_CONFIG,
    store: Optional[ReportStore] = None
) -> ReportResult:
    """Read and process a report file, optionally publishing it to a store.

    The store is only touched once the whole report has been processed,
    so a failed load leaves its previous result in place.

    Raises:
        ReportReadError: If the file cannot be read or holds no header
    """
    text = read_report_file(path, encoding=config.encoding)
    try:
        result = build_report(text, config)
    except ReportReadError as e:
        if e.path is None:
            e.path = path
        raise

    if store is not None:
        store.replace(result)

    logger.info(
        "Loaded %s: %d days, total %s, %d issues",
        path, len(result.daily_totals), result.formatted_total, len(result.issues)
    )
    return result
