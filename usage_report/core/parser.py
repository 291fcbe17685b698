"""
Usage report parsing.

Reads delimited report text into typed usage records. Every column is
parsed by an explicit field parser; rows that fail are reported as
issues with their line number and the remaining rows are kept.
"""

import csv
import io
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List, Optional, Tuple

from .errors import ReportReadError
from .headers import normalize_header
from usage_report.storage.models import IssueKind, ReportIssue, UsageRecord

logger = logging.getLogger(__name__)


class FieldError(ValueError):
    """Raised by a field parser when a cell holds an invalid value."""


def parse_text(value: str) -> str:
    return value.strip()


def parse_required_text(value: str) -> str:
    text = value.strip()
    if not text:
        raise FieldError("value is empty")
    return text


def parse_date(value: str) -> str:
    """Validate a YYYY-MM-DD calendar date, keeping it as a string."""
    text = value.strip()
    try:
        if len(text) != 10:
            raise ValueError(text)
        datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        raise FieldError(f"invalid date {value!r}, expected YYYY-MM-DD")
    return text


def parse_quantity(value: str) -> float:
    """Parse an integer or decimal quantity."""
    text = value.strip()
    try:
        quantity = Decimal(text)
    except InvalidOperation:
        raise FieldError(f"invalid quantity {value!r}")
    if not quantity.is_finite() or not math.isfinite(float(quantity)):
        raise FieldError(f"invalid quantity {value!r}")
    return float(quantity)


@dataclass(frozen=True)
class ColumnSpec:
    """Maps a normalized header key onto a record field."""
    key: str
    attribute: str
    parse: Callable[[str], object]


# Required columns, keyed by normalized header
COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("actionsWorkflow", "actions_workflow", parse_text),
    ColumnSpec("date", "date", parse_date),
    ColumnSpec("pricePerUnit", "price_per_unit", parse_required_text),
    ColumnSpec("product", "product", parse_required_text),
    ColumnSpec("quantity", "quantity", parse_quantity),
    ColumnSpec("repositorySlug", "repository_slug", parse_text),
    ColumnSpec("unitType", "unit_type", parse_required_text),
)


@dataclass(frozen=True)
class ParseResult:
    """Records parsed from a report, plus the rows that were skipped."""
    records: Tuple[UsageRecord, ...]
    issues: Tuple[ReportIssue, ...] = field(default_factory=tuple)


def parse_report(text: str, delimiter: str = ",") -> ParseResult:
    """Parse report text with a header row into usage records.

    Empty lines are skipped. Rows with the wrong number of cells, a
    missing required column or an invalid value become ROW issues.

    Args:
        text: Full report contents
        delimiter: Cell delimiter

    Returns:
        ParseResult with records in file order

    Raises:
        ReportReadError: If the text holds no header row
    """
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)

    header: Optional[List[str]] = None
    try:
        for row in reader:
            if _is_blank(row):
                continue
            header = [normalize_header(cell) for cell in row]
            break
    except csv.Error as e:
        raise ReportReadError(f"Malformed report header: {e}")

    if header is None:
        raise ReportReadError("Report is empty: no header row found")

    positions = {key: index for index, key in enumerate(header)}
    missing = [spec.key for spec in COLUMNS if spec.key not in positions]
    if missing:
        logger.warning("Report header is missing required columns: %s", missing)

    records: List[UsageRecord] = []
    issues: List[ReportIssue] = []

    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            # The reader resumes on the line after the malformed one
            line = reader.line_num
            logger.warning("Skipping line %d: %s", line, e)
            issues.append(ReportIssue(line=line, kind=IssueKind.ROW, reason=f"malformed row: {e}"))
            continue

        if _is_blank(row):
            continue
        line = reader.line_num
        try:
            records.append(_parse_row(row, line, header, positions, missing))
        except FieldError as e:
            logger.warning("Skipping line %d: %s", line, e)
            issues.append(ReportIssue(line=line, kind=IssueKind.ROW, reason=str(e)))

    logger.debug("Parsed %d records, skipped %d rows", len(records), len(issues))
    return ParseResult(records=tuple(records), issues=tuple(issues))


def _parse_row(
    row: List[str],
    line: int,
    header: List[str],
    positions: Dict[str, int],
    missing: List[str],
) -> UsageRecord:
    """Build one record, raising FieldError on the first problem found."""
    if len(row) != len(header):
        raise FieldError(f"expected {len(header)} cells, found {len(row)}")
    if missing:
        raise FieldError(f"missing required columns: {', '.join(missing)}")

    values = {}
    for spec in COLUMNS:
        try:
            values[spec.attribute] = spec.parse(row[positions[spec.key]])
        except FieldError as e:
            raise FieldError(f"{spec.key}: {e}")
    return UsageRecord(line=line, **values)


def _is_blank(row: List[str]) -> bool:
    return all(not cell.strip() for cell in row)
