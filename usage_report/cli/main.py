"""
CLI interface for Usage Report.

Prints the per-day cost breakdown of a usage report file.
"""

import logging
import sys
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from usage_report.config.loader import DEFAULT_CONFIG, load_report_config
from usage_report.core.errors import ReportReadError
from usage_report.core.money import format_price
from usage_report.core.pipeline import load_report
from usage_report.storage.models import ReportResult
from usage_report.storage.store import ReportStore

app = typer.Typer()
console = Console()

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Usage Report CLI."""
    if ctx.invoked_subcommand is None:
        console.print("Usage Report - Use --help to see available commands")


@app.command()
def report(
    path: str = typer.Argument(..., help="Usage report CSV file"),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with report settings"
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the daily totals as JSON"
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        "-s",
        help="Exit with error code if any row or price was skipped"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every pipeline stage"
    )
):
    """
    Show the cost of a usage report per day and in total.

    Rows that cannot be parsed and prices that cannot be read are left
    out of the totals and listed below them.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        config = load_report_config(config_path) if config_path else DEFAULT_CONFIG
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)

    store = ReportStore()
    try:
        load_report(path, config=config, store=store)
    except ReportReadError as e:
        console.print(f"[red]Error reading report:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)

    result = store.current
    if as_json:
        console.print_json(data=result.to_dict())
    else:
        _display_report(result)

    if strict and result.issues:
        sys.exit(EXIT_CODE_FAIL)
    sys.exit(EXIT_CODE_PASS)


def _display_report(result: ReportResult):
    """Display daily totals, the covered range and the grand total."""
    console.print("\n[bold]Usage Report[/bold]")
    console.print("-" * 40)

    if not result.daily_totals:
        console.print("\n[dim]No priced usage found in report.[/]")
    else:
        first, last = result.date_range
        console.print(f"From: {first} to {last}")

        table = Table()
        table.add_column("Date")
        table.add_column("Price", justify="right")
        for day in result.daily_totals:
            table.add_row(day.date, escape(format_price(day.price, result.currency_symbol)))
        console.print(table)

    console.print(f"[bold]Total:[/bold] {escape(result.formatted_total)}")

    if result.issues:
        _display_issues(result)


def _display_issues(result: ReportResult):
    console.print(
        f"\n[yellow]Skipped {len(result.skipped_rows)} rows, "
        f"excluded {len(result.rejected_prices)} prices[/]"
    )
    table = Table()
    table.add_column("Line", justify="right")
    table.add_column("Kind")
    table.add_column("Reason")
    for issue in result.issues:
        table.add_row(str(issue.line), issue.kind.value, escape(issue.reason))
    console.print(table)


if __name__ == "__main__":
    app()
