"""Summary and inspect commands for viewing ledger totals."""

import sys
import tomllib
from pathlib import Path
from typing import Any, NoReturn

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdledger.config import (
    build_ledger_config,
    get_ledger_path,
    get_sort_by,
    load_config_or_default,
    validate_config,
)
from mdledger.domain.aggregate import DayTotals, aggregate, filter_sections, parse_amount, summarize_by_date
from mdledger.domain.errors import LedgerError
from mdledger.domain.models import LedgerConfig
from mdledger.domain.parser import parse_ledger
from mdledger.domain.records import DateSections
from mdledger.domain.report import (
    SORT_CHOICES,
    SectionReport,
    calculate_histogram_bar_length,
    create_summary_report,
    format_money,
)
from mdledger.logging_setup import configure_logging
from mdledger.source import read_ledger_lines

console = Console()


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]{escape(message)}[/red]", style="bold")
    sys.exit(1)


def load_settings(config_path: Path | None) -> tuple[dict[str, Any], LedgerConfig]:
    """Load the config document and ledger format, exiting on bad config."""
    try:
        config = load_config_or_default(config_path)
        validate_config(config)
        return config, build_ledger_config(config)
    except FileNotFoundError:
        fail(f"Config not found: {config_path}")
    except (tomllib.TOMLDecodeError, ValueError) as e:
        fail(f"Invalid config: {e}")


def resolve_ledger_path(path: Path | None, config: dict[str, Any]) -> Path:
    """Pick the ledger path from the argument or the config file."""
    resolved = path or get_ledger_path(config)
    if resolved is None:
        fail("No ledger file given. Pass a path or set ledger.path in the config.")
    return resolved


def load_sections(path: Path, ledger_config: LedgerConfig) -> DateSections:
    """Read and parse a ledger file."""
    return parse_ledger(read_ledger_lines(path), ledger_config)


def render_section(
    title: str,
    color: str,
    section: SectionReport,
    currency: str,
    histogram: bool,
    bar_width: int = 30,
) -> None:
    """Render an expense or income section.

    Args:
        title: Section heading.
        color: Rich color for the heading.
        section: Section data.
        currency: Currency symbol.
        histogram: Whether to show histogram bars.
        bar_width: Width of histogram bar in characters.
    """
    console.print(f"[bold {color}]{title}:[/bold {color}] {format_money(section.total, currency)}")

    max_amount = max((cat.amount for cat in section.categories), default=None)

    for cat_report in section.categories:
        amount_display = format_money(cat_report.amount, currency)
        share = f"({cat_report.percentage:.0f}%)"
        if histogram and max_amount:
            bar = "█" * calculate_histogram_bar_length(cat_report.amount, max_amount, bar_width)
            console.print(f"  {escape(cat_report.category):16} {amount_display:>14} {share:>6} {bar}")
        else:
            console.print(f"  | {escape(cat_report.category)} | {amount_display} | {share}")

    console.print()


def render_daily(days: list[DayTotals], currency: str) -> None:
    """Render per-date income and expense totals."""
    table = Table(title="Daily totals")
    table.add_column("Date", style="cyan")
    table.add_column("Expense", justify="right", style="red")
    table.add_column("Income", justify="right", style="green")
    table.add_column("Net", justify="right")

    for day in days:
        table.add_row(
            escape(day.date),
            format_money(day.expense, currency),
            format_money(day.income, currency),
            format_money(day.net, currency, include_sign=True),
        )

    console.print(table)


def summary_command(
    path: Path | None = None,
    config_path: Path | None = None,
    sort_by: str | None = None,
    histogram: bool = False,
    daily: bool = False,
    verbose: bool = False,
) -> None:
    """Summarize income and expenses in a ledger."""
    configure_logging("INFO" if verbose else None)

    config, ledger_config = load_settings(config_path)
    ledger_path = resolve_ledger_path(path, config)

    sort_by = sort_by or get_sort_by(config)
    if sort_by not in SORT_CHOICES:
        fail(f"Unknown sort order '{sort_by}'. Use one of: {', '.join(SORT_CHOICES)}")

    # Anything that can fail runs before the first line of output
    try:
        sections = load_sections(ledger_path, ledger_config)
        summary = aggregate(sections, ledger_config)
        days = summarize_by_date(sections, ledger_config) if daily else []
    except LedgerError as e:
        fail(str(e))

    report = create_summary_report(summary, sort_by)
    currency = ledger_config.currency

    console.print(f"[bold cyan]{escape(ledger_path.name)}[/bold cyan]\n")
    console.print(f"[bold]Net balance:[/bold] {format_money(report.net, currency)}\n")
    render_section("Total expense", "red", report.expenses, currency, histogram)
    render_section("Total income", "green", report.income, currency, histogram)

    if daily:
        render_daily(days, currency)


def inspect_command(
    category: str,
    path: Path | None = None,
    config_path: Path | None = None,
    verbose: bool = False,
) -> None:
    """List ledger records for a secondary category."""
    configure_logging("INFO" if verbose else None)

    config, ledger_config = load_settings(config_path)
    ledger_path = resolve_ledger_path(path, config)

    try:
        sections = load_sections(ledger_path, ledger_config)
        selected = filter_sections(sections, category)
        totals = aggregate(selected, ledger_config)
    except LedgerError as e:
        fail(str(e))

    count = sum(len(records) for records in selected.values())
    if not count:
        console.print(f"[yellow]No records found for category '{escape(category)}'[/yellow]")
        return

    currency = ledger_config.currency
    table = Table(title=f"{escape(category)} ({count} records)")
    table.add_column("Date", style="cyan")
    table.add_column("Type")
    table.add_column("Tags", style="dim")
    table.add_column("Amount", justify="right")
    table.add_column("Description")

    for date_label in sorted(selected):
        for record in selected[date_label]:
            primary = record.primary_category.strip()
            amount = format_money(parse_amount(record.amount, date_label), currency)
            if primary == ledger_config.expense_label:
                amount = f"[red]{amount}[/red]"
            elif primary == ledger_config.income_label:
                amount = f"[green]{amount}[/green]"
            table.add_row(
                escape(date_label),
                escape(primary),
                escape(", ".join(record.tags)),
                amount,
                escape(record.description.strip()),
            )

    console.print(table)
    console.print(
        f"\n[bold]Expense:[/bold] {format_money(totals.total_expense, currency)}"
        f"  [bold]Income:[/bold] {format_money(totals.total_income, currency)}"
    )
