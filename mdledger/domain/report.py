"""Pure functions for shaping a ledger summary into a report.

This module contains the functional core for reporting:
- No I/O operations (no console, no files)
- No side effects
- Pure data transformations

Category buckets are plain dicts; ordering is decided here, at the
reporting boundary.
"""

from dataclasses import dataclass
from decimal import Decimal

from mdledger.domain.aggregate import LedgerSummary
from mdledger.domain.models import CategoryName

SORT_CHOICES = ("value", "alpha")


@dataclass(frozen=True)
class CategoryReport:
    """Immutable category line."""

    category: CategoryName
    amount: Decimal
    percentage: float


@dataclass(frozen=True)
class SectionReport:
    """Immutable expense or income section."""

    categories: list[CategoryReport]
    total: Decimal


@dataclass(frozen=True)
class SummaryReport:
    """Immutable full report with expenses, income, and net."""

    expenses: SectionReport
    income: SectionReport
    net: Decimal


def calculate_share(amount: Decimal, total: Decimal) -> float:
    """Calculate a category's share of its section total.

    Args:
        amount: Category amount.
        total: Section total.

    Returns:
        Percentage (0-100), or 0.0 when the total is not positive.
    """
    if total <= 0:
        return 0.0
    return float(amount / total * 100)


def sort_categories(
    buckets: dict[CategoryName, Decimal],
    sort_by: str = "value",
) -> list[tuple[CategoryName, Decimal]]:
    """Sort category buckets by value or alphabetically.

    Args:
        buckets: Category amounts.
        sort_by: "value" (largest first, ties by name) or "alpha".

    Returns:
        Sorted list of (category, amount) tuples.

    Raises:
        ValueError: If sort_by is not a known choice.
    """
    if sort_by == "alpha":
        return sorted(buckets.items(), key=lambda x: x[0])
    elif sort_by == "value":
        return sorted(buckets.items(), key=lambda x: (-x[1], x[0]))
    raise ValueError(f"sort_by must be one of {', '.join(SORT_CHOICES)}, got {sort_by!r}")


def create_section_report(
    buckets: dict[CategoryName, Decimal],
    total: Decimal,
    sort_by: str = "value",
) -> SectionReport:
    """Create an expense or income section."""
    categories = [
        CategoryReport(category=cat, amount=amt, percentage=calculate_share(amt, total))
        for cat, amt in sort_categories(buckets, sort_by)
    ]
    return SectionReport(categories=categories, total=total)


def create_summary_report(summary: LedgerSummary, sort_by: str = "value") -> SummaryReport:
    """Create the full report from aggregated totals.

    Args:
        summary: Aggregated ledger totals.
        sort_by: Sort method - "value" or "alpha".

    Returns:
        SummaryReport with sorted sections and net balance.
    """
    return SummaryReport(
        expenses=create_section_report(summary.expense_by_category, summary.total_expense, sort_by),
        income=create_section_report(summary.income_by_category, summary.total_income, sort_by),
        net=summary.net,
    )


def calculate_histogram_bar_length(
    amount: Decimal,
    max_amount: Decimal,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Largest amount in the section.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int(abs(amount) / max_amount * bar_width)


def format_money(amount: Decimal, currency: str = "", include_sign: bool = False) -> str:
    """Format an amount with two fractional digits.

    Args:
        amount: Amount to format.
        currency: Currency symbol placed before the number.
        include_sign: Whether to prefix + for non-negative amounts.

    Returns:
        Formatted string (e.g., "¥1,234.50" or "-¥3.00").
    """
    formatted = f"{currency}{abs(amount):,.2f}"
    if amount < 0:
        return f"-{formatted}"
    if include_sign:
        return f"+{formatted}"
    return formatted
