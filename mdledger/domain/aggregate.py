"""Pure functions that reduce parsed ledger sections into totals.

This module contains the functional core for aggregation:
- No I/O operations
- No side effects
- Summation is order independent, so section iteration order never
  changes the result

All amounts are Decimal.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, Overflow, getcontext

from mdledger.domain.errors import InvalidAmountError
from mdledger.domain.models import CategoryName, DateLabel, LedgerConfig
from mdledger.domain.records import DateSections, TransactionRecord

ZERO = Decimal("0")

_AMOUNT_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class LedgerSummary:
    """Immutable income/expense totals for a ledger."""

    total_expense: Decimal = ZERO
    total_income: Decimal = ZERO
    expense_by_category: dict[CategoryName, Decimal] = field(default_factory=dict)
    income_by_category: dict[CategoryName, Decimal] = field(default_factory=dict)

    @property
    def net(self) -> Decimal:
        """Income minus expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class DayTotals:
    """Immutable income/expense totals for one date label."""

    date: DateLabel
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


def parse_amount(text: str, date_label: str | None = None) -> Decimal:
    """Parse an amount cell as a decimal number.

    Only ASCII digits with an optional sign, point and exponent are accepted.

    Args:
        text: Raw amount text, surrounding whitespace allowed.
        date_label: Date label for error context.

    Returns:
        The amount as a Decimal.

    Raises:
        InvalidAmountError: If the text is not a number, or its magnitude is
            outside the decimal context's exponent range.
    """
    stripped = text.strip()
    if not _AMOUNT_PATTERN.fullmatch(stripped):
        raise InvalidAmountError(text, date_label)

    value = Decimal(stripped)
    context = getcontext()
    if value and not context.Emin <= value.adjusted() <= context.Emax:
        raise InvalidAmountError(text, date_label)

    return value


def _add(total: Decimal, amount: Decimal, record: TransactionRecord, date_label: str) -> Decimal:
    try:
        return total + amount
    except Overflow:
        raise InvalidAmountError(record.amount, date_label) from None


def aggregate(sections: DateSections, config: LedgerConfig) -> LedgerSummary:
    """Sum record amounts by primary and secondary category.

    Records whose primary category is neither the expense nor the income
    label still have their amount validated but add to nothing.

    Args:
        sections: Parsed date sections.
        config: Ledger format, supplies the expense and income labels.

    Returns:
        LedgerSummary with totals and per-category buckets.

    Raises:
        InvalidAmountError: On the first amount that is not a number, or
            whose total would overflow.
    """
    total_expense = ZERO
    total_income = ZERO
    expense_by_category: dict[CategoryName, Decimal] = {}
    income_by_category: dict[CategoryName, Decimal] = {}

    for date_label, records in sections.items():
        for record in records:
            amount = parse_amount(record.amount, date_label)
            primary = record.primary_category.strip()
            category = CategoryName(record.secondary_category.strip())

            if primary == config.expense_label:
                total_expense = _add(total_expense, amount, record, date_label)
                bucket = expense_by_category.get(category, ZERO)
                expense_by_category[category] = _add(bucket, amount, record, date_label)
            elif primary == config.income_label:
                total_income = _add(total_income, amount, record, date_label)
                bucket = income_by_category.get(category, ZERO)
                income_by_category[category] = _add(bucket, amount, record, date_label)

    return LedgerSummary(
        total_expense=total_expense,
        total_income=total_income,
        expense_by_category=expense_by_category,
        income_by_category=income_by_category,
    )


def summarize_by_date(sections: DateSections, config: LedgerConfig) -> list[DayTotals]:
    """Compute income and expense per date label.

    Args:
        sections: Parsed date sections.
        config: Ledger format.

    Returns:
        DayTotals for every date label, sorted by label.

    Raises:
        InvalidAmountError: On the first amount that is not a number.
    """
    days: list[DayTotals] = []

    for date_label in sorted(sections):
        summary = aggregate({date_label: sections[date_label]}, config)
        days.append(
            DayTotals(
                date=date_label,
                income=summary.total_income,
                expense=summary.total_expense,
            )
        )

    return days


def filter_sections(sections: DateSections, category: str) -> DateSections:
    """Keep only records whose secondary category matches.

    Args:
        sections: Parsed date sections.
        category: Secondary category to match (compared after trimming).

    Returns:
        Date sections holding only matching records, in ledger order. Dates
        with no match are left out.
    """
    wanted = category.strip()
    selected: dict[DateLabel, tuple[TransactionRecord, ...]] = {}

    for date_label, records in sections.items():
        matches = tuple(r for r in records if r.secondary_category.strip() == wanted)
        if matches:
            selected[date_label] = matches

    return selected
