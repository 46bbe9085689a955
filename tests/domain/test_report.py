"""Tests for mdledger.domain.report pure functions."""

from decimal import Decimal

import pytest

from mdledger.domain.aggregate import LedgerSummary
from mdledger.domain.models import CategoryName
from mdledger.domain.report import (
    calculate_histogram_bar_length,
    calculate_share,
    create_summary_report,
    format_money,
    sort_categories,
)


def buckets(**amounts: str) -> dict[CategoryName, Decimal]:
    return {CategoryName(k): Decimal(v) for k, v in amounts.items()}


class TestSortCategories:
    """Tests for sort_categories."""

    def test_sort_by_value_largest_first(self) -> None:
        """Should put the largest amount first and break ties by name."""
        result = sort_categories(buckets(food="35.5", bus="4.5", rent="900", gym="4.5"), "value")

        assert [cat for cat, _ in result] == ["rent", "food", "bus", "gym"]

    def test_sort_alphabetically(self) -> None:
        """Should sort by category name."""
        result = sort_categories(buckets(food="35.5", bus="4.5", rent="900"), "alpha")

        assert [cat for cat, _ in result] == ["bus", "food", "rent"]

    def test_unknown_sort_raises(self) -> None:
        """Should reject unknown sort orders."""
        with pytest.raises(ValueError):
            sort_categories(buckets(food="1"), "size")


class TestCalculateShare:
    """Tests for calculate_share."""

    def test_share_of_total(self) -> None:
        """Should compute a percentage of the section total."""
        assert calculate_share(Decimal("25"), Decimal("100")) == 25.0

    def test_zero_total(self) -> None:
        """Should return 0 when the total is zero."""
        assert calculate_share(Decimal("5"), Decimal("0")) == 0.0


class TestCreateSummaryReport:
    """Tests for create_summary_report."""

    def test_builds_sections_and_net(self) -> None:
        """Should carry totals through and compute net."""
        summary = LedgerSummary(
            total_expense=Decimal("40"),
            total_income=Decimal("3000"),
            expense_by_category=buckets(food="30", bus="10"),
            income_by_category=buckets(salary="3000"),
        )

        report = create_summary_report(summary)

        assert report.net == Decimal("2960")
        assert report.expenses.total == Decimal("40")
        assert [(c.category, c.percentage) for c in report.expenses.categories] == [("food", 75.0), ("bus", 25.0)]
        assert report.income.categories[0].percentage == 100.0

    def test_empty_summary(self) -> None:
        """Should produce empty sections for an empty summary."""
        report = create_summary_report(LedgerSummary())

        assert report.expenses.categories == []
        assert report.income.categories == []
        assert report.net == 0


class TestHistogram:
    """Tests for calculate_histogram_bar_length."""

    def test_scales_to_width(self) -> None:
        """Should scale bars against the largest amount."""
        assert calculate_histogram_bar_length(Decimal("50"), Decimal("100"), 30) == 15
        assert calculate_histogram_bar_length(Decimal("100"), Decimal("100"), 30) == 30

    def test_zero_max(self) -> None:
        """Should return 0 when the largest amount is not positive."""
        assert calculate_histogram_bar_length(Decimal("5"), Decimal("0"), 30) == 0


class TestFormatMoney:
    """Tests for format_money."""

    def test_two_fraction_digits(self) -> None:
        """Should render two fractional digits with thousands separators."""
        assert format_money(Decimal("2984.5"), "¥") == "¥2,984.50"
        assert format_money(Decimal("3000")) == "3,000.00"

    def test_negative(self) -> None:
        """Should put the minus sign before the currency."""
        assert format_money(Decimal("-24.5"), "$") == "-$24.50"

    def test_include_sign(self) -> None:
        """Should prefix + when asked."""
        assert format_money(Decimal("0"), "$", include_sign=True) == "+$0.00"
