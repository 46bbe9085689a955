"""Shared fixtures for mdledger tests."""

import pytest

from mdledger.domain.models import LedgerConfig

START = "## 1. daily income/expense"
END = "## 2. income/expense summary"


@pytest.fixture
def config() -> LedgerConfig:
    """Ledger format with English markers and labels."""
    return LedgerConfig(
        start_marker=START,
        end_marker=END,
        date_prefix="### ",
        field_delimiter="|",
        tag_delimiter=",",
        header_label="category 1",
        separator_token=":----:",
        expense_label="expense",
        income_label="income",
        currency="$",
    )


@pytest.fixture
def ledger_lines() -> list[str]:
    """A small month with two days, decoration rows, and text around the data region."""
    return [
        "# March 2023",
        "",
        "| expense | rent | home | 999 | outside the data region |",
        START,
        "",
        "### 2023-03-01",
        "",
        "| category 1 | category 2 | tags | amount | note |",
        "| :----: | :----: | :----: | :----: | :----: |",
        "| expense | food | snack,tea | 15.50 | lunch |",
        "| income | salary |  | 3000 | pay |",
        "",
        "### 2023-03-02",
        "| category 1 | category 2 | tags | amount | note |",
        "| :----: | :----: | :----: | :----: | :----: |",
        "| expense | food |  | 20 | dinner |",
        "| expense | transport | bus | 4.50 | commute |",
        "| transfer | savings |  | 500 | move to savings |",
        "",
        END,
        "| expense | food |  | 100 | after the end marker |",
    ]
