"""Domain type definitions for mdledger.

These NewTypes provide semantic clarity and help with type checking:
- DateLabel: Text of a date header, taken verbatim from the ledger
- CategoryName: Secondary category used as an aggregation key

LedgerConfig describes the ledger format and is passed explicitly into
the parser and aggregator.
"""

from dataclasses import dataclass
from typing import NewType

# Date label is whatever follows the date header prefix (not validated)
DateLabel = NewType("DateLabel", str)

# Secondary category, trimmed
CategoryName = NewType("CategoryName", str)

DEFAULT_START_MARKER = "## 1. 日常收支"
DEFAULT_END_MARKER = "## 2. 收支汇总"


@dataclass(frozen=True)
class LedgerConfig:
    """Immutable description of the ledger document format."""

    start_marker: str = DEFAULT_START_MARKER
    end_marker: str = DEFAULT_END_MARKER
    date_prefix: str = "### "
    field_delimiter: str = "|"
    tag_delimiter: str = "、"
    header_label: str = "分类 1"
    separator_token: str = ":----:"
    expense_label: str = "支出"
    income_label: str = "收入"
    currency: str = "¥"

    def __post_init__(self) -> None:
        for name in ("field_delimiter", "tag_delimiter"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        for name in ("start_marker", "end_marker", "date_prefix"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be blank")
