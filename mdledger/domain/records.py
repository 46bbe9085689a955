"""Parsed ledger records."""

from collections.abc import Mapping
from dataclasses import dataclass

from mdledger.domain.models import DateLabel


@dataclass(frozen=True)
class TransactionRecord:
    """Immutable ledger entry.

    Fields hold the raw cell text; the amount is only parsed to a Decimal
    during aggregation.
    """

    primary_category: str
    secondary_category: str
    tags: tuple[str, ...]
    amount: str
    description: str


# Date label -> records in ledger order
DateSections = Mapping[DateLabel, tuple[TransactionRecord, ...]]
