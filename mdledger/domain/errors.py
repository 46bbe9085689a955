"""Errors raised while reading, parsing and aggregating a ledger.

None of these are recovered inside the domain; the command layer reports
them and stops the run.
"""

from pathlib import Path


class LedgerError(Exception):
    """Base class for all mdledger errors."""


class SourceUnavailableError(LedgerError):
    """The ledger file could not be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read ledger {path}: {reason}")


class MalformedRowError(LedgerError):
    """A data row has fewer fields than a record needs."""

    def __init__(self, line: str, date_label: str, field_count: int) -> None:
        self.line = line
        self.date_label = date_label
        self.field_count = field_count
        super().__init__(f"Malformed row under {date_label!r} ({field_count} fields): {line}")


class InvalidAmountError(LedgerError):
    """A record's amount is not a finite decimal number."""

    def __init__(self, amount: str, date_label: str | None = None) -> None:
        self.amount = amount
        self.date_label = date_label
        where = f" under {date_label!r}" if date_label is not None else ""
        super().__init__(f"Invalid amount{where}: {amount!r}")
